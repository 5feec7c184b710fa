"""Tests for the repository layer.

SQLite drops FOR UPDATE when compiling, so row locking is checked by
compiling the executed statements against the MySQL dialect.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.dialects import mysql

from clearance.repositories import ApplicationRepository


class RecordingSession:
    """Stand-in AsyncSession that keeps every executed statement."""

    def __init__(self):
        self.statements = []

    async def execute(self, statement):
        self.statements.append(statement)
        return SimpleNamespace(scalar_one_or_none=lambda: None)


def compile_for_mysql(statement) -> str:
    return str(statement.compile(dialect=mysql.dialect()))


class TestFindByIdLocking:
    """Test suite for SELECT FOR UPDATE on application lookups"""

    @pytest.mark.asyncio
    async def test_for_update_emits_row_lock(self):
        """Test: find_by_id(for_update=True) selects FOR UPDATE"""
        db = RecordingSession()

        await ApplicationRepository(db).find_by_id("app-1", for_update=True)

        assert compile_for_mysql(db.statements[0]).rstrip().endswith("FOR UPDATE")

    @pytest.mark.asyncio
    async def test_plain_lookup_does_not_lock(self):
        """Test: find_by_id without for_update takes no row lock"""
        db = RecordingSession()

        await ApplicationRepository(db).find_by_id("app-1")

        assert "FOR UPDATE" not in compile_for_mysql(db.statements[0])


class TestStoreWritesLockRows:
    """Test suite for row locking in store write operations"""

    @pytest.fixture()
    def lock_requests(self, monkeypatch):
        requests = []
        find_by_id = ApplicationRepository.find_by_id

        async def recording_find_by_id(self, application_id, for_update=False):
            requests.append(for_update)
            return await find_by_id(self, application_id, for_update=for_update)

        monkeypatch.setattr(ApplicationRepository, "find_by_id", recording_find_by_id)
        return requests

    @pytest.mark.asyncio
    async def test_status_update_locks_row(self, store, sample_application, lock_requests):
        """Test: update_application_status reads the row FOR UPDATE"""
        created = await store.create_application(sample_application)

        await store.update_application_status(created.id, "approved")

        assert lock_requests == [True]

    @pytest.mark.asyncio
    async def test_attachment_locks_row(self, store, sample_application, lock_requests):
        """Test: attach_documents reads the row FOR UPDATE"""
        created = await store.create_application(sample_application)

        await store.attach_documents(created.id, ["deed.pdf"])

        assert lock_requests == [True]

    @pytest.mark.asyncio
    async def test_reads_do_not_lock(self, store, sample_application, lock_requests):
        """Test: get_application reads without a row lock"""
        created = await store.create_application(sample_application)

        await store.get_application(created.id)

        assert lock_requests == [False]
