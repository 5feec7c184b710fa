"""
Pytest Configuration and Shared Fixtures

Store tests run against an in-memory SQLite database through aiosqlite.
Each test gets a fresh database and a controllable clock.
"""

import os
from datetime import datetime, timedelta

import pytest
import pytest_asyncio

os.environ["ENVIRONMENT"] = "test"

from clearance.core.config import Settings
from clearance.db.database import build_engine
from clearance.services.application_store import ApplicationStore

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FrozenClock:
    """Clock that only moves when a test advances it."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture()
def test_settings():
    """Settings pointing at a private in-memory database."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=TEST_DATABASE_URL,
        REFERENCE_YEAR=2025,
    )


@pytest.fixture()
def clock():
    return FrozenClock(datetime(2025, 3, 1, 9, 0, 0))


@pytest_asyncio.fixture
async def engine(test_settings):
    """Engine shared by every store created in one test."""
    engine = build_engine(test_settings)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def store(test_settings, engine, clock):
    """Initialized store on a fresh in-memory database."""
    store = ApplicationStore(test_settings, engine=engine, clock=clock)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture()
def sample_application():
    """Sample clearance application input for testing"""
    return {
        "full_name": "Tendai Moyo",
        "id_number": "22-123456-A-22",
        "phone_number": "+263 77 123 4567",
        "email": "tendai.moyo@example.co.zw",
        "property_address": "14 Hughes Street, Masvingo",
        "stand_number": "1432",
        "property_type": "residential",
        "reason": "sale",
    }
