"""Application Store.

Durable storage of clearance applications and administrator accounts, and
enforcement of the application status lifecycle. Request handlers construct
one store, initialize it once, and call its operations directly.

Lookups return None when nothing matches. Database errors (including
unique-constraint violations) propagate unmodified.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..core.config import Settings, settings as default_settings
from ..core.constants import ApplicationStatus as AppStatusConstants, ErrorMessages
from ..core.exceptions import DatabaseConnectionError, StoreNotInitializedError
from ..core.logging import get_logger
from ..db.database import Base, build_engine, build_session_factory
from ..domain.state_machine import parse_status, resolve_completed_date, resolve_review_date
from ..models.application import Admin, Application, ApplicationStatus
from ..repositories import AdminRepository, ApplicationRepository
from ..schemas.application import (
    AdminCreate,
    AdminRecord,
    ApplicationCreate,
    ApplicationRecord,
    clean_document_references,
    decode_admin,
    decode_application,
)
from ..utils.formatting import utc_now
from ..utils.generators import generate_id, generate_reference_number
from ..utils.strings import sanitize_log_data
from ..utils.transaction_helpers import safe_transaction

logger = get_logger(__name__)


class ApplicationStore:
    """Persistence and status transitions for applications and admins.

    Usage:
        ```python
        store = await ApplicationStore.connect(settings)
        record = await store.create_application(ApplicationCreate(...))
        await store.close()
        ```

    or as an async context manager, which initializes on entry and closes
    on exit.
    """

    def __init__(
        self,
        config: Settings | None = None,
        engine: AsyncEngine | None = None,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Args:
            config: Settings (defaults to the environment-loaded settings)
            engine: Pre-built engine. When given, the caller owns its disposal
            clock: Source of timestamps for submitted/review/completed dates
        """
        self.config = config or default_settings
        self._engine = engine
        self._owns_engine = engine is None
        self._clock = clock
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    async def connect(
        cls,
        config: Settings | None = None,
        clock: Callable[[], datetime] = utc_now
    ) -> ApplicationStore:
        """Build and initialize a store, returning a ready-to-use handle.

        Raises:
            DatabaseConnectionError: If initialization fails
        """
        store = cls(config, clock=clock)
        await store.initialize()
        return store

    async def __aenter__(self) -> ApplicationStore:
        if not self.is_initialized:
            await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    async def initialize(self) -> None:
        """Connect, create missing tables and seed the default admin.

        Safe to call more than once: tables are created only if absent and
        the default admin only if no account has its username.

        Raises:
            DatabaseConnectionError: If any step fails. The store is left
                uninitialized and an owned engine is disposed.
        """
        try:
            if self._engine is None:
                self._engine = build_engine(self.config)

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            self._session_factory = build_session_factory(self._engine)
            await self.seed_default_admin()
        except Exception as e:
            self._session_factory = None
            if self._owns_engine and self._engine is not None:
                await self._engine.dispose()
                self._engine = None

            logger.error(
                "Application store initialization failed",
                extra={
                    'error': str(e),
                    'error_type': type(e).__name__,
                    'db_host': self.config.DB_HOST,
                    'db_name': self.config.DB_NAME,
                }
            )
            raise DatabaseConnectionError(
                f"{ErrorMessages.STORE_INITIALIZATION_FAILED}: {e}"
            ) from e

        logger.info(
            "Application store initialized successfully",
            extra={'database': self.config.database_url.render_as_string(hide_password=True)}
        )

    async def close(self) -> None:
        """Release the store's connection. Owned engines are disposed."""
        self._session_factory = None
        if self._owns_engine and self._engine is not None:
            await self._engine.dispose()
            self._engine = None
        logger.debug("Application store closed")

    def _session(self) -> AsyncSession:
        if self._session_factory is None:
            raise StoreNotInitializedError(ErrorMessages.STORE_NOT_INITIALIZED)
        return self._session_factory()

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    async def create_application(
        self,
        application_data: ApplicationCreate | dict[str, Any]
    ) -> ApplicationRecord:
        """Persist a new clearance application in SUBMITTED status.

        Args:
            application_data: Validated input, or a dict to validate

        Returns:
            The full stored record

        Raises:
            pydantic.ValidationError: If a dict input is invalid
            sqlalchemy.exc.IntegrityError: On a reference number collision
        """
        if not isinstance(application_data, ApplicationCreate):
            application_data = ApplicationCreate.model_validate(application_data)

        application = Application(
            id=generate_id(),
            reference_number=generate_reference_number(self.config.REFERENCE_YEAR),
            full_name=application_data.full_name,
            id_number=application_data.id_number,
            phone_number=application_data.phone_number,
            email=application_data.email,
            property_address=application_data.property_address,
            stand_number=application_data.stand_number,
            property_type=application_data.property_type,
            reason=application_data.reason,
            documents=list(application_data.documents or []),
            uploaded_documents=list(application_data.uploaded_documents or []),
            status=AppStatusConstants.DEFAULT_STATUS,
            submitted_date=self._clock(),
            review_date=None,
            completed_date=None,
            admin_notes=None,
            reviewed_by=None,
        )

        async with self._session() as db:
            async with safe_transaction(db):
                await ApplicationRepository(db).create(application)

        logger.info(
            "Application created",
            extra=sanitize_log_data({
                'application_id': application.id,
                'reference_number': application.reference_number,
                'id_number': application.id_number,
                'phone_number': application.phone_number,
            })
        )

        return decode_application(application)

    async def get_application(self, application_id: str) -> ApplicationRecord | None:
        async with self._session() as db:
            application = await ApplicationRepository(db).find_by_id(application_id)
            return decode_application(application) if application else None

    async def get_application_by_reference(self, reference_number: str) -> ApplicationRecord | None:
        async with self._session() as db:
            application = await ApplicationRepository(db).find_by_reference(reference_number)
            return decode_application(application) if application else None

    async def get_all_applications(self) -> list[ApplicationRecord]:
        """All applications, most recently submitted first."""
        async with self._session() as db:
            applications = await ApplicationRepository(db).list_all()
            return [decode_application(app) for app in applications]

    async def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus | str,
        reviewed_by: str | None = None,
        admin_notes: str | None = None,
        reason: str | None = None
    ) -> ApplicationRecord | None:
        """Move an application to a new status.

        The row is read with SELECT FOR UPDATE and written in the same
        transaction. review_date keeps its first value; completed_date is
        stamped when the new status is APPROVED or REJECTED. reviewed_by,
        admin_notes and reason are only overwritten by non-empty values.

        Args:
            application_id: Application ID
            status: New status (enum member or its string value)
            reviewed_by: Reviewing admin
            admin_notes: Notes for the applicant file
            reason: Decision reason

        Returns:
            Updated record, or None if the application does not exist

        Raises:
            ValueError: If status is not a known application status
        """
        new_status = parse_status(status)

        async with self._session() as db:
            async with safe_transaction(db):
                repository = ApplicationRepository(db)
                application = await repository.find_by_id(application_id, for_update=True)
                if application is None:
                    logger.debug(
                        "Status update for unknown application",
                        extra={'application_id': application_id}
                    )
                    return None

                old_status = application.status
                now = self._clock()

                application.status = new_status.value
                application.review_date = resolve_review_date(application.review_date, now)
                application.completed_date = resolve_completed_date(
                    new_status, application.completed_date, now
                )
                application.reviewed_by = reviewed_by or application.reviewed_by
                application.admin_notes = admin_notes or application.admin_notes
                application.reason = reason or application.reason

                await repository.update(application)

        logger.info(
            "Application status updated",
            extra={
                'application_id': application_id,
                'old_status': old_status,
                'new_status': new_status.value,
                'reviewed_by': application.reviewed_by,
            }
        )

        return decode_application(application)

    async def attach_documents(
        self,
        application_id: str,
        documents: list[str]
    ) -> ApplicationRecord | None:
        """Append supporting document references to an application.

        The references are appended to both documents and uploaded_documents.
        The application is put UNDER_REVIEW and review_date is reset to now.

        Returns:
            Updated record, or None if the application does not exist

        Raises:
            ValueError: If a document reference is blank
        """
        references = clean_document_references(list(documents))

        async with self._session() as db:
            async with safe_transaction(db):
                repository = ApplicationRepository(db)
                application = await repository.find_by_id(application_id, for_update=True)
                if application is None:
                    logger.debug(
                        "Document attachment for unknown application",
                        extra={'application_id': application_id}
                    )
                    return None

                application.documents = [*(application.documents or []), *references]
                application.uploaded_documents = [
                    *(application.uploaded_documents or []),
                    *references,
                ]
                application.status = AppStatusConstants.DOCUMENTS_ATTACHED_STATUS
                application.review_date = self._clock()

                await repository.update(application)

        logger.info(
            "Documents attached to application",
            extra={
                'application_id': application_id,
                'documents_added': len(references),
                'documents_total': len(application.documents),
            }
        )

        return decode_application(application)

    # ------------------------------------------------------------------
    # Admins
    # ------------------------------------------------------------------

    async def get_admin(self, admin_id: str) -> AdminRecord | None:
        async with self._session() as db:
            admin = await AdminRepository(db).find_by_id(admin_id)
            return decode_admin(admin) if admin else None

    async def get_admin_by_username(self, username: str) -> AdminRecord | None:
        async with self._session() as db:
            admin = await AdminRepository(db).find_by_username(username)
            return decode_admin(admin) if admin else None

    async def create_admin(self, admin_data: AdminCreate | dict[str, Any]) -> AdminRecord:
        """Persist a new administrator account.

        Raises:
            pydantic.ValidationError: If a dict input is invalid
            sqlalchemy.exc.IntegrityError: If the username is taken
        """
        if not isinstance(admin_data, AdminCreate):
            admin_data = AdminCreate.model_validate(admin_data)

        admin = Admin(
            id=generate_id(),
            username=admin_data.username,
            password=admin_data.password,
            full_name=admin_data.full_name,
            created_at=self._clock(),
        )

        async with self._session() as db:
            async with safe_transaction(db):
                await AdminRepository(db).create(admin)

        logger.info("Admin created", extra={'admin_id': admin.id, 'username': admin.username})

        return decode_admin(admin)

    async def seed_default_admin(self) -> AdminRecord:
        """Create the configured default admin unless the username exists.

        Returns:
            The existing or newly created default admin
        """
        async with self._session() as db:
            async with safe_transaction(db):
                repository = AdminRepository(db)
                admin = await repository.find_by_username(self.config.DEFAULT_ADMIN_USERNAME)

                if admin is None:
                    admin = await repository.create(Admin(
                        id=generate_id(),
                        username=self.config.DEFAULT_ADMIN_USERNAME,
                        password=self.config.DEFAULT_ADMIN_PASSWORD,
                        full_name=self.config.DEFAULT_ADMIN_FULL_NAME,
                        created_at=self._clock(),
                    ))
                    logger.info(
                        "Default admin created",
                        extra={'username': admin.username}
                    )
                else:
                    logger.debug(
                        "Default admin already present",
                        extra={'username': admin.username}
                    )

        return decode_admin(admin)
