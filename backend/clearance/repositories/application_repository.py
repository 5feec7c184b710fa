"""Application Repository.

Data access layer for Application entities.
Separates data access logic from business logic (Repository Pattern).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.application import Application


class ApplicationRepository:
    """Repository for Application data access operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(
        self,
        application_id: str,
        for_update: bool = False
    ) -> Application | None:
        """Find application by ID.

        Args:
            application_id: Application UUID string
            for_update: If True, use SELECT FOR UPDATE

        Returns:
            Application if found, None otherwise
        """
        query = select(Application).where(Application.id == application_id)

        if for_update:
            query = query.with_for_update()

        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def find_by_reference(self, reference_number: str) -> Application | None:
        """Find application by its human-facing reference number.

        Args:
            reference_number: Reference such as RCC-2025-123456

        Returns:
            Application if found, None otherwise
        """
        result = await self.db.execute(
            select(Application).where(Application.reference_number == reference_number)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Application]:
        """List every application, most recently submitted first."""
        result = await self.db.execute(
            select(Application).order_by(Application.submitted_date.desc())
        )
        return list(result.scalars().all())

    async def create(self, application: Application) -> Application:
        """Create a new application.

        Args:
            application: Application entity to create

        Returns:
            Created application
        """
        self.db.add(application)
        await self.db.flush()
        return application

    async def update(self, application: Application) -> Application:
        """Flush pending changes on an existing application.

        Args:
            application: Application entity to update

        Returns:
            Updated application
        """
        await self.db.flush()
        await self.db.refresh(application)
        return application
