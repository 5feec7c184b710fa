"""Admin Repository.

Data access layer for administrator accounts.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.application import Admin


class AdminRepository:
    """Repository for Admin data access operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, admin_id: str) -> Admin | None:
        result = await self.db.execute(select(Admin).where(Admin.id == admin_id))
        return result.scalar_one_or_none()

    async def find_by_username(self, username: str) -> Admin | None:
        """Find admin by unique username.

        Args:
            username: Login name

        Returns:
            Admin if found, None otherwise
        """
        result = await self.db.execute(select(Admin).where(Admin.username == username))
        return result.scalar_one_or_none()

    async def create(self, admin: Admin) -> Admin:
        self.db.add(admin)
        await self.db.flush()
        return admin
