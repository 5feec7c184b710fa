"""Transaction Helper Utilities.

Provides safe transaction management with automatic rollback on errors.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def safe_transaction(
    db: AsyncSession
) -> AsyncGenerator[AsyncSession, None]:
    """Context manager for safe database transactions.

    Automatically commits on success, rolls back on any exception.

    Args:
        db: AsyncSession to manage

    Yields:
        The same AsyncSession for use within the context

    Raises:
        Any exception that occurs during the transaction is re-raised
        after rolling back the transaction.

    Usage:
        ```python
        async with session_factory() as db:
            async with safe_transaction(db):
                application.status = ApplicationStatus.APPROVED.value
        ```
    """
    try:
        yield db
        await db.commit()
        logger.debug("Transaction committed successfully")
    except Exception as e:
        await db.rollback()
        logger.error(
            "Transaction rolled back due to error",
            extra={
                'error': str(e),
                'error_type': type(e).__name__
            }
        )
        raise
