#!/usr/bin/env python3
"""Initialize the clearance database.

Creates the applications and admins tables if they are missing and seeds
the default admin account. Connection settings come from the environment
(DB_HOST, DB_USER, DB_PASSWORD, DB_NAME, DB_PORT or DATABASE_URL).

Usage:
    python -m clearance.scripts.init_db
"""

import asyncio
import sys

from ..core.config import Settings, settings
from ..core.exceptions import StoreError
from ..core.logging import get_logger, setup_logging
from ..services.application_store import ApplicationStore

logger = get_logger(__name__)


async def init_db(config: Settings) -> int:
    """Run store initialization once.

    Returns:
        Number of applications already stored
    """
    async with ApplicationStore(config) as store:
        applications = await store.get_all_applications()
        admin = await store.get_admin_by_username(config.DEFAULT_ADMIN_USERNAME)

        logger.info(
            "Database ready",
            extra={
                'applications': len(applications),
                'default_admin_id': admin.id if admin else None
            }
        )
        return len(applications)


def main() -> int:
    setup_logging(settings)

    try:
        asyncio.run(init_db(settings))
    except StoreError as e:
        logger.error(
            "Database initialization failed",
            extra={'error': str(e), 'error_type': type(e).__name__}
        )
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
