"""DateTime utilities."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as stored by the datastore.

    MySQL DATETIME columns hold naive values at whole-second precision, so
    the store stamps records with naive UTC truncated to the second. Values
    read back then compare equal to the ones that were written.

    Returns:
        Naive UTC datetime without microseconds
    """
    return datetime.now(UTC).replace(tzinfo=None, microsecond=0)
