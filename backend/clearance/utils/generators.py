"""ID and reference number generation utilities."""

import secrets
import uuid

from ..core.constants import ReferenceNumber


def generate_id() -> str:
    """Generate a primary key for a new row.

    Returns:
        UUID4 string (36 characters)
    """
    return str(uuid.uuid4())


def generate_reference_number(year: int = ReferenceNumber.DEFAULT_YEAR) -> str:
    """Generate a human-facing application reference number.

    The 6-digit suffix is random; collisions are possible and are left to
    the unique constraint on the reference_number column.

    Args:
        year: Year embedded in the reference

    Returns:
        Reference number string

    Examples:
        >>> generate_reference_number(2025)
        "RCC-2025-482913"
    """
    span = ReferenceNumber.SUFFIX_MAX - ReferenceNumber.SUFFIX_MIN + 1
    suffix = ReferenceNumber.SUFFIX_MIN + secrets.randbelow(span)
    return ReferenceNumber.SEPARATOR.join(
        [ReferenceNumber.PREFIX, str(year), str(suffix)]
    )
