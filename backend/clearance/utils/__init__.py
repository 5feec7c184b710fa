"""Utility functions organized by domain.

All functions are re-exported here. Prefer importing from specific modules
for clarity:
    from clearance.utils.formatting import utc_now
    from clearance.utils.strings import mask_document
    from clearance.utils.generators import generate_reference_number
"""

# Formatting
from .formatting import utc_now

# Generators
from .generators import generate_id, generate_reference_number

# Strings
from .strings import mask_document, sanitize_log_data, sanitize_string

__all__ = [
    # Formatting
    "utc_now",
    # Generators
    "generate_id",
    "generate_reference_number",
    # Strings
    "mask_document",
    "sanitize_string",
    "sanitize_log_data",
]
