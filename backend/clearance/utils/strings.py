"""String manipulation utilities."""

from typing import Any

from ..core.constants import Security


def mask_document(document: str, visible_chars: int | None = None) -> str:
    """Mask identity document for security (PII protection).

    Shows only the last N characters, masking the rest with asterisks.

    Args:
        document: The document string to mask
        visible_chars: Number of characters to show at the end (default from Security constants)

    Returns:
        Masked document string

    Examples:
        >>> mask_document("63-123456A75")
        "********6A75"
        >>> mask_document("ABC")
        "****"
    """
    if not document:
        return Security.DOCUMENT_MASK_FULL

    visible = visible_chars or Security.DOCUMENT_VISIBLE_CHARS

    if len(document) <= visible:
        return Security.DOCUMENT_MASK_FULL

    masked_length = len(document) - visible
    return Security.DOCUMENT_MASK_CHAR * masked_length + document[-visible:]


def sanitize_string(value: str) -> str:
    """Sanitize string by trimming surrounding whitespace.

    Args:
        value: String to sanitize

    Returns:
        Sanitized string

    Examples:
        >>> sanitize_string("  hello world  ")
        "hello world"
    """
    if not value:
        return ""

    return value.strip()


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Mask PII fields before a dict is attached to a log record.

    Args:
        data: Dictionary that may contain applicant PII

    Returns:
        Copy of the dictionary with PII values masked
    """
    sensitive_fields = {'id_number', 'phone_number', 'email', 'password'}
    sanitized = {}

    for key, value in data.items():
        if key in sensitive_fields and isinstance(value, str):
            sanitized[key] = mask_document(value)
        else:
            sanitized[key] = value

    return sanitized
