"""Pydantic schemas for store input and typed records."""

from .application import (
    AdminCreate,
    AdminRecord,
    ApplicationCreate,
    ApplicationRecord,
    clean_document_references,
    decode_admin,
    decode_application,
)

__all__ = [
    "AdminCreate",
    "AdminRecord",
    "ApplicationCreate",
    "ApplicationRecord",
    "clean_document_references",
    "decode_admin",
    "decode_application",
]
