"""Pydantic Schemas for Store Input Validation and Record Decoding.

Input schemas validate caller data before it reaches the database.
Record schemas are the typed, explicitly nullable view of persisted rows;
decoding a row that does not fit raises RecordDecodeError.
"""

from datetime import datetime

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.constants import DatabaseLimits, ErrorMessages, TableNames, ValidationLimits
from ..core.exceptions import RecordDecodeError
from ..models.application import Admin, Application, ApplicationStatus
from ..utils import sanitize_string


def _require_text(value: str) -> str:
    sanitized = sanitize_string(value)
    if not sanitized:
        raise ValueError(ErrorMessages.FIELD_EMPTY)
    return sanitized


def clean_document_references(values: list[str] | None) -> list[str] | None:
    """Trim document references and reject blank or oversized ones.

    Raises:
        ValueError: If any reference is empty after trimming or longer than
            ValidationLimits.MAX_DOCUMENT_REFERENCE_LENGTH
    """
    if values is None:
        return None
    cleaned = [sanitize_string(v) for v in values]
    if not all(cleaned):
        raise ValueError(ErrorMessages.DOCUMENT_REFERENCE_EMPTY)
    if any(len(v) > ValidationLimits.MAX_DOCUMENT_REFERENCE_LENGTH for v in cleaned):
        raise ValueError(
            ErrorMessages.DOCUMENT_REFERENCE_TOO_LONG.format(
                max_length=ValidationLimits.MAX_DOCUMENT_REFERENCE_LENGTH
            )
        )
    return cleaned


class ApplicationCreate(BaseModel):
    """Schema for submitting a new clearance application.

    All applicant fields are required except email. Document lists are
    optional and default to empty at creation.
    """
    full_name: str = Field(
        ...,
        min_length=ValidationLimits.MIN_TEXT_LENGTH,
        max_length=ValidationLimits.MAX_NAME_LENGTH
    )
    id_number: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    phone_number: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    email: str | None = None
    property_address: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    stand_number: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    property_type: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    reason: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    documents: list[str] | None = None
    uploaded_documents: list[str] | None = None

    @field_validator(
        'full_name', 'id_number', 'phone_number', 'property_address',
        'stand_number', 'property_type', 'reason'
    )
    @classmethod
    def validate_required_text(cls, v):
        """Trim required text fields and reject blank values."""
        return _require_text(v)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Store a blank email as null."""
        sanitized = sanitize_string(v) if v else ""
        return sanitized or None

    @field_validator('documents', 'uploaded_documents')
    @classmethod
    def validate_document_references(cls, v):
        return clean_document_references(v)


class ApplicationRecord(BaseModel):
    """Typed view of a persisted application row."""
    id: str
    reference_number: str
    full_name: str
    id_number: str
    phone_number: str
    email: str | None = None
    property_address: str
    stand_number: str
    property_type: str
    reason: str | None = None
    documents: list[str] = []
    uploaded_documents: list[str] = []
    status: ApplicationStatus
    submitted_date: datetime
    review_date: datetime | None = None
    completed_date: datetime | None = None
    admin_notes: str | None = None
    reviewed_by: str | None = None

    class Config:
        from_attributes = True

    @field_validator('documents', 'uploaded_documents', mode='before')
    @classmethod
    def default_empty_documents(cls, v):
        """A NULL JSON column reads as an empty list."""
        return [] if v is None else v


class AdminCreate(BaseModel):
    """Schema for creating an administrator account."""
    username: str = Field(
        ...,
        min_length=ValidationLimits.MIN_TEXT_LENGTH,
        max_length=DatabaseLimits.USERNAME_MAX_LENGTH
    )
    password: str = Field(..., min_length=ValidationLimits.MIN_TEXT_LENGTH)
    full_name: str = Field(
        ...,
        min_length=ValidationLimits.MIN_TEXT_LENGTH,
        max_length=ValidationLimits.MAX_NAME_LENGTH
    )

    @field_validator('username', 'full_name')
    @classmethod
    def validate_required_text(cls, v):
        return _require_text(v)


class AdminRecord(BaseModel):
    """Typed view of a persisted admin row."""
    id: str
    username: str
    password: str = Field(..., repr=False)
    full_name: str
    created_at: datetime

    class Config:
        from_attributes = True


def decode_application(row: Application) -> ApplicationRecord:
    """Decode an applications row into a typed record.

    Raises:
        RecordDecodeError: If the row has missing or mistyped values
    """
    try:
        return ApplicationRecord.model_validate(row)
    except ValidationError as e:
        raise RecordDecodeError(TableNames.APPLICATIONS, getattr(row, 'id', None), str(e)) from e


def decode_admin(row: Admin) -> AdminRecord:
    """Decode an admins row into a typed record.

    Raises:
        RecordDecodeError: If the row has missing or mistyped values
    """
    try:
        return AdminRecord.model_validate(row)
    except ValidationError as e:
        raise RecordDecodeError(TableNames.ADMINS, getattr(row, 'id', None), str(e)) from e
