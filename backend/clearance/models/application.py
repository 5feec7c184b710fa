"""SQLAlchemy Models for Clearance Applications and Admins.

Column names and types mirror the persisted MySQL schema.
"""

import enum

from sqlalchemy import JSON, Column, DateTime, Index, String, Text

from ..core.constants import (
    ApplicationStatus as AppStatusConstants,
    DatabaseLimits,
    TableNames,
)
from ..db.database import Base


class ApplicationStatus(str, enum.Enum):
    """Application status enum."""
    SUBMITTED = AppStatusConstants.SUBMITTED
    UNDER_REVIEW = AppStatusConstants.UNDER_REVIEW
    APPROVED = AppStatusConstants.APPROVED
    REJECTED = AppStatusConstants.REJECTED


class Application(Base):
    """Rates clearance application model."""

    __tablename__ = TableNames.APPLICATIONS

    __table_args__ = (
        Index('idx_applications_submitted_date', 'submitted_date'),
    )

    id = Column(String(DatabaseLimits.ID_LENGTH), primary_key=True)
    reference_number = Column(
        String(DatabaseLimits.REFERENCE_NUMBER_MAX_LENGTH),
        nullable=False,
        unique=True
    )
    full_name = Column(Text, nullable=False)
    id_number = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    email = Column(Text, nullable=True)
    property_address = Column(Text, nullable=False)
    stand_number = Column(Text, nullable=False)
    property_type = Column(Text, nullable=False)
    reason = Column(Text, nullable=False)
    documents = Column(JSON, nullable=True)
    uploaded_documents = Column(JSON, nullable=True)
    status = Column(
        String(DatabaseLimits.STATUS_MAX_LENGTH),
        nullable=False,
        default=AppStatusConstants.DEFAULT_STATUS,
        server_default=AppStatusConstants.DEFAULT_STATUS
    )
    submitted_date = Column(DateTime, nullable=False)
    review_date = Column(DateTime, nullable=True)
    completed_date = Column(DateTime, nullable=True)
    admin_notes = Column(Text, nullable=True)
    reviewed_by = Column(Text, nullable=True)

    def __repr__(self):
        return (
            f"<Application(id={self.id}, reference={self.reference_number}, "
            f"status={self.status})>"
        )


class Admin(Base):
    """Administrator account model.

    The password is stored as given (plaintext), matching the existing
    portal's accounts table.
    """

    __tablename__ = TableNames.ADMINS

    id = Column(String(DatabaseLimits.ID_LENGTH), primary_key=True)
    username = Column(
        String(DatabaseLimits.USERNAME_MAX_LENGTH),
        nullable=False,
        unique=True
    )
    password = Column(Text, nullable=False)
    full_name = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Admin(id={self.id}, username={self.username})>"
