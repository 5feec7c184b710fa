"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

# ============================================================================
# APPLICATION STATUS CONSTANTS
# ============================================================================

class ApplicationStatus:
    """Application status values."""
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"

    # Statuses that stamp completed_date when set
    COMPLETION_STATUSES = [
        APPROVED,
        REJECTED,
    ]

    # Default status for new applications
    DEFAULT_STATUS = SUBMITTED

    # Status forced by a document attachment
    DOCUMENTS_ATTACHED_STATUS = UNDER_REVIEW


# ============================================================================
# REFERENCE NUMBER CONSTANTS
# ============================================================================

class ReferenceNumber:
    """Human-facing reference number format: RCC-<year>-<6 digits>."""
    PREFIX = "RCC"
    SEPARATOR = "-"
    DEFAULT_YEAR = 2025
    SUFFIX_MIN = 100000
    SUFFIX_MAX = 999999


# ============================================================================
# DEFAULT ADMIN CONSTANTS
# ============================================================================

class DefaultAdmin:
    """Administrator account seeded at store initialization."""
    USERNAME = "admin"
    PASSWORD = "admin123"
    FULL_NAME = "System Administrator"


# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

class DatabaseLimits:
    """Database field length limits."""
    ID_LENGTH = 36  # str(uuid4())
    REFERENCE_NUMBER_MAX_LENGTH = 255
    USERNAME_MAX_LENGTH = 255
    STATUS_MAX_LENGTH = 20

    # Connection pool settings
    POOL_SIZE = 10
    MAX_OVERFLOW = 20


class TableNames:
    """Persisted table names."""
    APPLICATIONS = "applications"
    ADMINS = "admins"


# ============================================================================
# VALIDATION CONSTANTS
# ============================================================================

class ValidationLimits:
    """Input validation limits."""
    MIN_TEXT_LENGTH = 1
    MAX_NAME_LENGTH = 255
    MAX_DOCUMENT_REFERENCE_LENGTH = 1024


# ============================================================================
# SECURITY CONSTANTS
# ============================================================================

class Security:
    """Security-related constants."""
    # Document masking
    DOCUMENT_MASK_CHAR = "*"
    DOCUMENT_VISIBLE_CHARS = 4  # Show last 4 characters
    DOCUMENT_MASK_FULL = "****"  # When document is too short


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    STORE_NOT_INITIALIZED = "Database connection not established"
    STORE_INITIALIZATION_FAILED = "Failed to initialize application store"
    FIELD_EMPTY = "Field cannot be empty"
    INVALID_STATUS = "Invalid application status '{status}'. Valid statuses are: {valid}"
    DOCUMENT_REFERENCE_EMPTY = "Document references cannot be empty"
    DOCUMENT_REFERENCE_TOO_LONG = "Document references cannot exceed {max_length} characters"
