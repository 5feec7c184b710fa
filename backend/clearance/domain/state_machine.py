"""Status Lifecycle for Clearance Applications.

State Diagram:
    SUBMITTED  (initial, set at creation)
        │
        ├──> UNDER_REVIEW  (forced whenever documents are attached)
        ├──> APPROVED      (stamps completed_date)
        └──> REJECTED      (stamps completed_date)

Rules:
- Applications start in SUBMITTED status
- Any status may be set from any other status. APPROVED and REJECTED are
  final in the business sense but the store does not block later changes
- review_date is first-write-wins for status updates: once set it is kept
- completed_date is stamped each time the status is set to APPROVED or
  REJECTED and is otherwise carried over unchanged
"""

from datetime import datetime

from ..core.constants import ApplicationStatus as AppStatusConstants, ErrorMessages
from ..models.application import ApplicationStatus

FINAL_STATES: list[ApplicationStatus] = [
    ApplicationStatus(status) for status in AppStatusConstants.COMPLETION_STATUSES
]


def parse_status(value: ApplicationStatus | str) -> ApplicationStatus:
    """Normalize a status value to ApplicationStatus.

    Args:
        value: Enum member or its string value

    Returns:
        Matching ApplicationStatus

    Raises:
        ValueError: If the value names no known status
    """
    if isinstance(value, ApplicationStatus):
        return value

    try:
        return ApplicationStatus(value)
    except ValueError:
        raise ValueError(
            ErrorMessages.INVALID_STATUS.format(
                status=value,
                valid=', '.join(s.value for s in ApplicationStatus)
            )
        ) from None


def is_final_state(status: ApplicationStatus) -> bool:
    """Check if a status is a final (decision) state.

    Args:
        status: Application status to check

    Returns:
        True if status is APPROVED or REJECTED, False otherwise
    """
    return status in FINAL_STATES


def resolve_review_date(existing: datetime | None, now: datetime) -> datetime:
    """First-write-wins review timestamp."""
    return existing or now


def resolve_completed_date(
    status: ApplicationStatus,
    existing: datetime | None,
    now: datetime
) -> datetime | None:
    """Completion timestamp after moving to status.

    Args:
        status: New application status
        existing: Current completed_date
        now: Time of the transition

    Returns:
        now for final states, the existing value otherwise
    """
    if is_final_state(status):
        return now
    return existing
