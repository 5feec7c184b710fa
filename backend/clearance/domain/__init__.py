"""Domain layer: application lifecycle rules."""

from .state_machine import (
    FINAL_STATES,
    is_final_state,
    parse_status,
    resolve_completed_date,
    resolve_review_date,
)

__all__ = [
    "FINAL_STATES",
    "is_final_state",
    "parse_status",
    "resolve_completed_date",
    "resolve_review_date",
]
