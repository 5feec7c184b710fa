"""
Tests for the Application Status Lifecycle

Tests validate status parsing and the review/completion timestamp rules.
"""

from datetime import datetime

import pytest

from clearance.domain.state_machine import (
    FINAL_STATES,
    is_final_state,
    parse_status,
    resolve_completed_date,
    resolve_review_date,
)
from clearance.models.application import ApplicationStatus

EARLIER = datetime(2025, 1, 10, 8, 0, 0)
NOW = datetime(2025, 1, 12, 14, 30, 0)


class TestParseStatus:
    """Test suite for status normalization"""

    def test_parse_enum_member(self):
        """Test: enum members pass through unchanged"""
        assert parse_status(ApplicationStatus.APPROVED) is ApplicationStatus.APPROVED

    def test_parse_string_values(self):
        """Test: every status string value parses"""
        assert parse_status("submitted") is ApplicationStatus.SUBMITTED
        assert parse_status("under_review") is ApplicationStatus.UNDER_REVIEW
        assert parse_status("approved") is ApplicationStatus.APPROVED
        assert parse_status("rejected") is ApplicationStatus.REJECTED

    def test_parse_unknown_value(self):
        """Test: unknown values raise ValueError listing the valid statuses"""
        with pytest.raises(ValueError) as exc_info:
            parse_status("APPROVED")
        assert "Invalid application status 'APPROVED'" in str(exc_info.value)
        assert "under_review" in str(exc_info.value)


class TestFinalStates:
    """Test suite for final state detection"""

    def test_final_states(self):
        """Test: APPROVED and REJECTED are the only final states"""
        assert FINAL_STATES == [ApplicationStatus.APPROVED, ApplicationStatus.REJECTED]

    def test_is_final_state_approved(self):
        """Test: APPROVED is a final state"""
        assert is_final_state(ApplicationStatus.APPROVED) is True

    def test_is_final_state_rejected(self):
        """Test: REJECTED is a final state"""
        assert is_final_state(ApplicationStatus.REJECTED) is True

    def test_is_final_state_submitted(self):
        """Test: SUBMITTED is not a final state"""
        assert is_final_state(ApplicationStatus.SUBMITTED) is False

    def test_is_final_state_under_review(self):
        """Test: UNDER_REVIEW is not a final state"""
        assert is_final_state(ApplicationStatus.UNDER_REVIEW) is False


class TestTimestampRules:
    """Test suite for review and completion timestamps"""

    def test_review_date_set_when_absent(self):
        """Test: first review takes the current time"""
        assert resolve_review_date(None, NOW) == NOW

    def test_review_date_kept_when_present(self):
        """Test: an existing review date wins"""
        assert resolve_review_date(EARLIER, NOW) == EARLIER

    @pytest.mark.parametrize("status", [ApplicationStatus.APPROVED, ApplicationStatus.REJECTED])
    def test_completed_date_stamped_for_final_states(self, status):
        """Test: final states always take the current time"""
        assert resolve_completed_date(status, None, NOW) == NOW
        assert resolve_completed_date(status, EARLIER, NOW) == NOW

    @pytest.mark.parametrize("status", [ApplicationStatus.SUBMITTED, ApplicationStatus.UNDER_REVIEW])
    def test_completed_date_carried_for_other_states(self, status):
        """Test: non-final states keep whatever was there"""
        assert resolve_completed_date(status, None, NOW) is None
        assert resolve_completed_date(status, EARLIER, NOW) == EARLIER
