"""Tests for utility helpers."""

import re

from clearance.utils import (
    generate_id,
    generate_reference_number,
    mask_document,
    sanitize_log_data,
    sanitize_string,
    utc_now,
)
from clearance.utils import generators


class TestReferenceNumbers:
    """Test suite for reference number generation"""

    def test_format(self):
        """Test: references follow RCC-<year>-<6 digits>"""
        assert re.fullmatch(r"RCC-2025-\d{6}", generate_reference_number(2025))

    def test_year_is_embedded(self):
        """Test: the given year appears in the reference"""
        assert generate_reference_number(2031).startswith("RCC-2031-")

    def test_suffix_bounds(self, monkeypatch):
        """Test: the suffix spans 100000..999999"""
        monkeypatch.setattr(generators.secrets, "randbelow", lambda n: 0)
        assert generate_reference_number(2025) == "RCC-2025-100000"

        monkeypatch.setattr(generators.secrets, "randbelow", lambda n: n - 1)
        assert generate_reference_number(2025) == "RCC-2025-999999"

    def test_generate_id_is_uuid_string(self):
        """Test: ids are 36-character UUID strings"""
        value = generate_id()
        assert len(value) == 36
        assert value != generate_id()


class TestStrings:
    """Test suite for string helpers"""

    def test_mask_document(self):
        """Test: only the last four characters stay visible"""
        assert mask_document("22-123456-A-22") == "**********A-22"
        assert mask_document("63-123456A75") == "********6A75"

    def test_mask_short_document(self):
        """Test: short values are fully masked"""
        assert mask_document("ABC") == "****"
        assert mask_document("") == "****"

    def test_sanitize_string(self):
        """Test: surrounding whitespace is trimmed"""
        assert sanitize_string("  Stand 1432  ") == "Stand 1432"
        assert sanitize_string("") == ""

    def test_sanitize_log_data_masks_pii(self):
        """Test: PII fields are masked before logging"""
        sanitized = sanitize_log_data({
            "id_number": "22-123456-A-22",
            "password": "admin123",
            "stand_number": "1432",
        })

        assert sanitized["id_number"].endswith("A-22")
        assert "123456" not in sanitized["id_number"]
        assert sanitized["password"] == "****n123"
        assert sanitized["stand_number"] == "1432"


class TestDatetime:
    """Test suite for datetime helpers"""

    def test_utc_now_matches_datastore_precision(self):
        """Test: timestamps are naive and whole-second"""
        now = utc_now()

        assert now.tzinfo is None
        assert now.microsecond == 0
