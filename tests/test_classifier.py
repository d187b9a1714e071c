"""
Tests for enrollment status classification.
"""
import pytest

from enrollmate.classifier import AT_RISK, FULL, OK, classify, parse_enrollment
from enrollmate.exceptions import ParseError


class TestClassify:
    """Test the status thresholds."""

    @pytest.mark.parametrize("current,total,expected", [
        (0, 30, AT_RISK),
        (30, 30, FULL),
        (31, 30, FULL),
        (5, 20, AT_RISK),
        (6, 20, OK),
        (1, 10, AT_RISK),
        (2, 10, OK),
        (3, 9, OK),
    ])
    def test_thresholds(self, current, total, expected):
        assert classify(current, total) == expected

    def test_zero_capacity_is_full(self):
        assert classify(0, 0) == FULL

    def test_small_section_with_one_student_is_ok(self):
        """Sections under 10 seats are only at risk when empty."""
        assert classify(1, 9) == OK
        assert classify(0, 9) == AT_RISK

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            classify(-1, 10)


class TestParseEnrollment:
    """Test parsing of 'current/total' strings."""

    def test_basic(self):
        assert parse_enrollment("12/30") == (12, 30)

    def test_whitespace(self):
        assert parse_enrollment(" 0 / 25 ") == (0, 25)

    @pytest.mark.parametrize("text", ["", "12", "a/b", "12/30/40", "-1/30"])
    def test_malformed(self, text):
        with pytest.raises(ParseError):
            parse_enrollment(text)
