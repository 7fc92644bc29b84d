"""Tests for deadline arithmetic and date formatting."""

from datetime import date, datetime

import pytest

from instrument_engine.template.dates import (
    compute_deadline,
    estoppel_deadlines,
    format_issue_date,
    format_long_date,
    format_short_date,
    parse_start_date,
)


class TestComputeDeadline:
    """Tests for calendar-day deadline arithmetic."""

    @pytest.mark.parametrize(
        "start,offset,expected",
        [
            (date(2024, 1, 1), 10, date(2024, 1, 11)),
            (date(2024, 1, 1), 28, date(2024, 1, 29)),
            (date(2024, 12, 25), 10, date(2025, 1, 4)),
            (date(2024, 2, 20), 10, date(2024, 3, 1)),
            (date(2023, 2, 20), 10, date(2023, 3, 2)),
            (date(2024, 1, 1), 0, date(2024, 1, 1)),
        ],
    )
    def test_adds_calendar_days(self, start: date, offset: int, expected: date) -> None:
        """Test that weekends and month/year boundaries are plain calendar days."""
        assert compute_deadline(start, offset) == expected


class TestFormatting:
    """Tests for date formatting helpers."""

    def test_long_date(self) -> None:
        """Test weekday, month name, day and year."""
        assert format_long_date(date(2024, 1, 11)) == "Thursday, January 11, 2024"
        assert format_long_date(date(2025, 1, 4)) == "Saturday, January 4, 2025"

    def test_short_date(self) -> None:
        """Test abbreviated weekday and month."""
        assert format_short_date(date(2024, 1, 29)) == "Mon, Jan 29, 2024"

    def test_issue_date(self) -> None:
        """Test day, month name and year without zero padding."""
        assert format_issue_date(date(2024, 3, 5)) == "5 March 2024"
        assert format_issue_date(date(2024, 12, 25)) == "25 December 2024"


class TestParseStartDate:
    """Tests for start date parsing."""

    def test_iso_string(self) -> None:
        """Test that an ISO string parses to a date."""
        assert parse_start_date("2024-01-01") == date(2024, 1, 1)

    def test_datetime_is_truncated(self) -> None:
        """Test that a datetime keeps only its calendar date."""
        assert parse_start_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)

    def test_date_passthrough(self) -> None:
        """Test that a date is returned as-is."""
        assert parse_start_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_invalid_string_raises(self) -> None:
        """Test that malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            parse_start_date("01/02/2024")

    def test_timestamp_string_is_truncated(self) -> None:
        """Test that an ISO timestamp keeps only its calendar date."""
        assert parse_start_date("2024-01-01T23:59:00") == date(2024, 1, 1)


class TestEstoppelDeadlines:
    """Tests for the combined deadline summary."""

    def test_both_windows(self) -> None:
        """Test the 10- and 28-day deadlines from one start date."""
        assert estoppel_deadlines("2024-01-01") == {
            10: "Thu, Jan 11, 2024",
            28: "Mon, Jan 29, 2024",
        }
