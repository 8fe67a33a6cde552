"""
Unit tests for time report domain models.
"""

from datetime import date, datetime

import pytest

from vaops.domain.models.base import DateRange, ValidationError
from vaops.domain.models.time_report import (
    PreviewLine,
    TimeReport,
    UNTITLED_TASK,
    format_duration,
    format_short_date,
    resolve_report_name,
    suggest_report_name,
)


JANUARY = DateRange(date(2024, 1, 1), date(2024, 1, 31))


class TestDateRange:
    """Test cases for DateRange value object."""

    def test_single_day_is_valid(self):
        day = DateRange(date(2024, 1, 5), date(2024, 1, 5))

        assert day.days == 1

    def test_reversed_range_is_rejected(self):
        with pytest.raises(ValidationError, match="End date cannot be before start date"):
            DateRange(date(2024, 1, 31), date(2024, 1, 1))

    def test_missing_dates_are_rejected(self):
        with pytest.raises(ValidationError, match="Start date is required"):
            DateRange(None, date(2024, 1, 1))
        with pytest.raises(ValidationError, match="End date is required"):
            DateRange(date(2024, 1, 1), None)


class TestFormatting:
    """Test cases for report formatting helpers."""

    def test_short_date(self):
        assert format_short_date(date(2025, 1, 2)) == "02 Jan 2025"
        assert format_short_date(date(2024, 12, 31)) == "31 Dec 2024"

    def test_duration(self):
        assert format_duration(0) == "0h 0m"
        assert format_duration(5400) == "1h 30m"
        assert format_duration(59) == "0h 0m"
        assert format_duration(-30) == "0h 0m"

    def test_suggested_name(self):
        assert suggest_report_name("Acme Co", JANUARY) == "Acme Co – 01 Jan 2024–31 Jan 2024"


class TestResolveReportName:
    """Test cases for report name resolution."""

    def test_missing_name_uses_suggestion(self):
        assert resolve_report_name(None, "Acme Co – Jan") == "Acme Co – Jan"
        assert resolve_report_name("", "Acme Co – Jan") == "Acme Co – Jan"

    def test_name_is_trimmed(self):
        assert resolve_report_name("  January retainer ", "ignored") == "January retainer"

    def test_whitespace_only_name_is_rejected(self):
        with pytest.raises(ValidationError, match="Report name cannot be empty"):
            resolve_report_name("   ", "Acme Co – Jan")


class TestTimeReport:
    """Test cases for TimeReport snapshot creation."""

    def test_create_computes_totals_from_lines(self):
        lines = [
            PreviewLine(datetime(2024, 1, 12, 14), "Bookkeeping", 2700, source_time_entry_id="te-2"),
            PreviewLine(datetime(2024, 1, 12, 10), "Bookkeeping", 900, source_time_entry_id="te-3"),
            PreviewLine(datetime(2024, 1, 10, 9), "Inbox", 1800, notes="Cleared", source_time_entry_id="te-1"),
        ]

        report = TimeReport.create("va-1", "client-acme", "January", JANUARY, lines)

        assert report.total_seconds == 5400
        assert report.entry_count == 3
        assert [entry.source_time_entry_id for entry in report.entries] == ["te-2", "te-3", "te-1"]
        assert all(entry.report_id == report.id for entry in report.entries)
        assert report.entries[2].notes == "Cleared"
        assert report.date_range == JANUARY

    def test_create_without_lines(self):
        report = TimeReport.create("va-1", "client-acme", "Empty", JANUARY, [])

        assert report.total_seconds == 0
        assert report.entry_count == 0
        assert report.entries == ()

    def test_blank_title_is_replaced(self):
        line = PreviewLine(datetime(2024, 1, 10), "", 60)

        report = TimeReport.create("va-1", "client-acme", "January", JANUARY, [line])

        assert report.entries[0].task_title == UNTITLED_TASK

    def test_negative_duration_is_rejected(self):
        with pytest.raises(ValidationError):
            PreviewLine(datetime(2024, 1, 10), "Inbox", -1)

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            TimeReport.create("va-1", "client-acme", "  ", JANUARY, [])
