"""
Time report domain models.

A time report is a frozen snapshot of the time a VA logged for one client
over a calendar date range. Report lines are copies taken at generation
time, so later edits to the underlying time entries never change an issued
report.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from typing import Optional, Tuple, Iterable

from vaops.domain.models.base import (
    ValueObject,
    DateRange,
    ValidationError,
    new_id,
)

UNTITLED_TASK = "Untitled task"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_short_date(value: date) -> str:
    """Format a date like ``12 Jan 2025``."""
    return f"{value.day:02d} {_MONTHS[value.month - 1]} {value.year}"


def format_duration(total_seconds: int) -> str:
    """Format a duration in seconds as ``<h>h <m>m``."""
    safe_seconds = max(0, int(total_seconds or 0))
    hours = safe_seconds // 3600
    minutes = (safe_seconds % 3600) // 60
    return f"{hours}h {minutes}m"


def suggest_report_name(client_name: str, date_range: DateRange) -> str:
    """Build the default report name for a client and date range."""
    return (
        f"{client_name} – {format_short_date(date_range.date_from)}"
        f"–{format_short_date(date_range.date_to)}"
    )


def resolve_report_name(requested: Optional[str], suggested: str) -> str:
    """
    Pick the name a report is saved under.

    No name at all falls back to the suggestion; a name made only of
    whitespace is rejected.
    """
    name = requested if requested else suggested
    if not name.strip():
        raise ValidationError("Report name cannot be empty", "name")
    return name.strip()


@dataclass(frozen=True)
class PreviewLine(ValueObject):
    """One normalized line of a report preview."""

    entry_date: datetime
    task_title: str
    duration_seconds: int
    notes: Optional[str] = None
    source_time_entry_id: Optional[str] = None

    def validate(self) -> None:
        if self.entry_date is None:
            raise ValidationError("Entry date is required", "entry_date")
        if self.duration_seconds is None or self.duration_seconds < 0:
            raise ValidationError("Duration cannot be negative", "duration_seconds")


@dataclass(frozen=True)
class ReportPreview(ValueObject):
    """
    In-memory result of aggregating time entries; nothing is persisted.
    Totals are derived from the lines so they can never drift apart.
    """

    client_id: str
    client_name: str
    date_range: DateRange
    lines: Tuple[PreviewLine, ...] = ()
    include_notes: bool = False

    def validate(self) -> None:
        if not self.client_id:
            raise ValidationError("Client is required", "client_id")

    @property
    def total_seconds(self) -> int:
        return sum(line.duration_seconds for line in self.lines)

    @property
    def entry_count(self) -> int:
        return len(self.lines)

    @property
    def suggested_name(self) -> str:
        return suggest_report_name(self.client_name, self.date_range)


@dataclass(frozen=True)
class TimeReportEntry:
    """
    One persisted line of a time report.

    ``session_id`` and ``task_id`` are not stored on the line; they are
    resolved through ``source_time_entry_id`` when the line is loaded and are
    None once the source entry is gone.
    """

    report_id: str
    entry_date: datetime
    task_title: str
    duration_seconds: int
    notes: Optional[str] = None
    source_time_entry_id: Optional[str] = None
    id: str = field(default_factory=new_id)
    session_id: Optional[str] = field(default=None, compare=False)
    task_id: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class TimeReport:
    """Immutable named snapshot of a client's time over a date range."""

    va_user_id: str
    client_id: str
    name: str
    date_from: date
    date_to: date
    total_seconds: int
    entry_count: int
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)
    entries: Tuple[TimeReportEntry, ...] = field(default=(), compare=False)
    client_name: Optional[str] = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        va_user_id: str,
        client_id: str,
        name: str,
        date_range: DateRange,
        lines: Iterable[PreviewLine],
    ) -> "TimeReport":
        """
        Snapshot preview lines into a new report.
        Totals are computed here, once, from the copied lines.
        """
        if not va_user_id:
            raise ValidationError("VA is required", "va_user_id")
        if not client_id:
            raise ValidationError("Client is required", "client_id")
        if not name or not name.strip():
            raise ValidationError("Report name cannot be empty", "name")

        report_id = new_id()
        entries = tuple(
            TimeReportEntry(
                report_id=report_id,
                entry_date=line.entry_date,
                task_title=line.task_title or UNTITLED_TASK,
                duration_seconds=line.duration_seconds,
                notes=line.notes,
                source_time_entry_id=line.source_time_entry_id,
            )
            for line in lines
        )

        return cls(
            id=report_id,
            va_user_id=va_user_id,
            client_id=client_id,
            name=name.strip(),
            date_from=date_range.date_from,
            date_to=date_range.date_to,
            total_seconds=sum(entry.duration_seconds for entry in entries),
            entry_count=len(entries),
            entries=entries,
        )

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.date_from, self.date_to)


@dataclass(frozen=True)
class ReportDisplayRow:
    """A row of the grouped report breakdown shown to VAs and clients."""

    key: str
    entry_date: datetime
    task_title: str
    duration_seconds: int
    notes: Optional[str]
    level: int
    is_session_summary: bool
