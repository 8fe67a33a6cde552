"""Report aggregation service.
Turns raw time entries into normalized report preview lines and totals.
"""

from datetime import datetime, time, timezone
from typing import Iterable, List, Tuple
from zoneinfo import ZoneInfo

from vaops.domain.models.base import DateRange, ValidationError
from vaops.domain.models.client import Client
from vaops.domain.models.time_entry import TimeEntry
from vaops.domain.models.time_report import (
    PreviewLine,
    ReportPreview,
    UNTITLED_TASK,
)

END_OF_DAY = time(23, 59, 59, 999000)


class ReportAggregationService:
    """
    Domain service for building time report previews.

    Calendar dates are interpreted in the VA's display timezone; stored
    timestamps are naive UTC.
    """

    def __init__(self, display_timezone: str = "UTC"):
        self.display_timezone = ZoneInfo(display_timezone)

    def query_window(self, date_range: DateRange) -> Tuple[datetime, datetime]:
        """
        Convert an inclusive calendar range into inclusive UTC timestamp bounds:
        start of ``date_from`` through 23:59:59.999 of ``date_to``.
        """
        start = datetime.combine(date_range.date_from, time.min, tzinfo=self.display_timezone)
        end = datetime.combine(date_range.date_to, END_OF_DAY, tzinfo=self.display_timezone)
        return self._to_naive_utc(start), self._to_naive_utc(end)

    def to_preview_line(self, entry: TimeEntry, include_notes: bool) -> PreviewLine:
        """Normalize one time entry into a report line."""
        title = (entry.task_title or "").strip() or UNTITLED_TASK
        return PreviewLine(
            entry_date=entry.started_at,
            task_title=title,
            duration_seconds=entry.duration_seconds,
            notes=(entry.notes or None) if include_notes else None,
            source_time_entry_id=entry.id,
        )

    def build_preview(
        self,
        client: Client,
        date_range: DateRange,
        entries: Iterable[TimeEntry],
        include_notes: bool = False,
    ) -> ReportPreview:
        """
        Build a preview from the entries of one client.
        Lines come out newest first by start time, ties broken by entry id.
        """
        start, end = self.query_window(date_range)
        selected: List[TimeEntry] = []
        for entry in entries:
            if entry.client_id is not None and entry.client_id != client.id:
                raise ValidationError(
                    f"Time entry {entry.id} does not belong to client {client.id}"
                )
            if entry.started_at is None or not (start <= entry.started_at <= end):
                continue
            selected.append(entry)

        # two stable sorts: id ascending, then start time descending
        selected.sort(key=lambda item: item.id)
        selected.sort(key=lambda item: item.started_at, reverse=True)

        return ReportPreview(
            client_id=client.id,
            client_name=client.display_name,
            date_range=date_range,
            lines=tuple(self.to_preview_line(entry, include_notes) for entry in selected),
            include_notes=include_notes,
        )

    @staticmethod
    def _to_naive_utc(value: datetime) -> datetime:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
