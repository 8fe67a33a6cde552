"""
Time report mapper for converting between domain snapshots and database models.
"""

from typing import Iterable, Optional, Tuple

from vaops.domain.models.time_report import TimeReport, TimeReportEntry
from vaops.infrastructure.mappers.client_mapper import ClientMapper
from vaops.infrastructure.db.models import (
    TimeEntryModel,
    TimeReportEntryModel,
    TimeReportModel,
)


class TimeReportMapper:
    """Maps between TimeReport aggregates and TimeReportModel rows."""

    def domain_to_model(self, report: TimeReport) -> TimeReportModel:
        """Convert a report and its entries into new rows."""
        model = TimeReportModel(
            id=report.id,
            va_user_id=report.va_user_id,
            client_id=report.client_id,
            name=report.name,
            date_from=report.date_from,
            date_to=report.date_to,
            total_seconds=report.total_seconds,
            entry_count=report.entry_count,
            created_at=report.created_at,
        )
        model.entries = [self.entry_to_model(entry) for entry in report.entries]
        return model

    def entry_to_model(self, entry: TimeReportEntry) -> TimeReportEntryModel:
        return TimeReportEntryModel(
            id=entry.id,
            report_id=entry.report_id,
            entry_date=entry.entry_date,
            task_title=entry.task_title,
            duration_seconds=entry.duration_seconds,
            notes=entry.notes,
            source_time_entry_id=entry.source_time_entry_id,
        )

    def entry_to_domain(
        self,
        model: TimeReportEntryModel,
        source: Optional[TimeEntryModel] = None,
    ) -> TimeReportEntry:
        """Convert an entry row; ``source`` supplies the session and task ids."""
        return TimeReportEntry(
            id=model.id,
            report_id=model.report_id,
            entry_date=model.entry_date,
            task_title=model.task_title,
            duration_seconds=model.duration_seconds,
            notes=model.notes,
            source_time_entry_id=model.source_time_entry_id,
            session_id=source.session_id if source is not None else None,
            task_id=source.task_id if source is not None else None,
        )

    def model_to_domain(
        self,
        model: TimeReportModel,
        entries: Iterable[Tuple[TimeReportEntryModel, Optional[TimeEntryModel]]] = (),
    ) -> TimeReport:
        """Convert a report row plus already-joined entry rows."""
        return TimeReport(
            id=model.id,
            va_user_id=model.va_user_id,
            client_id=model.client_id,
            name=model.name,
            date_from=model.date_from,
            date_to=model.date_to,
            total_seconds=model.total_seconds,
            entry_count=model.entry_count,
            created_at=model.created_at,
            entries=tuple(self.entry_to_domain(row, source) for row, source in entries),
            client_name=self._client_name(model),
        )

    @staticmethod
    def _client_name(model: TimeReportModel) -> Optional[str]:
        if model.client is None:
            return None
        return ClientMapper().model_to_domain(model.client).display_name
