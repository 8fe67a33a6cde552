"""
Time report DTOs for the application layer.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence

from pydantic import Field

from vaops.application.dto.base_dto import BaseDTO, RequestDTO, ResponseDTO
from vaops.domain.models.base import DateRange
from vaops.domain.models.time_report import (
    PreviewLine,
    ReportDisplayRow,
    ReportPreview,
    TimeReport,
    TimeReportEntry,
    format_duration,
)


class ReportPreviewRequestDTO(RequestDTO):
    """DTO for previewing a client's time over a date range.

    Missing values are reported by the use case as validation errors.
    """

    client_id: Optional[str] = Field(default=None, description="Client to report on")
    date_from: Optional[date] = Field(default=None, description="First day, inclusive")
    date_to: Optional[date] = Field(default=None, description="Last day, inclusive")
    include_notes: bool = Field(default=False, description="Copy entry notes into the lines")


class PreviewLineDTO(BaseDTO):
    """One report line."""

    entry_date: datetime
    task_title: str = Field(min_length=1)
    duration_seconds: int = Field(ge=0)
    notes: Optional[str] = None
    source_time_entry_id: Optional[str] = None

    @classmethod
    def from_domain(cls, line: PreviewLine) -> "PreviewLineDTO":
        return cls(
            entry_date=line.entry_date,
            task_title=line.task_title,
            duration_seconds=line.duration_seconds,
            notes=line.notes,
            source_time_entry_id=line.source_time_entry_id,
        )

    def to_domain(self) -> PreviewLine:
        return PreviewLine(
            entry_date=self.entry_date,
            task_title=self.task_title,
            duration_seconds=self.duration_seconds,
            notes=self.notes,
            source_time_entry_id=self.source_time_entry_id,
        )


class ReportPreviewResponseDTO(BaseDTO):
    """Aggregated lines and totals; nothing has been saved."""

    client_id: str
    client_name: str
    date_from: date
    date_to: date
    include_notes: bool
    lines: List[PreviewLineDTO] = Field(default_factory=list)
    total_seconds: int
    total_duration: str
    entry_count: int
    suggested_name: str

    @classmethod
    def from_domain(cls, preview: ReportPreview) -> "ReportPreviewResponseDTO":
        return cls(
            client_id=preview.client_id,
            client_name=preview.client_name,
            date_from=preview.date_range.date_from,
            date_to=preview.date_range.date_to,
            include_notes=preview.include_notes,
            lines=[PreviewLineDTO.from_domain(line) for line in preview.lines],
            total_seconds=preview.total_seconds,
            total_duration=format_duration(preview.total_seconds),
            entry_count=preview.entry_count,
            suggested_name=preview.suggested_name,
        )


class SaveTimeReportRequestDTO(RequestDTO):
    """DTO for saving a preview as a named report."""

    client_id: Optional[str] = Field(default=None)
    client_name: Optional[str] = Field(default=None, description="Display name used for the suggested name")
    date_from: Optional[date] = Field(default=None)
    date_to: Optional[date] = Field(default=None)
    name: Optional[str] = Field(default=None, max_length=500, description="Report name; blank uses the suggestion")
    lines: List[PreviewLineDTO] = Field(default_factory=list)

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.date_from, self.date_to)


class ListTimeReportsRequestDTO(RequestDTO):
    client_id: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)


class GetTimeReportRequestDTO(RequestDTO):
    report_id: str


class DeleteTimeReportRequestDTO(RequestDTO):
    """Deletion must be confirmed explicitly."""

    report_id: str
    confirm: bool = False


class TimeReportSummaryDTO(ResponseDTO):
    """Saved report without its lines."""

    va_user_id: str
    client_id: str
    client_name: Optional[str] = None
    name: str
    date_from: date
    date_to: date
    total_seconds: int
    total_duration: str
    entry_count: int

    @classmethod
    def from_domain(cls, report: TimeReport) -> "TimeReportSummaryDTO":
        return cls(**_summary_fields(report))


class TimeReportEntryDTO(BaseDTO):
    id: str
    entry_date: datetime
    task_title: str
    duration_seconds: int
    notes: Optional[str] = None
    source_time_entry_id: Optional[str] = None
    session_id: Optional[str] = None
    task_id: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: TimeReportEntry) -> "TimeReportEntryDTO":
        return cls(
            id=entry.id,
            entry_date=entry.entry_date,
            task_title=entry.task_title,
            duration_seconds=entry.duration_seconds,
            notes=entry.notes,
            source_time_entry_id=entry.source_time_entry_id,
            session_id=entry.session_id,
            task_id=entry.task_id,
        )


class ReportDisplayRowDTO(BaseDTO):
    key: str
    entry_date: datetime
    task_title: str
    duration_seconds: int
    duration: str
    notes: Optional[str] = None
    level: int
    is_session_summary: bool

    @classmethod
    def from_domain(cls, row: ReportDisplayRow) -> "ReportDisplayRowDTO":
        return cls(
            key=row.key,
            entry_date=row.entry_date,
            task_title=row.task_title,
            duration_seconds=row.duration_seconds,
            duration=format_duration(row.duration_seconds),
            notes=row.notes,
            level=row.level,
            is_session_summary=row.is_session_summary,
        )


class TimeReportDetailDTO(TimeReportSummaryDTO):
    """Saved report with its frozen lines and the grouped breakdown."""

    entries: List[TimeReportEntryDTO] = Field(default_factory=list)
    rows: List[ReportDisplayRowDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls,
        report: TimeReport,
        rows: Sequence[ReportDisplayRow] = (),
    ) -> "TimeReportDetailDTO":
        return cls(
            **_summary_fields(report),
            entries=[TimeReportEntryDTO.from_domain(entry) for entry in report.entries],
            rows=[ReportDisplayRowDTO.from_domain(row) for row in rows],
        )


class TimeReportListResponseDTO(BaseDTO):
    reports: List[TimeReportSummaryDTO] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def from_domain(
        cls, reports: Sequence[TimeReport], total: Optional[int] = None
    ) -> "TimeReportListResponseDTO":
        return cls(
            reports=[TimeReportSummaryDTO.from_domain(report) for report in reports],
            total=len(reports) if total is None else total,
        )


def _summary_fields(report: TimeReport) -> dict:
    return {
        "id": report.id,
        "created_at": report.created_at,
        "va_user_id": report.va_user_id,
        "client_id": report.client_id,
        "client_name": report.client_name,
        "name": report.name,
        "date_from": report.date_from,
        "date_to": report.date_to,
        "total_seconds": report.total_seconds,
        "total_duration": format_duration(report.total_seconds),
        "entry_count": report.entry_count,
    }
