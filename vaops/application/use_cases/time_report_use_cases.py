"""
Time report use cases for the application layer.
Implements previewing, snapshotting, listing and deleting time reports.
"""

import logging
from typing import Optional

from vaops.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from vaops.application.dto.time_report_dto import (
    DeleteTimeReportRequestDTO,
    GetTimeReportRequestDTO,
    ListTimeReportsRequestDTO,
    ReportPreviewRequestDTO,
    ReportPreviewResponseDTO,
    SaveTimeReportRequestDTO,
    TimeReportDetailDTO,
    TimeReportListResponseDTO,
)
from vaops.domain.events.base import EventDispatcher
from vaops.domain.events.time_report_events import TimeReportCreated, TimeReportDeleted
from vaops.domain.models.base import DateRange, EntityNotFoundError, ValidationError
from vaops.domain.models.client import Client
from vaops.domain.models.time_report import (
    TimeReport,
    resolve_report_name,
    suggest_report_name,
)
from vaops.domain.repositories.client_repository import ClientRepository
from vaops.domain.repositories.time_entry_repository import TimeEntryRepository
from vaops.domain.repositories.time_report_repository import TimeReportRepository
from vaops.domain.services.report_aggregation_service import ReportAggregationService
from vaops.domain.services.session_grouping_service import SessionGroupingService


logger = logging.getLogger(__name__)


async def _load_client(
    client_repository: ClientRepository,
    client_id: Optional[str],
    va_id: str,
) -> Client:
    if not client_id:
        raise ValidationError("Client is required", "client_id")
    client = await client_repository.find_by_id(client_id, va_id)
    if not client:
        raise EntityNotFoundError("Client", client_id)
    return client


class GenerateReportPreviewUseCase(AuthorizedUseCase, QueryUseCase[ReportPreviewRequestDTO, ReportPreviewResponseDTO]):
    """Aggregate a client's time entries over a date range. Writes nothing."""

    def __init__(
        self,
        client_repository: ClientRepository,
        time_entry_repository: TimeEntryRepository,
        aggregation_service: ReportAggregationService
    ):
        super().__init__()
        self.client_repository = client_repository
        self.time_entry_repository = time_entry_repository
        self.aggregation_service = aggregation_service

    async def _execute_business_logic(self, request: ReportPreviewRequestDTO) -> ReportPreviewResponseDTO:
        # input problems are reported before anything is queried
        if not request.client_id:
            raise ValidationError("Client is required", "client_id")
        date_range = DateRange(request.date_from, request.date_to)

        client = await _load_client(self.client_repository, request.client_id, self.current_user_id)

        start, end = self.aggregation_service.query_window(date_range)
        entries = await self.time_entry_repository.find_for_client_between(
            self.current_user_id, client.id, start, end
        )

        preview = self.aggregation_service.build_preview(
            client, date_range, entries, include_notes=request.include_notes
        )
        return ReportPreviewResponseDTO.from_domain(preview)


class SaveTimeReportUseCase(AuthorizedUseCase, CommandUseCase[SaveTimeReportRequestDTO, TimeReportListResponseDTO]):
    """
    Snapshot preview lines into a named report.
    Returns the VA's refreshed report list.
    """

    def __init__(
        self,
        client_repository: ClientRepository,
        time_report_repository: TimeReportRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__()
        self.client_repository = client_repository
        self.time_report_repository = time_report_repository
        self.event_dispatcher = event_dispatcher

    async def _execute_command_logic(self, request: SaveTimeReportRequestDTO) -> TimeReportListResponseDTO:
        if not request.client_id:
            raise ValidationError("Client is required", "client_id")
        date_range = request.date_range

        client = await _load_client(self.client_repository, request.client_id, self.current_user_id)
        client_name = (request.client_name or "").strip() or client.display_name

        name = resolve_report_name(request.name, suggest_report_name(client_name, date_range))

        report = TimeReport.create(
            va_user_id=self.current_user_id,
            client_id=request.client_id,
            name=name,
            date_range=date_range,
            lines=[line.to_domain() for line in request.lines],
        )

        saved = await self.time_report_repository.save_snapshot(report)

        self._record_event(TimeReportCreated(
            report_id=saved.id,
            va_user_id=saved.va_user_id,
            client_id=saved.client_id,
            total_seconds=saved.total_seconds,
            entry_count=saved.entry_count,
        ))

        reports = await self.time_report_repository.find_by_va(self.current_user_id)
        return TimeReportListResponseDTO.from_domain(reports)


class ListTimeReportsUseCase(AuthorizedUseCase, QueryUseCase[ListTimeReportsRequestDTO, TimeReportListResponseDTO]):
    """List the VA's saved reports, newest first."""

    def __init__(self, time_report_repository: TimeReportRepository):
        super().__init__()
        self.time_report_repository = time_report_repository

    async def _execute_business_logic(self, request: ListTimeReportsRequestDTO) -> TimeReportListResponseDTO:
        reports = await self.time_report_repository.find_by_va(
            self.current_user_id,
            client_id=request.client_id,
            limit=request.limit,
            offset=request.offset,
        )
        total = await self.time_report_repository.count_by_va(
            self.current_user_id, client_id=request.client_id
        )
        return TimeReportListResponseDTO.from_domain(reports, total=total)


class GetTimeReportUseCase(AuthorizedUseCase, QueryUseCase[GetTimeReportRequestDTO, TimeReportDetailDTO]):
    """Load one saved report with its lines and the grouped breakdown."""

    def __init__(
        self,
        time_report_repository: TimeReportRepository,
        grouping_service: Optional[SessionGroupingService] = None
    ):
        super().__init__()
        self.time_report_repository = time_report_repository
        self.grouping_service = grouping_service or SessionGroupingService()

    async def _execute_business_logic(self, request: GetTimeReportRequestDTO) -> TimeReportDetailDTO:
        report = await self.time_report_repository.find_by_id(request.report_id, self.current_user_id)
        if not report:
            raise EntityNotFoundError("TimeReport", request.report_id)

        rows = self.grouping_service.build_display_rows(report.entries)
        return TimeReportDetailDTO.from_domain(report, rows)


class DeleteTimeReportUseCase(AuthorizedUseCase, CommandUseCase[DeleteTimeReportRequestDTO, bool]):
    """
    Delete a saved report and its lines.
    Invoices that point at it are left alone; their link simply goes stale.
    """

    def __init__(
        self,
        time_report_repository: TimeReportRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__()
        self.time_report_repository = time_report_repository
        self.event_dispatcher = event_dispatcher

    async def _validate_request(self, request: DeleteTimeReportRequestDTO) -> None:
        await super()._validate_request(request)
        if not request.confirm:
            raise ValidationError("Deleting a time report must be confirmed", "confirm")

    async def _execute_command_logic(self, request: DeleteTimeReportRequestDTO) -> bool:
        deleted = await self.time_report_repository.delete(request.report_id, self.current_user_id)
        if not deleted:
            raise EntityNotFoundError("TimeReport", request.report_id)

        self._record_event(TimeReportDeleted(
            report_id=request.report_id,
            va_user_id=self.current_user_id,
        ))
        return True
