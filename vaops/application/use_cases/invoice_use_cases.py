"""
Invoice linkage use cases.
An invoice may point at one saved time report of the same client; the VA
decides whether the client gets to see it.
"""

import logging
from typing import Optional, Tuple

from vaops.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from vaops.application.dto.base_dto import ReportAudience
from vaops.application.dto.invoice_dto import (
    GetInvoiceTimeReportRequestDTO,
    InvoiceReportOptionsResponseDTO,
    InvoiceTimeReportLinkResponseDTO,
    InvoiceTimeReportResponseDTO,
    LinkInvoiceTimeReportRequestDTO,
    ListInvoiceReportOptionsRequestDTO,
    RenderedTimeReportDTO,
    RenderInvoiceTimeReportRequestDTO,
)
from vaops.application.dto.time_report_dto import TimeReportDetailDTO, TimeReportSummaryDTO
from vaops.domain.events.base import EventDispatcher
from vaops.domain.events.time_report_events import InvoiceTimeReportLinked
from vaops.domain.models.base import BusinessRuleViolation, EntityNotFoundError
from vaops.domain.models.document import ClientDocument
from vaops.domain.models.invoice import InvoiceContent
from vaops.domain.models.time_report import TimeReport
from vaops.domain.repositories.document_repository import ClientDocumentRepository
from vaops.domain.repositories.time_report_repository import TimeReportRepository
from vaops.domain.services.session_grouping_service import SessionGroupingService
from vaops.infrastructure.rendering.report_renderer import ReportRenderer


logger = logging.getLogger(__name__)


async def _load_invoice(
    document_repository: ClientDocumentRepository,
    document_id: str,
    va_id: str,
) -> Tuple[ClientDocument, InvoiceContent]:
    document = await document_repository.find_by_id(document_id, va_id)
    if not document:
        raise EntityNotFoundError("ClientDocument", document_id)
    return document, document.invoice_content()


async def _disclosed_report(
    time_report_repository: TimeReportRepository,
    content: InvoiceContent,
    audience: str,
    va_id: str,
) -> Optional[TimeReport]:
    """The linked report if ``audience`` may see it; a stale link gives None."""
    if not content.has_time_report:
        return None
    if audience == ReportAudience.CLIENT and not content.discloses_time_report():
        return None

    report = await time_report_repository.find_by_id(content.time_report_id, va_id)
    if report is None:
        logger.info(f"Invoice links missing time report {content.time_report_id}")
    return report


class LinkInvoiceTimeReportUseCase(
    AuthorizedUseCase,
    CommandUseCase[LinkInvoiceTimeReportRequestDTO, InvoiceTimeReportLinkResponseDTO]
):
    """Set, change or clear an invoice's time report and its visibility flag."""

    def __init__(
        self,
        document_repository: ClientDocumentRepository,
        time_report_repository: TimeReportRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__()
        self.document_repository = document_repository
        self.time_report_repository = time_report_repository
        self.event_dispatcher = event_dispatcher

    async def _execute_command_logic(
        self,
        request: LinkInvoiceTimeReportRequestDTO
    ) -> InvoiceTimeReportLinkResponseDTO:
        document, content = await _load_invoice(
            self.document_repository, request.document_id, self.current_user_id
        )

        report_id = (request.time_report_id or "").strip()
        if report_id:
            report = await self.time_report_repository.find_by_id(
                report_id, self.current_user_id, include_entries=False
            )
            if not report:
                raise EntityNotFoundError("TimeReport", report_id)
            if report.client_id != document.client_id:
                raise BusinessRuleViolation(
                    "Time report belongs to a different client than the invoice"
                )

        updated = content.link_time_report(report_id, request.show_time_report_to_client)
        saved = await self.document_repository.save_content(document.with_invoice_content(updated))
        saved_content = saved.invoice_content()

        self._record_event(InvoiceTimeReportLinked(
            document_id=saved.id,
            va_user_id=self.current_user_id,
            time_report_id=saved_content.time_report_id or None,
            show_time_report_to_client=saved_content.show_time_report_to_client,
        ))

        return InvoiceTimeReportLinkResponseDTO(
            document_id=saved.id,
            time_report_id=saved_content.time_report_id or None,
            show_time_report_to_client=saved_content.show_time_report_to_client,
        )


class GetInvoiceTimeReportUseCase(
    AuthorizedUseCase,
    QueryUseCase[GetInvoiceTimeReportRequestDTO, InvoiceTimeReportResponseDTO]
):
    """Resolve an invoice's linked report for the VA or for the client view."""

    def __init__(
        self,
        document_repository: ClientDocumentRepository,
        time_report_repository: TimeReportRepository,
        grouping_service: Optional[SessionGroupingService] = None
    ):
        super().__init__()
        self.document_repository = document_repository
        self.time_report_repository = time_report_repository
        self.grouping_service = grouping_service or SessionGroupingService()

    async def _execute_business_logic(
        self,
        request: GetInvoiceTimeReportRequestDTO
    ) -> InvoiceTimeReportResponseDTO:
        document, content = await _load_invoice(
            self.document_repository, request.document_id, self.current_user_id
        )

        report = await _disclosed_report(
            self.time_report_repository, content, request.audience, self.current_user_id
        )

        detail = None
        if report is not None:
            detail = TimeReportDetailDTO.from_domain(
                report, self.grouping_service.build_display_rows(report.entries)
            )

        return InvoiceTimeReportResponseDTO(
            document_id=document.id,
            audience=request.audience,
            time_report_id=content.time_report_id or None,
            show_time_report_to_client=content.show_time_report_to_client,
            report=detail,
        )


class ListInvoiceReportOptionsUseCase(
    AuthorizedUseCase,
    QueryUseCase[ListInvoiceReportOptionsRequestDTO, InvoiceReportOptionsResponseDTO]
):
    """Saved reports of the invoice's client, for the report selector."""

    def __init__(
        self,
        document_repository: ClientDocumentRepository,
        time_report_repository: TimeReportRepository
    ):
        super().__init__()
        self.document_repository = document_repository
        self.time_report_repository = time_report_repository

    async def _execute_business_logic(
        self,
        request: ListInvoiceReportOptionsRequestDTO
    ) -> InvoiceReportOptionsResponseDTO:
        document, content = await _load_invoice(
            self.document_repository, request.document_id, self.current_user_id
        )

        reports = await self.time_report_repository.find_by_va(
            self.current_user_id, client_id=document.client_id
        )

        return InvoiceReportOptionsResponseDTO(
            document_id=document.id,
            client_id=document.client_id,
            selected_report_id=content.time_report_id or None,
            options=[TimeReportSummaryDTO.from_domain(report) for report in reports],
        )


class RenderInvoiceTimeReportUseCase(
    AuthorizedUseCase,
    QueryUseCase[RenderInvoiceTimeReportRequestDTO, RenderedTimeReportDTO]
):
    """HTML breakdown for the invoice renderer; empty when nothing is disclosed."""

    def __init__(
        self,
        document_repository: ClientDocumentRepository,
        time_report_repository: TimeReportRepository,
        renderer: ReportRenderer,
        grouping_service: Optional[SessionGroupingService] = None
    ):
        super().__init__()
        self.document_repository = document_repository
        self.time_report_repository = time_report_repository
        self.renderer = renderer
        self.grouping_service = grouping_service or SessionGroupingService()

    async def _execute_business_logic(
        self,
        request: RenderInvoiceTimeReportRequestDTO
    ) -> RenderedTimeReportDTO:
        document, content = await _load_invoice(
            self.document_repository, request.document_id, self.current_user_id
        )

        report = await _disclosed_report(
            self.time_report_repository, content, request.audience, self.current_user_id
        )
        if report is None:
            return RenderedTimeReportDTO(document_id=document.id)

        rows = self.grouping_service.build_display_rows(report.entries)
        return RenderedTimeReportDTO(
            document_id=document.id,
            time_report_id=report.id,
            html=self.renderer.render(report, rows),
        )
