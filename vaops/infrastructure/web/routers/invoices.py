"""
Invoice time report router.
Links saved time reports to invoice documents and serves the breakdown.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from vaops.application.dto.base_dto import ReportAudience
from vaops.application.dto.invoice_dto import (
    GetInvoiceTimeReportRequestDTO,
    InvoiceReportOptionsResponseDTO,
    InvoiceTimeReportLinkDTO,
    InvoiceTimeReportLinkResponseDTO,
    InvoiceTimeReportResponseDTO,
    LinkInvoiceTimeReportRequestDTO,
    ListInvoiceReportOptionsRequestDTO,
    RenderInvoiceTimeReportRequestDTO,
)
from vaops.application.use_cases.invoice_use_cases import (
    GetInvoiceTimeReportUseCase,
    LinkInvoiceTimeReportUseCase,
    ListInvoiceReportOptionsUseCase,
    RenderInvoiceTimeReportUseCase,
)
from vaops.domain.events.base import EventDispatcher
from vaops.infrastructure.auth import get_current_user_id
from vaops.infrastructure.rendering.report_renderer import ReportRenderer
from vaops.infrastructure.repositories import (
    SQLAlchemyClientDocumentRepository,
    SQLAlchemyTimeReportRepository,
)
from vaops.infrastructure.web.dependencies import (
    get_document_repository,
    get_event_dispatcher,
    get_report_renderer,
    get_time_report_repository,
)
from vaops.infrastructure.web.errors import unwrap_result


router = APIRouter()


@router.get("/{document_id}/time-report", response_model=InvoiceTimeReportResponseDTO)
async def get_invoice_time_report(
    document_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    documents: Annotated[SQLAlchemyClientDocumentRepository, Depends(get_document_repository)],
    reports: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    audience: ReportAudience = Query(ReportAudience.VA, description="va or client")
):
    """
    Get the invoice's linked report as the given audience sees it.

    The client audience only sees a report the VA chose to show. A link to a
    deleted report comes back with `report: null`.
    """
    use_case = GetInvoiceTimeReportUseCase(documents, reports).set_current_user(user_id)
    result = await use_case.execute(
        GetInvoiceTimeReportRequestDTO(document_id=document_id, audience=audience)
    )
    return unwrap_result(result)


@router.put("/{document_id}/time-report", response_model=InvoiceTimeReportLinkResponseDTO)
async def link_invoice_time_report(
    document_id: str,
    request: InvoiceTimeReportLinkDTO,
    user_id: Annotated[str, Depends(get_current_user_id)],
    documents: Annotated[SQLAlchemyClientDocumentRepository, Depends(get_document_repository)],
    reports: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    dispatcher: Annotated[EventDispatcher, Depends(get_event_dispatcher)]
):
    """
    Link a saved report to the invoice, or change its visibility.

    - **time_report_id**: Report of the invoice's client; empty clears the link
    - **show_time_report_to_client**: Include the breakdown in the client view
    """
    use_case = LinkInvoiceTimeReportUseCase(documents, reports, dispatcher).set_current_user(user_id)
    result = await use_case.execute(
        LinkInvoiceTimeReportRequestDTO(document_id=document_id, **request.model_dump())
    )
    return unwrap_result(result)


@router.delete("/{document_id}/time-report", response_model=InvoiceTimeReportLinkResponseDTO)
async def clear_invoice_time_report(
    document_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    documents: Annotated[SQLAlchemyClientDocumentRepository, Depends(get_document_repository)],
    reports: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    dispatcher: Annotated[EventDispatcher, Depends(get_event_dispatcher)]
):
    """Remove the invoice's time report link; the client flag is reset too."""
    use_case = LinkInvoiceTimeReportUseCase(documents, reports, dispatcher).set_current_user(user_id)
    result = await use_case.execute(
        LinkInvoiceTimeReportRequestDTO(document_id=document_id, time_report_id=None)
    )
    return unwrap_result(result)


@router.get("/{document_id}/time-report/options", response_model=InvoiceReportOptionsResponseDTO)
async def list_invoice_report_options(
    document_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    documents: Annotated[SQLAlchemyClientDocumentRepository, Depends(get_document_repository)],
    reports: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)]
):
    """Saved reports of the invoice's client, newest first."""
    use_case = ListInvoiceReportOptionsUseCase(documents, reports).set_current_user(user_id)
    result = await use_case.execute(ListInvoiceReportOptionsRequestDTO(document_id=document_id))
    return unwrap_result(result)


@router.get("/{document_id}/time-report/html", response_class=HTMLResponse)
async def render_invoice_time_report(
    document_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    documents: Annotated[SQLAlchemyClientDocumentRepository, Depends(get_document_repository)],
    reports: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    renderer: Annotated[ReportRenderer, Depends(get_report_renderer)],
    audience: ReportAudience = Query(ReportAudience.CLIENT, description="va or client")
):
    """HTML breakdown for the invoice; empty body when nothing is disclosed."""
    use_case = RenderInvoiceTimeReportUseCase(documents, reports, renderer).set_current_user(user_id)
    result = await use_case.execute(
        RenderInvoiceTimeReportRequestDTO(document_id=document_id, audience=audience)
    )
    rendered = unwrap_result(result)
    return HTMLResponse(content=rendered.html)
