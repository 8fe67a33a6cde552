"""
Invoice time report linkage DTOs.
"""

from typing import List, Optional

from pydantic import Field

from vaops.application.dto.base_dto import BaseDTO, ReportAudience, RequestDTO
from vaops.application.dto.time_report_dto import TimeReportDetailDTO, TimeReportSummaryDTO


class InvoiceTimeReportLinkDTO(RequestDTO):
    """Body of a link update. An empty ``time_report_id`` clears the link."""

    time_report_id: Optional[str] = Field(default=None)
    show_time_report_to_client: Optional[bool] = Field(
        default=None,
        description="Leave unset to keep the current flag for the same report"
    )


class LinkInvoiceTimeReportRequestDTO(InvoiceTimeReportLinkDTO):
    document_id: str


class InvoiceTimeReportLinkResponseDTO(BaseDTO):
    document_id: str
    time_report_id: Optional[str] = None
    show_time_report_to_client: bool = False


class GetInvoiceTimeReportRequestDTO(RequestDTO):
    document_id: str
    audience: ReportAudience = ReportAudience.VA


class InvoiceTimeReportResponseDTO(BaseDTO):
    """
    Linked report as seen by ``audience``.
    ``report`` is None when nothing is linked, the link is stale, or the
    audience is not allowed to see it.
    """

    document_id: str
    audience: ReportAudience
    time_report_id: Optional[str] = None
    show_time_report_to_client: bool = False
    report: Optional[TimeReportDetailDTO] = None


class ListInvoiceReportOptionsRequestDTO(RequestDTO):
    document_id: str


class InvoiceReportOptionsResponseDTO(BaseDTO):
    document_id: str
    client_id: str
    selected_report_id: Optional[str] = None
    options: List[TimeReportSummaryDTO] = Field(default_factory=list)


class RenderInvoiceTimeReportRequestDTO(RequestDTO):
    document_id: str
    audience: ReportAudience = ReportAudience.CLIENT


class RenderedTimeReportDTO(BaseDTO):
    document_id: str
    time_report_id: Optional[str] = None
    html: str = ""
