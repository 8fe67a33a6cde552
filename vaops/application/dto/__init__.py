"""
Data transfer objects for the application layer.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    HealthCheckResponseDTO,
    ReportAudience,
)
from .time_report_dto import (
    ReportPreviewRequestDTO,
    PreviewLineDTO,
    ReportPreviewResponseDTO,
    SaveTimeReportRequestDTO,
    ListTimeReportsRequestDTO,
    GetTimeReportRequestDTO,
    DeleteTimeReportRequestDTO,
    TimeReportSummaryDTO,
    TimeReportEntryDTO,
    ReportDisplayRowDTO,
    TimeReportDetailDTO,
    TimeReportListResponseDTO,
)
from .invoice_dto import (
    InvoiceTimeReportLinkDTO,
    LinkInvoiceTimeReportRequestDTO,
    InvoiceTimeReportLinkResponseDTO,
    GetInvoiceTimeReportRequestDTO,
    InvoiceTimeReportResponseDTO,
    ListInvoiceReportOptionsRequestDTO,
    InvoiceReportOptionsResponseDTO,
    RenderInvoiceTimeReportRequestDTO,
    RenderedTimeReportDTO,
)
from .client_dto import (
    SearchClientsRequestDTO,
    ClientSummaryDTO,
    ClientSearchResponseDTO,
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "HealthCheckResponseDTO",
    "ReportAudience",
    "ReportPreviewRequestDTO",
    "PreviewLineDTO",
    "ReportPreviewResponseDTO",
    "SaveTimeReportRequestDTO",
    "ListTimeReportsRequestDTO",
    "GetTimeReportRequestDTO",
    "DeleteTimeReportRequestDTO",
    "TimeReportSummaryDTO",
    "TimeReportEntryDTO",
    "ReportDisplayRowDTO",
    "TimeReportDetailDTO",
    "TimeReportListResponseDTO",
    "InvoiceTimeReportLinkDTO",
    "LinkInvoiceTimeReportRequestDTO",
    "InvoiceTimeReportLinkResponseDTO",
    "GetInvoiceTimeReportRequestDTO",
    "InvoiceTimeReportResponseDTO",
    "ListInvoiceReportOptionsRequestDTO",
    "InvoiceReportOptionsResponseDTO",
    "RenderInvoiceTimeReportRequestDTO",
    "RenderedTimeReportDTO",
    "SearchClientsRequestDTO",
    "ClientSummaryDTO",
    "ClientSearchResponseDTO",
]
