"""
Use cases for the application layer.
"""

from .base_use_case import (
    UseCaseResult,
    BaseUseCase,
    QueryUseCase,
    CommandUseCase,
    SearchUseCase,
    AuthorizedUseCase,
)
from .time_report_use_cases import (
    GenerateReportPreviewUseCase,
    SaveTimeReportUseCase,
    ListTimeReportsUseCase,
    GetTimeReportUseCase,
    DeleteTimeReportUseCase,
)
from .invoice_use_cases import (
    LinkInvoiceTimeReportUseCase,
    GetInvoiceTimeReportUseCase,
    ListInvoiceReportOptionsUseCase,
    RenderInvoiceTimeReportUseCase,
)
from .client_use_cases import SearchClientsUseCase

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "SearchUseCase",
    "AuthorizedUseCase",
    "GenerateReportPreviewUseCase",
    "SaveTimeReportUseCase",
    "ListTimeReportsUseCase",
    "GetTimeReportUseCase",
    "DeleteTimeReportUseCase",
    "LinkInvoiceTimeReportUseCase",
    "GetInvoiceTimeReportUseCase",
    "ListInvoiceReportOptionsUseCase",
    "RenderInvoiceTimeReportUseCase",
    "SearchClientsUseCase",
]
