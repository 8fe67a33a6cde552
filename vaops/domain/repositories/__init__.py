"""
Domain repository interfaces.
Implementations live in the infrastructure layer.
"""

from .client_repository import ClientRepository
from .time_entry_repository import TimeEntryRepository
from .time_report_repository import TimeReportRepository
from .document_repository import ClientDocumentRepository

__all__ = [
    "ClientRepository",
    "TimeEntryRepository",
    "TimeReportRepository",
    "ClientDocumentRepository",
]
