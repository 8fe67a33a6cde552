"""
Infrastructure mappers module.
Contains mappers between domain entities and database models.
"""

from .client_mapper import ClientMapper
from .time_entry_mapper import TimeEntryMapper
from .time_report_mapper import TimeReportMapper
from .document_mapper import ClientDocumentMapper

__all__ = [
    "ClientMapper",
    "TimeEntryMapper",
    "TimeReportMapper",
    "ClientDocumentMapper",
]
