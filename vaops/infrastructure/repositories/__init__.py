"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .client_repository import SQLAlchemyClientRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository
from .time_report_repository import SQLAlchemyTimeReportRepository
from .document_repository import SQLAlchemyClientDocumentRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyTimeEntryRepository",
    "SQLAlchemyTimeReportRepository",
    "SQLAlchemyClientDocumentRepository",
]
