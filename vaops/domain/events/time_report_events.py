"""
Time report change events.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import DomainEvent


@dataclass
class TimeReportCreated(DomainEvent):
    """Raised after a report snapshot has been committed."""

    report_id: str
    va_user_id: str
    client_id: str
    total_seconds: int
    entry_count: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "report_id": self.report_id,
            "va_user_id": self.va_user_id,
            "client_id": self.client_id,
            "total_seconds": self.total_seconds,
            "entry_count": self.entry_count,
        }


@dataclass
class TimeReportDeleted(DomainEvent):
    """Raised after a report and its entries have been deleted."""

    report_id: str
    va_user_id: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"report_id": self.report_id, "va_user_id": self.va_user_id}


@dataclass
class InvoiceTimeReportLinked(DomainEvent):
    """Raised when an invoice's time report link or visibility changes."""

    document_id: str
    va_user_id: str
    time_report_id: Optional[str]
    show_time_report_to_client: bool

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "va_user_id": self.va_user_id,
            "time_report_id": self.time_report_id,
            "show_time_report_to_client": self.show_time_report_to_client,
        }
