"""
Domain events for time reports and invoice linkage.
"""

from .base import (
    ALL_EVENTS,
    DomainEvent,
    EventHandler,
    EventDispatcher,
    Subscription,
)
from .time_report_events import (
    TimeReportCreated,
    TimeReportDeleted,
    InvoiceTimeReportLinked,
)

__all__ = [
    "ALL_EVENTS",
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "Subscription",
    "TimeReportCreated",
    "TimeReportDeleted",
    "InvoiceTimeReportLinked",
]
