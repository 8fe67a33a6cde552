"""
Event handling infrastructure.
"""

from .audit_handlers import ReportAuditHandler
from .event_setup import initialize_event_system, setup_event_handlers

__all__ = [
    "ReportAuditHandler",
    "initialize_event_system",
    "setup_event_handlers",
]
