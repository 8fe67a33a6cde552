"""
Event handlers that keep an audit trail of report lifecycle changes.
"""

import logging

from vaops.domain.events.base import DomainEvent, EventHandler
from vaops.domain.events.time_report_events import (
    InvoiceTimeReportLinked,
    TimeReportCreated,
    TimeReportDeleted,
)
from vaops.domain.models.time_report import format_duration


logger = logging.getLogger(__name__)


class ReportAuditHandler(EventHandler):
    """Logs every report and invoice linkage change."""

    def __init__(self, audit_logger: logging.Logger = logger):
        self.audit_logger = audit_logger

    async def handle(self, event: DomainEvent) -> None:
        if isinstance(event, TimeReportCreated):
            self.audit_logger.info(
                f"VA {event.va_user_id} saved time report {event.report_id} for client "
                f"{event.client_id}: {event.entry_count} entries, "
                f"{format_duration(event.total_seconds)}"
            )
        elif isinstance(event, TimeReportDeleted):
            self.audit_logger.info(
                f"VA {event.va_user_id} deleted time report {event.report_id}"
            )
        elif isinstance(event, InvoiceTimeReportLinked):
            if event.time_report_id:
                self.audit_logger.info(
                    f"Invoice {event.document_id} linked to time report {event.time_report_id} "
                    f"(visible to client: {event.show_time_report_to_client})"
                )
            else:
                self.audit_logger.info(f"Invoice {event.document_id} time report link cleared")
        else:
            self.audit_logger.debug(f"Ignoring event {event.event_type}")
