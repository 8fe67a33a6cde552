"""
Event system setup and configuration.
Registers the event handlers with a dispatcher.
"""

import logging
from typing import List

from vaops.domain.events.base import EventDispatcher, Subscription
from .audit_handlers import ReportAuditHandler

logger = logging.getLogger(__name__)

AUDITED_EVENTS = (
    "TimeReportCreated",
    "TimeReportDeleted",
    "InvoiceTimeReportLinked",
)


def setup_event_handlers(dispatcher: EventDispatcher) -> List[Subscription]:
    """
    Register all event handlers.
    The returned subscriptions must be released at shutdown.
    """
    audit_handler = ReportAuditHandler()

    subscriptions = [
        dispatcher.register_handler(event_type, audit_handler)
        for event_type in AUDITED_EVENTS
    ]

    logger.info(f"Event handlers registered successfully ({len(subscriptions)} subscriptions)")
    return subscriptions


def initialize_event_system() -> EventDispatcher:
    """Create a dispatcher with the standard handlers attached."""
    dispatcher = EventDispatcher()
    try:
        setup_event_handlers(dispatcher)
        logger.info("Event system initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize event system: {str(e)}")
        dispatcher.close()
        raise
    return dispatcher
