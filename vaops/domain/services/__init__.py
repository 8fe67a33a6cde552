"""
Domain services for time reporting.
This module exports the services holding report business logic.
"""

from .report_aggregation_service import ReportAggregationService
from .session_grouping_service import (
    SESSION_LABEL,
    SessionGroupingService,
    build_report_display_rows,
)

__all__ = [
    "ReportAggregationService",
    "SessionGroupingService",
    "SESSION_LABEL",
    "build_report_display_rows",
]
