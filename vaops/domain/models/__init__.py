"""
Domain models for the VA operations portal.
This module exports all domain entities and value objects.
"""

from .base import (
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    PersistenceError,
    ValueObject,
    DateRange,
    new_id,
)

from .client import Client

from .time_entry import TimeEntry

from .time_report import (
    UNTITLED_TASK,
    PreviewLine,
    ReportPreview,
    TimeReport,
    TimeReportEntry,
    ReportDisplayRow,
    format_duration,
    format_short_date,
    suggest_report_name,
    resolve_report_name,
)

from .invoice import (
    INVOICE_DOC_TYPE,
    INVOICE_SCHEMA_VERSION,
    InvoiceContent,
    InvoiceLineItem,
    InvoiceDefaultsSeed,
    create_invoice_defaults,
    merge_invoice_content,
)

from .document import ClientDocument

__all__ = [
    # Base classes
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "PersistenceError",
    "ValueObject",
    "DateRange",
    "new_id",

    # Entities
    "Client",
    "TimeEntry",
    "ClientDocument",

    # Time reports
    "UNTITLED_TASK",
    "PreviewLine",
    "ReportPreview",
    "TimeReport",
    "TimeReportEntry",
    "ReportDisplayRow",
    "format_duration",
    "format_short_date",
    "suggest_report_name",
    "resolve_report_name",

    # Invoice content
    "INVOICE_DOC_TYPE",
    "INVOICE_SCHEMA_VERSION",
    "InvoiceContent",
    "InvoiceLineItem",
    "InvoiceDefaultsSeed",
    "create_invoice_defaults",
    "merge_invoice_content",
]
