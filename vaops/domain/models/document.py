"""
ClientDocument domain model.
Documents are owned by the document editor; time reporting only reads and
updates the time report fields of invoice content.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional

from vaops.domain.models.base import BusinessRuleViolation
from vaops.domain.models.invoice import (
    INVOICE_DOC_TYPE,
    InvoiceContent,
    merge_invoice_content,
)


@dataclass(frozen=True)
class ClientDocument:
    """A billing or legal document issued by a VA to one client."""

    id: str
    va_id: str
    client_id: str
    doc_type: str
    title: Optional[str] = None
    status: Optional[str] = None
    content: Dict[str, Any] = field(default_factory=dict, compare=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_invoice(self) -> bool:
        return self.doc_type == INVOICE_DOC_TYPE

    def invoice_content(self) -> InvoiceContent:
        """Parse the content blob as invoice content."""
        if not self.is_invoice:
            raise BusinessRuleViolation(f"Document {self.id} is not an invoice")
        return merge_invoice_content(self.content)

    def with_invoice_content(self, content: InvoiceContent) -> "ClientDocument":
        return replace(self, content=content.to_storage(), updated_at=datetime.utcnow())
