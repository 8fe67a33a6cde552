"""
Invoice content schema.

Invoice documents store their body as a JSON blob. Older documents were
written with different key names, so every blob is passed through
``merge_invoice_content`` on load, which fills defaults, upgrades legacy
keys and stamps the current schema version.
"""

import time
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

INVOICE_SCHEMA_VERSION = 2
INVOICE_DOC_TYPE = "invoice"

# legacy key -> current key
_LEGACY_KEYS = {
    "payment_notes": "notes",
    "bank_details": "payment_details",
    "client_name": "client_contact_name",
}


def build_invoice_number() -> str:
    """Generate an invoice number from the current clock."""
    return f"INV-{str(int(time.time() * 1000))[-6:]}"


class InvoiceLineItem(BaseModel):
    """Billable line on an invoice."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=lambda: str(int(time.time() * 1000)))
    description: str = ""
    quantity: float = 1
    unit_price: str = ""


class InvoiceContent(BaseModel):
    """Current invoice content schema."""

    model_config = ConfigDict(extra="allow")

    schema_version: int = INVOICE_SCHEMA_VERSION
    hero_image_url: str = ""
    hero_title: str = "INVOICE"
    business_name: str = ""
    business_logo_url: str = ""
    business_email: str = ""
    business_phone: str = ""
    business_address: str = ""
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    po_number: str = ""
    show_po: bool = False
    client_business_name: str = ""
    client_contact_name: str = ""
    client_address: str = ""
    client_email: str = ""
    line_items: List[InvoiceLineItem] = Field(default_factory=list)
    notes: str = ""
    payment_details: str = ""
    va_name: str = ""
    va_email: str = ""
    va_business_name: str = ""
    time_report_id: str = ""
    show_time_report_to_client: bool = False

    @model_validator(mode="after")
    def _hide_report_without_link(self) -> "InvoiceContent":
        # a cleared link can never keep a stale "show to client" flag
        if not self.time_report_id:
            self.show_time_report_to_client = False
        return self

    @property
    def has_time_report(self) -> bool:
        return bool(self.time_report_id)

    def discloses_time_report(self) -> bool:
        """Whether the linked breakdown is part of client-visible output."""
        return self.has_time_report and self.show_time_report_to_client

    def link_time_report(
        self,
        time_report_id: Optional[str],
        show_to_client: Optional[bool] = None,
    ) -> "InvoiceContent":
        """
        Return a copy pointing at ``time_report_id``.
        An empty id clears the link and the visibility flag together.
        """
        if not time_report_id:
            return self.clear_time_report()
        show = self.show_time_report_to_client if show_to_client is None else show_to_client
        if time_report_id != self.time_report_id and show_to_client is None:
            show = False
        return self.model_copy(update={
            "time_report_id": time_report_id,
            "show_time_report_to_client": bool(show),
        })

    def clear_time_report(self) -> "InvoiceContent":
        return self.model_copy(update={
            "time_report_id": "",
            "show_time_report_to_client": False,
        })

    def to_storage(self) -> Dict[str, Any]:
        """Serialize for the document content column."""
        return self.model_dump(mode="json")


@dataclass
class InvoiceDefaultsSeed:
    """Values taken from the VA profile and client when a new invoice is drafted."""

    business_name: str = ""
    business_logo_url: str = ""
    business_email: str = ""
    business_phone: str = ""
    business_address: str = ""
    va_name: str = ""
    va_email: str = ""
    client_business_name: str = ""
    client_contact_name: str = ""
    client_email: str = ""
    notes: str = ""
    payment_details: str = ""


def create_invoice_defaults(
    seed: Optional[InvoiceDefaultsSeed] = None,
    today: Optional[date] = None,
) -> InvoiceContent:
    """Build a fresh invoice body."""
    seed = seed or InvoiceDefaultsSeed()
    return InvoiceContent(
        business_name=seed.business_name,
        business_logo_url=seed.business_logo_url,
        business_email=seed.business_email,
        business_phone=seed.business_phone,
        business_address=seed.business_address,
        invoice_number=build_invoice_number(),
        issue_date=(today or date.today()).isoformat(),
        client_business_name=seed.client_business_name,
        client_contact_name=seed.client_contact_name,
        client_email=seed.client_email,
        notes=seed.notes,
        payment_details=seed.payment_details,
        va_name=seed.va_name,
        va_email=seed.va_email,
        va_business_name=seed.business_name,
    )


def _to_quantity(value: Any) -> float:
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        return 1.0
    return quantity or 1.0


def _normalize_line_items(items: Any) -> List[Dict[str, Any]]:
    if not isinstance(items, list):
        return []
    normalized = []
    for item in items:
        if not isinstance(item, dict):
            continue
        if "unit_price" in item or "quantity" in item:
            unit_price = item.get("unit_price")
            quantity = _to_quantity(item.get("quantity"))
        else:
            # v1 items carried a single flat amount
            unit_price = item.get("amount")
            quantity = 1
        line = {
            "description": item.get("description") or "",
            "quantity": quantity,
            "unit_price": "" if unit_price is None else str(unit_price),
        }
        if item.get("id"):
            line["id"] = str(item["id"])
        normalized.append(line)
    return normalized


def merge_invoice_content(
    content: Optional[Dict[str, Any]],
    seed: Optional[InvoiceDefaultsSeed] = None,
    today: Optional[date] = None,
) -> InvoiceContent:
    """
    Upgrade a stored invoice blob of any schema version to the current one.

    Missing fields come from the defaults, legacy keys are renamed, an
    invoice number and issue date are generated when absent, and a PO number
    turns on its visibility flag.
    """
    defaults = create_invoice_defaults(seed, today)
    if not content:
        return defaults

    raw = dict(content)
    merged = defaults.model_dump()
    # null values fall back to the defaults
    merged.update({
        key: value for key, value in raw.items()
        if key not in _LEGACY_KEYS and value is not None
    })

    for legacy_key, current_key in _LEGACY_KEYS.items():
        if not raw.get(current_key) and raw.get(legacy_key):
            merged[current_key] = raw[legacy_key]
        elif not raw.get(current_key):
            merged[current_key] = getattr(defaults, current_key)

    merged["line_items"] = _normalize_line_items(raw.get("line_items"))
    merged["time_report_id"] = raw.get("time_report_id") or ""
    merged["show_time_report_to_client"] = bool(raw.get("show_time_report_to_client"))
    merged["schema_version"] = INVOICE_SCHEMA_VERSION

    if not merged.get("invoice_number"):
        merged["invoice_number"] = build_invoice_number()
    if merged.get("po_number") and not merged.get("show_po"):
        merged["show_po"] = True
    if not merged.get("issue_date"):
        merged["issue_date"] = defaults.issue_date

    return InvoiceContent.model_validate(merged)
