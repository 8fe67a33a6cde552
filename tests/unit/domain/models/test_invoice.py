"""
Unit tests for the invoice content schema.
"""

from datetime import date

import pytest

from vaops.domain.models.base import BusinessRuleViolation
from vaops.domain.models.document import ClientDocument
from vaops.domain.models.invoice import (
    INVOICE_SCHEMA_VERSION,
    InvoiceContent,
    InvoiceDefaultsSeed,
    create_invoice_defaults,
    merge_invoice_content,
)


TODAY = date(2024, 2, 1)


class TestInvoiceContent:
    """Test cases for time report linkage on invoice content."""

    def test_empty_link_forces_hidden(self):
        content = InvoiceContent(time_report_id="", show_time_report_to_client=True)

        assert content.show_time_report_to_client is False
        assert content.discloses_time_report() is False

    def test_link_and_show(self):
        content = InvoiceContent().link_time_report("report-1", show_to_client=True)

        assert content.time_report_id == "report-1"
        assert content.discloses_time_report() is True

    def test_clearing_resets_flag(self):
        content = InvoiceContent(time_report_id="report-1", show_time_report_to_client=True)

        cleared = content.link_time_report(None, show_to_client=True)

        assert cleared.time_report_id == ""
        assert cleared.show_time_report_to_client is False

    def test_switching_report_hides_it_unless_told_otherwise(self):
        content = InvoiceContent(time_report_id="report-1", show_time_report_to_client=True)

        assert content.link_time_report("report-2").show_time_report_to_client is False
        assert content.link_time_report("report-1").show_time_report_to_client is True
        assert content.link_time_report("report-2", True).show_time_report_to_client is True

    def test_link_does_not_mutate_original(self):
        content = InvoiceContent()

        content.link_time_report("report-1", True)

        assert content.time_report_id == ""


class TestMergeInvoiceContent:
    """Test cases for upgrading stored invoice content."""

    def test_empty_content_gets_defaults(self):
        seed = InvoiceDefaultsSeed(business_name="VA Studio", va_email="va@example.com")

        content = merge_invoice_content(None, seed, TODAY)

        assert content.business_name == "VA Studio"
        assert content.va_business_name == "VA Studio"
        assert content.issue_date == "2024-02-01"
        assert content.invoice_number.startswith("INV-")
        assert len(content.invoice_number) == 10
        assert content.schema_version == INVOICE_SCHEMA_VERSION

    def test_legacy_keys_are_upgraded(self):
        raw = {
            "payment_notes": "Thanks!",
            "bank_details": "Sort 00-00-00",
            "client_name": "Jane Doe",
            "invoice_number": "INV-000123",
            "line_items": [{"id": "1", "description": "Admin", "amount": 150}],
        }

        content = merge_invoice_content(raw, today=TODAY)

        assert content.notes == "Thanks!"
        assert content.payment_details == "Sort 00-00-00"
        assert content.client_contact_name == "Jane Doe"
        assert content.invoice_number == "INV-000123"
        assert content.line_items[0].unit_price == "150"
        assert content.line_items[0].quantity == 1
        assert "payment_notes" not in content.to_storage()

    def test_current_keys_win_over_legacy(self):
        content = merge_invoice_content({"notes": "New", "payment_notes": "Old"}, today=TODAY)

        assert content.notes == "New"

    def test_po_number_turns_on_visibility(self):
        content = merge_invoice_content({"po_number": "PO-9"}, today=TODAY)

        assert content.show_po is True

    def test_stale_show_flag_without_link_is_dropped(self):
        content = merge_invoice_content({"show_time_report_to_client": True}, today=TODAY)

        assert content.has_time_report is False
        assert content.show_time_report_to_client is False

    def test_unknown_keys_are_preserved(self):
        content = merge_invoice_content({"hero_color": "#fff"}, today=TODAY)

        assert content.to_storage()["hero_color"] == "#fff"

    def test_defaults_have_no_link(self):
        content = create_invoice_defaults(today=TODAY)

        assert content.time_report_id == ""
        assert content.show_time_report_to_client is False

    def test_null_fields_fall_back_to_defaults(self):
        content = merge_invoice_content(
            {"due_date": None, "notes": None, "show_po": None, "time_report_id": "r1"},
            today=TODAY,
        )

        assert content.due_date == ""
        assert content.notes == ""
        assert content.show_po is False
        assert content.time_report_id == "r1"

    def test_bad_quantity_defaults_to_one(self):
        raw = {"line_items": [
            {"description": "Admin", "quantity": "two", "unit_price": "50"},
            {"description": "Inbox", "quantity": None, "unit_price": "20"},
            {"description": "Calls", "quantity": "3", "unit_price": "10"},
        ]}

        content = merge_invoice_content(raw, today=TODAY)

        assert [item.quantity for item in content.line_items] == [1, 1, 3]


class TestClientDocument:
    """Test cases for ClientDocument invoice access."""

    def test_non_invoice_has_no_invoice_content(self):
        document = ClientDocument(id="doc-1", va_id="va-1", client_id="c1", doc_type="proposal")

        with pytest.raises(BusinessRuleViolation):
            document.invoice_content()

    def test_with_invoice_content_stores_json(self):
        document = ClientDocument(id="doc-1", va_id="va-1", client_id="c1", doc_type="invoice")

        updated = document.with_invoice_content(InvoiceContent().link_time_report("r1", True))

        assert updated.content["time_report_id"] == "r1"
        assert updated.content["show_time_report_to_client"] is True
        assert document.content == {}
