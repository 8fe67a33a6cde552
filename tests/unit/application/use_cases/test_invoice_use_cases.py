"""
Unit tests for invoice time report linkage, run against in-memory SQLite.
"""

from datetime import date, datetime

import pytest

from vaops.application.dto.base_dto import ReportAudience
from vaops.application.dto.invoice_dto import (
    GetInvoiceTimeReportRequestDTO,
    LinkInvoiceTimeReportRequestDTO,
    ListInvoiceReportOptionsRequestDTO,
    RenderInvoiceTimeReportRequestDTO,
)
from vaops.application.use_cases.invoice_use_cases import (
    GetInvoiceTimeReportUseCase,
    LinkInvoiceTimeReportUseCase,
    ListInvoiceReportOptionsUseCase,
    RenderInvoiceTimeReportUseCase,
)
from vaops.domain.events.base import ALL_EVENTS, EventDispatcher
from vaops.domain.models.base import DateRange
from vaops.domain.models.time_report import PreviewLine, TimeReport
from vaops.infrastructure.db.models import ClientDocumentModel
from vaops.infrastructure.rendering.report_renderer import ReportRenderer
from vaops.infrastructure.repositories import (
    SQLAlchemyClientDocumentRepository,
    SQLAlchemyTimeReportRepository,
)


JANUARY = DateRange(date(2024, 1, 1), date(2024, 1, 31))


class TestInvoiceTimeReportUseCases:
    """Test cases for linking, reading and rendering an invoice's report."""

    @pytest.fixture(autouse=True)
    def wire(self, session, seed, acme):
        self.session = session
        self.seed = seed
        self.documents = SQLAlchemyClientDocumentRepository(session)
        self.reports = SQLAlchemyTimeReportRepository(session)
        self.dispatcher = EventDispatcher()
        self.events = []
        self.dispatcher.subscribe(ALL_EVENTS, self._record)
        seed.document("doc-1", acme, content={"payment_notes": "Thanks", "invoice_number": "INV-000001"})

    async def _record(self, event):
        self.events.append(event)

    async def save_report(self, client_id="client-acme", name="January"):
        lines = [
            PreviewLine(datetime(2024, 1, 12, 14), "Bookkeeping", 2700, source_time_entry_id="te-2"),
            PreviewLine(datetime(2024, 1, 12, 10), "Bookkeeping", 900, source_time_entry_id="te-3"),
            PreviewLine(datetime(2024, 1, 10, 9), "Inbox", 1800, source_time_entry_id="te-1"),
        ]
        report = TimeReport.create("va-1", client_id, name, JANUARY, lines)
        return await self.reports.save_snapshot(report)

    async def link(self, time_report_id, show=None, document_id="doc-1", va_id="va-1"):
        use_case = LinkInvoiceTimeReportUseCase(self.documents, self.reports, self.dispatcher)
        return await use_case.set_current_user(va_id).execute(LinkInvoiceTimeReportRequestDTO(
            document_id=document_id,
            time_report_id=time_report_id,
            show_time_report_to_client=show,
        ))

    async def lookup(self, audience, document_id="doc-1"):
        use_case = GetInvoiceTimeReportUseCase(self.documents, self.reports).set_current_user("va-1")
        return await use_case.execute(
            GetInvoiceTimeReportRequestDTO(document_id=document_id, audience=audience)
        )

    def stored_content(self, document_id="doc-1"):
        self.session.expire_all()
        return self.session.get(ClientDocumentModel, document_id).content

    @pytest.mark.asyncio
    async def test_link_and_show(self):
        report = await self.save_report()

        result = await self.link(report.id, show=True)

        assert result.success is True
        assert result.data.time_report_id == report.id
        assert result.data.show_time_report_to_client is True
        content = self.stored_content()
        assert content["time_report_id"] == report.id
        assert content["show_time_report_to_client"] is True
        assert content["notes"] == "Thanks"
        assert content["invoice_number"] == "INV-000001"
        assert self.events[-1].event_type == "InvoiceTimeReportLinked"

    @pytest.mark.asyncio
    async def test_clearing_resets_visibility(self):
        report = await self.save_report()
        await self.link(report.id, show=True)

        result = await self.link(None, show=True)

        assert result.data.time_report_id is None
        assert result.data.show_time_report_to_client is False
        content = self.stored_content()
        assert content["time_report_id"] == ""
        assert content["show_time_report_to_client"] is False

    @pytest.mark.asyncio
    async def test_report_of_other_client_is_rejected(self):
        self.seed.client("client-other", business_name="Other")
        report = await self.save_report(client_id="client-other")

        result = await self.link(report.id, show=True)

        assert result.error_code == "BUSINESS_RULE_VIOLATION"
        assert self.stored_content().get("time_report_id") is None

    @pytest.mark.asyncio
    async def test_unknown_report_is_not_found(self):
        result = await self.link("missing-report")

        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_non_invoice_cannot_be_linked(self):
        report = await self.save_report()
        self.seed.document("doc-2", "client-acme", doc_type="proposal")

        result = await self.link(report.id, document_id="doc-2")

        assert result.error_code == "BUSINESS_RULE_VIOLATION"

    @pytest.mark.asyncio
    async def test_other_va_cannot_link(self):
        report = await self.save_report()

        result = await self.link(report.id, va_id="va-2")

        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_va_always_sees_linked_report(self):
        report = await self.save_report()
        await self.link(report.id, show=False)

        result = await self.lookup(ReportAudience.VA)

        detail = result.data.report
        assert detail.id == report.id
        assert detail.total_seconds == 5400
        assert len(detail.entries) == 3
        assert [row.key for row in detail.rows][0] == "session-S1"

    @pytest.mark.asyncio
    async def test_client_sees_report_only_when_shown(self):
        report = await self.save_report()
        await self.link(report.id, show=False)

        hidden = await self.lookup(ReportAudience.CLIENT)
        await self.link(report.id, show=True)
        shown = await self.lookup(ReportAudience.CLIENT)

        assert hidden.data.report is None
        assert hidden.data.time_report_id == report.id
        assert shown.data.report.id == report.id

    @pytest.mark.asyncio
    async def test_stale_link_resolves_to_no_report(self):
        report = await self.save_report()
        await self.link(report.id, show=True)
        await self.reports.delete(report.id, "va-1")

        result = await self.lookup(ReportAudience.VA)

        assert result.success is True
        assert result.data.report is None
        assert self.stored_content()["time_report_id"] == report.id

    @pytest.mark.asyncio
    async def test_nothing_linked(self):
        result = await self.lookup(ReportAudience.VA)

        assert result.data.time_report_id is None
        assert result.data.report is None

    @pytest.mark.asyncio
    async def test_options_are_limited_to_invoice_client(self):
        self.seed.client("client-other", business_name="Other")
        mine = await self.save_report()
        await self.save_report(client_id="client-other", name="Other")
        await self.link(mine.id)

        use_case = ListInvoiceReportOptionsUseCase(self.documents, self.reports).set_current_user("va-1")
        result = await use_case.execute(ListInvoiceReportOptionsRequestDTO(document_id="doc-1"))

        assert [option.id for option in result.data.options] == [mine.id]
        assert result.data.selected_report_id == mine.id
        assert result.data.client_id == "client-acme"

    @pytest.mark.asyncio
    async def test_render_respects_visibility(self):
        report = await self.save_report()
        await self.link(report.id, show=False)
        use_case = RenderInvoiceTimeReportUseCase(
            self.documents, self.reports, ReportRenderer()
        ).set_current_user("va-1")

        for_client = await use_case.execute(RenderInvoiceTimeReportRequestDTO(document_id="doc-1"))
        for_va = await use_case.execute(
            RenderInvoiceTimeReportRequestDTO(document_id="doc-1", audience=ReportAudience.VA)
        )

        assert for_client.data.html == ""
        assert "January" in for_va.data.html
        assert "1h 30m" in for_va.data.html
        assert "Client Session" not in for_va.data.html
        assert "Bookkeeping" in for_va.data.html
