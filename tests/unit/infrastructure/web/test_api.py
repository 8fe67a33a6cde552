"""
API tests for the time report and invoice linkage routers.
"""

import pytest
from fastapi.testclient import TestClient

from vaops.config import Settings
from vaops.infrastructure.auth.jwt_handler import JWTHandler
from vaops.main import create_application


JWT_SECRET = "test-secret"
PREFIX = "/api/v1"


@pytest.fixture
def settings():
    return Settings(
        environment="testing",
        database_url="sqlite:///:memory:",
        supabase_jwt_secret=JWT_SECRET,
        sentry_dsn=None,
    )


@pytest.fixture
def client(settings, database):
    app = create_application(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(va_id="va-1"):
    token = JWTHandler(JWT_SECRET).generate_token(va_id)
    return {"Authorization": f"Bearer {token}"}


def preview_body(**overrides):
    body = {"client_id": "client-acme", "date_from": "2024-01-01", "date_to": "2024-01-31"}
    body.update(overrides)
    return body


class TestHealth:
    """Test cases for the health endpoint."""

    def test_health(self, client):
        response = client.get(f"{PREFIX}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_startup_builds_renderer(self, client):
        renderer = client.app.state.report_renderer

        assert "duration" in renderer.env.filters
        assert client.get(f"{PREFIX}/health").status_code == 200


class TestAuthentication:
    """Test cases for bearer token handling."""

    def test_missing_token(self, client, acme):
        response = client.post(f"{PREFIX}/time-reports/preview", json=preview_body())

        assert response.status_code in (401, 403)

    def test_bad_token(self, client, acme):
        response = client.post(
            f"{PREFIX}/time-reports/preview",
            json=preview_body(),
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


class TestTimeReportsApi:
    """Test cases for the time reports router."""

    def save(self, client, **overrides):
        preview = client.post(
            f"{PREFIX}/time-reports/preview", json=preview_body(), headers=auth_headers()
        ).json()
        body = {
            "client_id": preview["client_id"],
            "client_name": preview["client_name"],
            "date_from": preview["date_from"],
            "date_to": preview["date_to"],
            "lines": preview["lines"],
        }
        body.update(overrides)
        return client.post(f"{PREFIX}/time-reports", json=body, headers=auth_headers())

    def test_preview(self, client, acme):
        response = client.post(
            f"{PREFIX}/time-reports/preview", json=preview_body(), headers=auth_headers()
        )

        assert response.status_code == 200
        data = response.json()
        assert data["entry_count"] == 3
        assert data["total_seconds"] == 5400
        assert data["suggested_name"] == "Acme Co – 01 Jan 2024–31 Jan 2024"

    def test_preview_rejects_reversed_range(self, client, acme):
        response = client.post(
            f"{PREFIX}/time-reports/preview",
            json=preview_body(date_from="2024-02-01", date_to="2024-01-01"),
            headers=auth_headers(),
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "VALIDATION_ERROR"

    def test_save_list_get_delete(self, client, acme):
        saved = self.save(client)
        assert saved.status_code == 201
        report = saved.json()["reports"][0]
        assert report["entry_count"] == 3

        listing = client.get(
            f"{PREFIX}/time-reports", params={"client_id": acme}, headers=auth_headers()
        )
        assert listing.json()["total"] == 1

        detail = client.get(f"{PREFIX}/time-reports/{report['id']}", headers=auth_headers())
        assert detail.status_code == 200
        assert len(detail.json()["rows"]) == 4

        unconfirmed = client.delete(f"{PREFIX}/time-reports/{report['id']}", headers=auth_headers())
        assert unconfirmed.status_code == 400

        deleted = client.delete(
            f"{PREFIX}/time-reports/{report['id']}", params={"confirm": "true"}, headers=auth_headers()
        )
        assert deleted.status_code == 204

        missing = client.get(f"{PREFIX}/time-reports/{report['id']}", headers=auth_headers())
        assert missing.status_code == 404

    def test_whitespace_name_is_rejected(self, client, acme):
        response = self.save(client, name="   ")

        assert response.status_code == 400

    def test_reports_are_private_to_their_va(self, client, acme):
        report = self.save(client).json()["reports"][0]

        response = client.get(f"{PREFIX}/time-reports/{report['id']}", headers=auth_headers("va-2"))

        assert response.status_code == 404


class TestInvoiceTimeReportApi:
    """Test cases for the invoice linkage router."""

    @pytest.fixture
    def report_id(self, client, acme, seed):
        seed.document("doc-1", acme)
        preview = client.post(
            f"{PREFIX}/time-reports/preview", json=preview_body(), headers=auth_headers()
        ).json()
        saved = client.post(f"{PREFIX}/time-reports", json={
            "client_id": acme,
            "date_from": preview["date_from"],
            "date_to": preview["date_to"],
            "lines": preview["lines"],
        }, headers=auth_headers())
        return saved.json()["reports"][0]["id"]

    def test_link_show_and_clear(self, client, report_id):
        url = f"{PREFIX}/invoices/doc-1/time-report"

        linked = client.put(url, json={"time_report_id": report_id}, headers=auth_headers())
        assert linked.status_code == 200
        assert linked.json()["show_time_report_to_client"] is False

        hidden = client.get(url, params={"audience": "client"}, headers=auth_headers())
        assert hidden.json()["report"] is None

        client.put(url, json={"time_report_id": report_id, "show_time_report_to_client": True},
                   headers=auth_headers())
        shown = client.get(url, params={"audience": "client"}, headers=auth_headers())
        assert shown.json()["report"]["id"] == report_id

        html = client.get(f"{url}/html", headers=auth_headers())
        assert html.status_code == 200
        assert "text/html" in html.headers["content-type"]
        assert "Bookkeeping" in html.text

        cleared = client.delete(url, headers=auth_headers())
        assert cleared.json() == {
            "document_id": "doc-1",
            "time_report_id": None,
            "show_time_report_to_client": False,
        }

    def test_options(self, client, report_id):
        response = client.get(f"{PREFIX}/invoices/doc-1/time-report/options", headers=auth_headers())

        assert response.status_code == 200
        assert [option["id"] for option in response.json()["options"]] == [report_id]

    def test_unknown_invoice(self, client, report_id):
        response = client.get(f"{PREFIX}/invoices/doc-missing/time-report", headers=auth_headers())

        assert response.status_code == 404


class TestClientSearchApi:
    """Test cases for the client picker."""

    def test_search(self, client, acme):
        response = client.get(f"{PREFIX}/clients/search", params={"q": "acm"}, headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["clients"][0]["display_name"] == "Acme Co"

    def test_short_query_is_rejected(self, client, acme):
        response = client.get(f"{PREFIX}/clients/search", params={"q": "a"}, headers=auth_headers())

        assert response.status_code == 400
