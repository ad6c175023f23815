"""
API tests for the scan endpoints (FastAPI TestClient).
"""

import pytest
from fastapi.testclient import TestClient

from dni_scanner.api.main import app
from dni_scanner.api.routes import scan as scan_routes
from dni_scanner.config.settings import get_settings


@pytest.fixture
def client():
    get_settings.cache_clear()
    scan_routes._use_case = None
    with TestClient(app) as c:
        yield c
    scan_routes._use_case = None
    get_settings.cache_clear()


class TestScanEndpoint:

    def test_front_and_back(self, client, front_text, back_text):
        resp = client.post("/api/v1/scan", json={"front_text": front_text, "back_text": back_text})
        assert resp.status_code == 200
        assert resp.json() == {
            "givenName": "Juan Carlos",
            "surname": "Perez",
            "idNumber": "12345678",
            "birthDate": "15/03/1985",
            "address": "Av Siempreviva 742",
            "birthplace": "Buenos Aires",
            "taxId": "20-12345678-1",
        }

    def test_absent_fields_are_omitted(self, client):
        resp = client.post("/api/v1/scan", json={"front_text": "12345678"})
        assert resp.status_code == 200
        assert resp.json() == {"idNumber": "12345678"}

    def test_back_text_is_optional(self, client, front_text):
        body = client.post("/api/v1/scan", json={"front_text": front_text}).json()
        assert set(body) == {"givenName", "surname", "idNumber", "birthDate"}

    @pytest.mark.parametrize("front", ["", "   ", "|||"])
    def test_unusable_front_is_422(self, client, front):
        resp = client.post("/api/v1/scan", json={"front_text": front})
        assert resp.status_code == 422
        assert "empty" in resp.json()["detail"].lower() or "usable" in resp.json()["detail"].lower()

    def test_missing_front_is_rejected(self, client):
        resp = client.post("/api/v1/scan", json={"back_text": "CUIL 20-12345678-1"})
        assert resp.status_code == 422


class TestDetailedEndpoint:

    def test_envelope(self, client, front_text, back_text):
        resp = client.post("/api/v1/scan/detailed", json={"front_text": front_text, "back_text": back_text})
        assert resp.status_code == 200
        body = resp.json()
        assert body["scan_id"]
        assert body["record"]["taxId"] == "20-12345678-1"
        assert body["back_side_processed"] is True
        assert "back_side_error" not in body
        assert set(body["stage_latencies"]) == {"front_ms", "back_ms"}

    def test_front_only(self, client, front_text):
        body = client.post("/api/v1/scan/detailed", json={"front_text": front_text}).json()
        assert body["back_side_processed"] is False
        assert "taxId" not in body["record"]


class TestNormalizeEndpoint:

    def test_front_strips_noise(self, client):
        resp = client.post("/api/v1/debug/normalize", json={"text": "  PEREZ |\n\n JUAN  *CARLOS ", "side": "front"})
        assert resp.status_code == 200
        assert resp.json() == {
            "side": "front",
            "line_count": 2,
            "text_length": len("PEREZ\nJUAN CARLOS"),
            "lines": ["PEREZ", "JUAN CARLOS"],
            "text": "PEREZ\nJUAN CARLOS",
        }

    def test_back_keeps_symbols(self, client):
        body = client.post("/api/v1/debug/normalize", json={"text": "CUIL: 20-12345678-1", "side": "back"}).json()
        assert body["lines"] == ["CUIL: 20-12345678-1"]

    def test_unknown_side_is_rejected(self, client):
        resp = client.post("/api/v1/debug/normalize", json={"text": "x", "side": "middle"})
        assert resp.status_code == 422


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["birth_year_window"] == [1900, 2010]
