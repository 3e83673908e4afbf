"""Service banner and retired endpoint tests."""

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)


def test_root_reports_service_running() -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "is running" in response.text


def test_sheet_endpoints_are_gone() -> None:
    for method, path in (
        ("GET", "/api/sheets/tabs"),
        ("POST", "/api/sheets/create"),
        ("DELETE", "/api/sheets/delete"),
        ("POST", "/api/sheets/orders/Main"),
    ):
        response = client.request(method, path)
        assert response.status_code == 410
        assert response.json()["detail"] == "Google Sheets integration has been removed"
