"""
Tests unitarios para los endpoints de sincronización y autenticación.

Verifica el contrato HTTP:
- Siempre 200 con {ok, error, updates} (los errores viajan en el cuerpo).
- Las claves del JSON usan los alias newOrderItems / newRFPs / sentProposals.
- /auth valida los parámetros de query antes de llamar al servicio.
"""
from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from baseline_connector.api.v1.dependencies.use_case_deps import get_auth_use_cases, get_sync_use_cases
from baseline_connector.application.use_cases.auth_use_cases import AuthUseCases
from baseline_connector.application.use_cases.sync_use_cases import SyncUseCases
from tests.fakes import FakeCatalog, InMemorySheet, make_rfp


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog([make_rfp("A", n_items=2)])


@pytest.fixture
def app_with_fakes(outbound_sheet: InMemorySheet, fake_catalog: FakeCatalog):
    """Crea la app FastAPI con hoja y servicio falsos via dependency_overrides."""
    from main import create_application
    app = create_application()
    app.dependency_overrides[get_sync_use_cases] = lambda: SyncUseCases(
        store_provider=lambda: outbound_sheet,
        catalog_provider=lambda: fake_catalog,
    )
    app.dependency_overrides[get_auth_use_cases] = lambda: AuthUseCases(lambda: fake_catalog)
    yield app
    app.dependency_overrides.clear()


async def _request(app, method: str, url: str, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, url, **kwargs)


@pytest.mark.asyncio
async def test_sync_all_endpoint_reports_aliased_counts(app_with_fakes) -> None:
    response = await _request(app_with_fakes, "POST", "/api/v1/sync/all")

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "error": "",
        "updates": {"newOrderItems": 2, "newRFPs": 1, "sentProposals": 2},
    }


@pytest.mark.asyncio
async def test_sync_inbound_endpoint(app_with_fakes, outbound_sheet: InMemorySheet) -> None:
    response = await _request(app_with_fakes, "POST", "/api/v1/sync/inbound")

    data = response.json()
    assert data["ok"] is True
    assert data["updates"]["newRFPs"] == 1
    assert outbound_sheet.rows("RFPS") == [["A", "Buyer", "2", "2024-05-01"]]


@pytest.mark.asyncio
async def test_sync_outbound_failure_is_returned_in_body(
    app_with_fakes, fake_catalog: FakeCatalog
) -> None:
    fake_catalog.reject_status = 400

    response = await _request(app_with_fakes, "POST", "/api/v1/sync/outbound")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is False
    assert "400" in data["error"]
    assert data["updates"]["sentProposals"] == 0


@pytest.mark.asyncio
async def test_sync_status_endpoint(app_with_fakes) -> None:
    response = await _request(app_with_fakes, "GET", "/api/v1/sync/status")

    data = response.json()
    assert data["ok"] is True
    assert data["remoteRFPs"] == 1
    assert data["pendingInbound"] == 1
    assert data["pendingOutbound"] == 2


@pytest.mark.asyncio
async def test_auth_endpoint_missing_email(app_with_fakes, fake_catalog: FakeCatalog) -> None:
    response = await _request(app_with_fakes, "POST", "/api/v1/auth", params={"password": "x"})

    assert response.status_code == 200
    assert response.json() == {"ok": False, "error": "Url Param 'email' is missing"}
    assert fake_catalog.auth_calls == []


@pytest.mark.asyncio
async def test_auth_endpoint_forwards_credentials(app_with_fakes, fake_catalog: FakeCatalog) -> None:
    response = await _request(
        app_with_fakes,
        "POST",
        "/api/v1/auth",
        params={"email": "user@example.com", "password": "secret"},
    )

    assert response.json() == {"ok": True, "error": ""}
    assert fake_catalog.auth_calls == [("user@example.com", "secret")]


@pytest.mark.asyncio
async def test_health(app_with_fakes) -> None:
    response = await _request(app_with_fakes, "GET", "/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_validate_config_warns_about_missing_values() -> None:
    from baseline_connector.core.config import Settings
    from baseline_connector.core.events import validate_config

    warnings = validate_config(Settings(CATALOG_BASE_URL="", SPREADSHEET_ID=""))

    assert len(warnings) == 2
    assert validate_config(Settings(CATALOG_BASE_URL="http://catalog", SPREADSHEET_ID="s")) == []


@pytest.mark.asyncio
async def test_lifespan_adds_and_removes_log_file_sink(monkeypatch, tmp_path) -> None:
    from baseline_connector.core.config import settings
    from main import create_application

    log_file = tmp_path / "connector.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
    app = create_application()

    async with app.router.lifespan_context(app):
        assert app.state.log_sink_id is not None

    assert app.state.log_sink_id is None
    assert "Aplicacion iniciada correctamente" in log_file.read_text(encoding="utf-8")
