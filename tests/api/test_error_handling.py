# Tests for translating application errors into HTTP responses.

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient

from appydave_api.app.api.deps import get_service_repository
from appydave_api.app.core.config import Settings
from appydave_api.app.core.errors import NotFound, ValidationError
from appydave_api.app.main import create_app
from tests.api.support import UnavailableServiceRepository


def test_storage_unavailable_maps_to_503(client: TestClient, app: FastAPI) -> None:
    app.dependency_overrides[get_service_repository] = lambda: UnavailableServiceRepository()

    response = client.get("/api/v1/services")

    assert response.status_code == 503
    assert "database is locked" in response.json()["detail"]


def test_hello_is_unaffected_by_storage_failure(client: TestClient, app: FastAPI) -> None:
    app.dependency_overrides[get_service_repository] = lambda: UnavailableServiceRepository()

    response = client.get("/api/v1/hello")

    assert response.status_code == 200


def test_missing_database_file_location_maps_to_503(tmp_path: Path) -> None:
    app = create_app(Settings(database_url=str(tmp_path / "services.db"), log_level="WARNING"))
    with TestClient(app) as test_client:
        # Point the repository at a directory that does not exist after startup.
        app.state.service_repository.database.path = str(tmp_path / "gone" / "services.db")
        response = test_client.get("/api/v1/services")

    assert response.status_code == 503


def test_validation_error_maps_to_422_with_field_errors(app: FastAPI) -> None:
    @app.get("/probe/validation")
    def probe() -> None:
        raise ValidationError("Invalid service record", details=[{"field": "name", "message": "must not be empty"}])

    with TestClient(app) as test_client:
        response = test_client.get("/probe/validation")

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Invalid service record",
        "errors": [{"field": "name", "message": "must not be empty"}],
    }


def test_not_found_error_maps_to_404(app: FastAPI) -> None:
    @app.get("/probe/missing")
    def probe() -> None:
        raise NotFound("Service not found")

    with TestClient(app) as test_client:
        response = test_client.get("/probe/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Service not found"}
