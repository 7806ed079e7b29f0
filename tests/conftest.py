"""
Shared test configuration.

Every test gets its own SQLite file under ``tmp_path`` so tests never
touch the development database and can run in any order.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from appydave_api.app.core.config import Settings  # noqa: E402
from appydave_api.app.core.db import Database, init_db  # noqa: E402
from appydave_api.app.main import create_app  # noqa: E402
from appydave_api.app.services.service_repository import SQLiteServiceRepository  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=str(tmp_path / "services.db"),
        database_timeout=5.0,
        log_level="WARNING",
        log_file="",
        seed_on_startup=False,
    )


@pytest.fixture
def database(settings: Settings) -> Database:
    db = Database(settings.database_url, timeout=settings.database_timeout)
    init_db(db)
    return db


@pytest.fixture
def repository(database: Database) -> SQLiteServiceRepository:
    return SQLiteServiceRepository(database)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
