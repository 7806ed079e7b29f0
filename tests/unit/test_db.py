"""
Unit tests for database path resolution and migrations.
"""

from __future__ import annotations

import os
from pathlib import Path

from appydave_api.app.core import db as db_module
from appydave_api.app.core.db import MIGRATIONS, Database, init_db, resolve_database_path


def test_absolute_path_is_used_as_is(tmp_path: Path) -> None:
    path = str(tmp_path / "services.db")

    assert resolve_database_path(path) == path


def test_sqlite_url_prefix_is_stripped(tmp_path: Path) -> None:
    path = str(tmp_path / "services.db")

    assert resolve_database_path(f"sqlite:///{path}") == path


def test_relative_path_resolves_against_project_root() -> None:
    project_root = Path(db_module.__file__).resolve().parents[3]

    resolved = resolve_database_path("appydave.db")

    assert os.path.isabs(resolved)
    assert Path(resolved) == project_root / "appydave.db"


def test_init_db_creates_services_table(tmp_path: Path) -> None:
    database = Database(str(tmp_path / "services.db"))

    version = init_db(database)

    assert version == MIGRATIONS[-1][0]
    with database.cursor() as cursor:
        columns = [row["name"] for row in cursor.execute("PRAGMA table_info(services)").fetchall()]
    assert columns[:3] == ["id", "name", "description"]


def test_init_db_is_idempotent(tmp_path: Path) -> None:
    database = Database(str(tmp_path / "services.db"))

    init_db(database)
    init_db(database)

    with database.cursor() as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations").fetchall()]
    assert versions == [version for version, _ in MIGRATIONS]


def test_init_db_enables_wal(tmp_path: Path) -> None:
    database = Database(str(tmp_path / "services.db"))
    init_db(database)

    with database.cursor() as cursor:
        mode = cursor.execute("PRAGMA journal_mode").fetchone()[0]

    assert mode.lower() == "wal"



def test_cursor_rolls_back_on_error(tmp_path: Path) -> None:
    database = Database(str(tmp_path / "services.db"))
    init_db(database)

    try:
        with database.cursor() as cursor:
            cursor.execute("INSERT INTO services (name, description) VALUES ('a', 'b')")
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    with database.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) FROM services").fetchone()[0] == 0
