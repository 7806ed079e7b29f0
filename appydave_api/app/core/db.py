"""
SQLite database integration and simple migration system.

A single ``Database`` object is created per process and shared by every
request.  It does not hold an open connection; instead ``connect`` and
``cursor`` open a short-lived connection per operation, which lets
request threads read concurrently while SQLite serialises writers.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

_SQLITE_PREFIX = "sqlite:///"

# Each entry is (version, script).  Append new migrations with an
# incremented version number; never edit an applied one.
MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS services (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Accepts either a plain path or a ``sqlite:///`` URL.  Absolute paths
    are used as is; relative paths are resolved against the project root.
    """
    if database_url.startswith(_SQLITE_PREFIX):
        database_url = database_url[len(_SQLITE_PREFIX):]
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / database_url).resolve())


class Database:
    """Shared handle to the SQLite data store."""

    def __init__(self, database_url: str, timeout: float = 5.0) -> None:
        self.path = resolve_database_path(database_url)
        self.timeout = timeout

    def connect(self) -> sqlite3.Connection:
        """Open a new connection with rows accessible by column name."""
        conn = sqlite3.connect(self.path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


def init_db(database: Database) -> int:
    """Apply pending migrations and return the resulting schema version.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies every entry of ``MIGRATIONS``
    with a higher version.  Safe to call on every startup.
    """
    with database.cursor() as cursor:
        # WAL lets readers proceed while a write is in progress.
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied migration %s to %s", version, database.path)
                current_version = version
    return current_version
