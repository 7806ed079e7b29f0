"""
Repository for service records.

``ServiceRepository`` is the capability the API layer depends on:
listing every record and creating a new one.  ``SQLiteServiceRepository``
implements it on top of the shared ``Database`` handle.  All queries use
parameterized statements, and every ``sqlite3.Error`` is reported as
``StorageUnavailable`` so callers never see driver exceptions.

Records are listed in creation order (ascending ``id``).  A record is
returned from ``create`` only after its transaction has committed, so
anything visible through ``list`` is durable.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Protocol, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError

from appydave_api.app.core.db import Database
from appydave_api.app.core.errors import StorageUnavailable, ValidationError
from appydave_api.app.schemas.service import ServiceCreate, ServiceRead

logger = logging.getLogger(__name__)

DEFAULT_SERVICES: Tuple[Tuple[str, str], ...] = (
    ("API Service", "Provides API functionality"),
    ("Billing Service", "Handles billing"),
)


class ServiceRepository(Protocol):
    """Read/write access to service records."""

    def list(self) -> List[ServiceRead]:
        ...

    def create(self, name: str, description: str) -> ServiceRead:
        ...

    def count(self) -> int:
        ...


class SQLiteServiceRepository:
    """``ServiceRepository`` backed by the ``services`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def list(self) -> List[ServiceRead]:
        """Return all records ordered by id."""
        try:
            with self.database.cursor() as cursor:
                rows = cursor.execute(
                    "SELECT id, name, description FROM services ORDER BY id ASC"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Could not read services: {exc}") from exc
        return [self._row_to_service_read(row) for row in rows]

    def create(self, name: str, description: str) -> ServiceRead:
        """Validate, insert and return a new record with its assigned id.

        Raises ``ValidationError`` without touching the database when
        either field is missing or blank.
        """
        try:
            data = ServiceCreate(name=name, description=description)
        except PydanticValidationError as exc:
            errors = [
                {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ]
            raise ValidationError("Invalid service record", details=errors) from exc

        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO services (name, description) VALUES (?, ?)",
                    (data.name, data.description),
                )
                service_id = cursor.lastrowid
                row = cursor.execute(
                    "SELECT id, name, description FROM services WHERE id = ?",
                    (service_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Could not create service: {exc}") from exc

        logger.info("Created service %s (%s)", service_id, data.name)
        return self._row_to_service_read(row)

    def count(self) -> int:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute("SELECT COUNT(*) AS total FROM services").fetchone()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Could not count services: {exc}") from exc
        return int(row["total"])

    @staticmethod
    def _row_to_service_read(row: sqlite3.Row) -> ServiceRead:
        return ServiceRead(id=row["id"], name=row["name"], description=row["description"])


def seed_default_services(
    repository: ServiceRepository,
    services: Sequence[Tuple[str, str]] = DEFAULT_SERVICES,
    force: bool = False,
) -> List[ServiceRead]:
    """Insert the default service records.

    Nothing is inserted when the table already holds records, unless
    ``force`` is set.  Returns the records that were created.
    """
    if not force and repository.count() > 0:
        logger.info("Services table is not empty; skipping seed")
        return []
    created = [repository.create(name, description) for name, description in services]
    logger.info("Seeded %d services", len(created))
    return created
