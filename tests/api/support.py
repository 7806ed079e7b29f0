"""Test doubles for the service repository."""

from __future__ import annotations

from appydave_api.app.core.errors import StorageUnavailable
from appydave_api.app.schemas.service import ServiceRead


class FakeServiceRepository:
    """In-memory repository used to check handler wiring."""

    def __init__(self, records: list[ServiceRead] | None = None) -> None:
        self.records = list(records or [])
        self.list_calls = 0

    def list(self) -> list[ServiceRead]:
        self.list_calls += 1
        return list(self.records)

    def create(self, name: str, description: str) -> ServiceRead:
        record = ServiceRead(id=len(self.records) + 1, name=name, description=description)
        self.records.append(record)
        return record

    def count(self) -> int:
        return len(self.records)


class UnavailableServiceRepository:
    """Repository whose store cannot be reached."""

    def list(self) -> list[ServiceRead]:
        raise StorageUnavailable("Could not read services: database is locked")

    def create(self, name: str, description: str) -> ServiceRead:
        raise StorageUnavailable("Could not create service: database is locked")

    def count(self) -> int:
        raise StorageUnavailable("Could not count services: database is locked")
