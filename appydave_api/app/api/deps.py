"""
FastAPI dependencies shared by the endpoint modules.

The repository is created once in ``create_app`` and kept on
``app.state``; handlers obtain it through ``get_service_repository`` so
tests can replace it with ``app.dependency_overrides``.
"""

from fastapi import Request

from appydave_api.app.services.service_repository import ServiceRepository


def get_service_repository(request: Request) -> ServiceRepository:
    return request.app.state.service_repository
