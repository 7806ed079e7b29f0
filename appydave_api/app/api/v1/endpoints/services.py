"""
Service listing endpoint for API v1.

The handler is a plain function so FastAPI runs it in the worker
thread pool; concurrent listings never block one another or the event
loop while waiting on SQLite.
"""

from typing import List

from fastapi import APIRouter, Depends

from appydave_api.app.api.deps import get_service_repository
from appydave_api.app.schemas.service import ServiceRead
from appydave_api.app.services.service_repository import ServiceRepository

router = APIRouter()


@router.get("", response_model=List[ServiceRead])
def list_services(
    repository: ServiceRepository = Depends(get_service_repository),
) -> List[ServiceRead]:
    """Return every service record in creation order.

    An empty store yields ``[]``.  If the database cannot be reached the
    repository raises ``StorageUnavailable``, answered with HTTP 503.
    """
    return repository.list()
