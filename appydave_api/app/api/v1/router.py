"""
Top-level router for version 1 of the API.

Only the exact paths ``/hello`` and ``/services`` are routed, GET only.
Register new endpoint modules here.
"""

from fastapi import APIRouter

from .endpoints import hello, services

router = APIRouter()

router.include_router(hello.router, prefix="/hello", tags=["hello"])
router.include_router(services.router, prefix="/services", tags=["services"])
