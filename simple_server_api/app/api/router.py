"""
Top‑level router for the API.

This router aggregates the endpoint routers.  Each endpoint module
defines its own path internally, so no per‑router prefix is given
here; the application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import data, hello, ping

router = APIRouter()

router.include_router(hello.router, tags=["hello"])
router.include_router(data.router, tags=["data"])
router.include_router(ping.router, tags=["health"])
