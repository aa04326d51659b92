"""
FastAPI dependency injection.

Usage in routers::

    from jobscope.api.deps import Service

    @router.get("/jobs")
    def list_jobs(service: Service):
        ...
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from jobscope.core.settings import JobscopeSettings
from jobscope.introspection.service import JobIntrospectionService

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> JobscopeSettings:
    """Cached settings: loaded once per process."""
    return JobscopeSettings()


# ── Introspection service (per-app) ──────────────────────────────────────


def get_service(request: Request) -> JobIntrospectionService:
    """The service bound to the application in :func:`~jobscope.api.app.create_app`."""
    return request.app.state.service


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[JobscopeSettings, Depends(get_settings)]
Service = Annotated[JobIntrospectionService, Depends(get_service)]
