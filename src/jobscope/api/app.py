"""
FastAPI application factory.

``create_app()`` wires settings, the introspection service and the jobs
router into a single ``FastAPI`` instance.

When no service is passed in, the lifespan opens the job store named in
the settings (see :func:`~jobscope.introspection.apscheduler_engine.open_engine`)
and closes it on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import ExitStack, asynccontextmanager

from fastapi import FastAPI

from jobscope import __version__
from jobscope.api.deps import get_settings
from jobscope.core.logging import configure_logging, get_logger
from jobscope.core.settings import JobscopeSettings
from jobscope.introspection.service import JobIntrospectionService

log = get_logger("jobscope.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup / shutdown hooks."""
    with ExitStack() as stack:
        if app.state.service is None:
            from jobscope.introspection.apscheduler_engine import open_engine

            engine = stack.enter_context(open_engine(app.state.settings))
            app.state.service = JobIntrospectionService(engine)

        log.info("jobscope API starting", version=app.version)
        yield
        log.info("jobscope API shutting down")


def create_app(
    *,
    service: JobIntrospectionService | None = None,
    settings: JobscopeSettings | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    service : JobIntrospectionService | None
        Service to expose (useful for testing and for embedding in a process
        that already runs the scheduler).
    settings : JobscopeSettings | None
        Override settings. When ``None`` the cached singleton from
        :func:`get_settings` is used.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)

    app = FastAPI(
        title="jobscope API",
        version=__version__,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.service = service
    app.dependency_overrides[get_settings] = lambda: settings

    from jobscope.api.routers import jobs

    app.include_router(jobs.router, prefix=settings.api_prefix, tags=["jobs"])

    return app
