"""API – FastAPI application factory."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from flagsync import __version__
from flagsync.adapters.fastapi import (
    FastAPICorrelationIdMiddleware,
    FastAPIHealthRouter,
    FlagSyncExceptionMapper,
)
from flagsync.api.container import FlagSyncContainer, build_container
from flagsync.api.routers import bot, diag, discord, flags, installations, meta
from flagsync.config import FlagSyncSettings, load_settings
from flagsync.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)


def create_app(
    settings: FlagSyncSettings | None = None,
    container: FlagSyncContainer | None = None,
    *,
    configure_logging: bool = True,
) -> FastAPI:
    """Build the flag authority application.

    Settings are loaded (and validated) once here unless given; a prebuilt
    *container* wins over *settings*. Shutdown drains pending refresh
    notifications before the HTTP client and store are closed.
    """
    if container is None:
        settings = settings or load_settings()
        container = build_container(settings)
    settings = container.settings

    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level, json_output=not settings.is_development)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("app.startup", store=getattr(container.store, "name", None))
        yield
        logger.info("app.shutdown", pending_refreshes=container.scheduler.pending)
        await container.aclose()

    app = FastAPI(
        title="flagsync",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.container = container

    app.add_middleware(FastAPICorrelationIdMiddleware)
    FlagSyncExceptionMapper().register(app)

    # the static index route is registered before the {slug} routes
    app.include_router(installations.router)
    app.include_router(flags.router)
    app.include_router(meta.router)
    app.include_router(discord.router)
    app.include_router(bot.router)
    app.include_router(diag.router)
    app.include_router(FastAPIHealthRouter(container.health))
    return app


__all__ = ["create_app"]
