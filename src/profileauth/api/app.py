"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from profileauth import __version__
from profileauth.api.errors import install_error_handlers
from profileauth.api.rendering import CookieWriterFactory, JsonRenderer, ResponseCookieWriter
from profileauth.api.routes import admin, health, login
from profileauth.core.config import AppSettings
from profileauth.core.logging import configure_logging
from profileauth.core.protocols import IFlowResumer, IRenderer, IStateStore
from profileauth.flow import SelectionResolver
from profileauth.persistence import create_state_store
from profileauth.sources import ReturnToResumer, SourceRegistry, build_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the wiring once the application starts serving."""
    settings: AppSettings = app.state.settings
    logger.info(
        "profileauth %s starting (environment=%s, state backend=%s, %d source(s))",
        __version__, settings.environment, settings.state.backend, len(app.state.registry),
    )
    yield


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    store: Optional[IStateStore] = None,
    registry: Optional[SourceRegistry] = None,
    resumer: Optional[IFlowResumer] = None,
    renderer: Optional[IRenderer] = None,
    cookie_writer_factory: Optional[CookieWriterFactory] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators not passed in are built from ``settings``.
    """
    if settings is None:
        settings = AppSettings()
    configure_logging(settings.log_level)

    if store is None:
        store = create_state_store(settings)
    if resumer is None:
        resumer = ReturnToResumer(store, settings.completion_stage)
    if registry is None:
        registry = build_registry(settings, store, resumer)

    app = FastAPI(
        title="profileauth profile selection",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.registry = registry
    app.state.resolver = SelectionResolver(store, registry)
    app.state.renderer = renderer or JsonRenderer()
    app.state.cookie_writer_factory = cookie_writer_factory or ResponseCookieWriter

    install_error_handlers(app)
    app.include_router(health.router)
    app.include_router(login.router)
    app.include_router(admin.router, prefix="/admin")
    return app
