"""FastAPI dependency injection for shared resources held on app.state."""

from __future__ import annotations

from fastapi import Request

from profileauth.api.rendering import CookieWriterFactory
from profileauth.core.config import AppSettings
from profileauth.core.protocols import IRenderer, ISourceRegistry, IStateStore
from profileauth.flow import SelectionResolver


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_store(request: Request) -> IStateStore:
    return request.app.state.store


def get_registry(request: Request) -> ISourceRegistry:
    return request.app.state.registry


def get_resolver(request: Request) -> SelectionResolver:
    return request.app.state.resolver


def get_renderer(request: Request) -> IRenderer:
    return request.app.state.renderer


def get_cookie_writer_factory(request: Request) -> CookieWriterFactory:
    return request.app.state.cookie_writer_factory
