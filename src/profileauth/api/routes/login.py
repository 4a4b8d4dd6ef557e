"""Profile selection page: resume the suspended flow and commit a choice."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from profileauth.api.dependencies import (
    get_cookie_writer_factory,
    get_renderer,
    get_resolver,
    get_settings,
)
from profileauth.api.rendering import CookieWriterFactory
from profileauth.core.config import AppSettings
from profileauth.core.protocols import ICookieWriter, IRenderer
from profileauth.flow import SelectionResolver, build_view

router = APIRouter(tags=["profileauth"])


@router.get("/profileauth/login", response_model=None)
def login(
    request: Request,
    auth_state: Optional[str] = Query(None, alias="AuthState"),
    candidate_id: Optional[str] = Query(None, alias="id"),
    settings: AppSettings = Depends(get_settings),
    resolver: SelectionResolver = Depends(get_resolver),
    renderer: IRenderer = Depends(get_renderer),
    cookie_writer_factory: CookieWriterFactory = Depends(get_cookie_writer_factory),
) -> Any:
    """Show the profile list, or redirect back to the parent flow once a profile is committed."""
    cookie_cfg = settings.cookie
    cookie_id = request.cookies.get(cookie_cfg.name) if cookie_cfg.remember_enabled else None

    outcome, source = resolver.resolve(auth_state, candidate_id, cookie_id)

    if outcome.completed:
        response = RedirectResponse(outcome.location or "/", status_code=303)
        if cookie_cfg.remember_enabled:
            writer: ICookieWriter = cookie_writer_factory(response, cookie_cfg)
            writer.set_cookie(cookie_cfg.name, outcome.candidate_id, cookie_cfg.max_age)
        return response

    body = renderer.render(build_view(source, outcome, settings.base_url))
    if isinstance(body, Response):
        return body
    return JSONResponse(content=body)
