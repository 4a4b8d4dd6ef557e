"""Map the profileauth exception hierarchy onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from profileauth.core.exceptions import (
    BadRequestError,
    ProfileAuthError,
    StageMismatchError,
    StateNotFoundError,
)

logger = logging.getLogger(__name__)

_STATUS: list[tuple[type[ProfileAuthError], int]] = [
    (StageMismatchError, 409),
    (StateNotFoundError, 404),
    (BadRequestError, 400),
]


def status_for(exc: ProfileAuthError) -> int:
    for exc_type, status in _STATUS:
        if isinstance(exc, exc_type):
            return status
    return 500


async def profileauth_error_handler(request: Request, exc: ProfileAuthError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("Unrecoverable error on %s: %s", request.url.path, exc)
        detail = "Internal error"
    else:
        detail = str(exc)
    return JSONResponse(status_code=status, content={"error": exc.code, "detail": detail})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProfileAuthError, profileauth_error_handler)  # type: ignore[arg-type]
