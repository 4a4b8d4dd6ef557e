"""Default rendering boundary: JSON view bag and response cookie writer."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import Response

from profileauth.core.config import CookieConfig
from profileauth.core.protocols import ICookieWriter
from profileauth.models import SelectionView


CookieWriterFactory = Callable[[Response, CookieConfig], ICookieWriter]


class JsonRenderer:
    """IRenderer returning the view as a JSON-ready dict."""

    def render(self, view: SelectionView) -> dict[str, Any]:
        return view.model_dump(mode="json")


class ResponseCookieWriter:
    """ICookieWriter setting cookies on a FastAPI/Starlette response."""

    def __init__(self, response: Response, config: CookieConfig) -> None:
        self._response = response
        self._config = config

    def set_cookie(self, name: str, value: str, max_age: int) -> None:
        self._response.set_cookie(
            key=name,
            value=value,
            max_age=max_age,
            path="/",
            secure=self._config.secure,
            httponly=True,
            samesite=self._config.samesite,
        )
