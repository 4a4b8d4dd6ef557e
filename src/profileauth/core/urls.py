"""URL helpers for form targets and redirects."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

LOGIN_PATH = "/profileauth/login"


def append_query(url: str, params: dict[str, str]) -> str:
    """Add or replace query parameters on ``url``."""
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.update(params)
    return urlunsplit(parts._replace(query=urlencode(query)))


def login_url(base_url: str, token: str) -> str:
    """Selection page URL bound to ``token``."""
    return append_query(base_url.rstrip("/") + LOGIN_PATH, {"AuthState": token})
