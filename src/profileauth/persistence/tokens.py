"""AuthState token minting and format validation."""

from __future__ import annotations

import re
import secrets

TOKEN_PREFIX = "_"
TOKEN_BYTES = 20

_TOKEN_RE = re.compile(r"_[0-9a-f]{40}")


def mint_token() -> str:
    """Return a fresh unguessable token."""
    return TOKEN_PREFIX + secrets.token_hex(TOKEN_BYTES)


def is_valid_token(token: object) -> bool:
    return isinstance(token, str) and _TOKEN_RE.fullmatch(token) is not None
