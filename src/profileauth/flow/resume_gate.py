"""Validate an AuthState token and load its suspended state."""

from __future__ import annotations

import logging
from typing import Optional

from profileauth.core.exceptions import BadRequestError, InvalidTokenError, StateNotFoundError
from profileauth.core.logging import short_token
from profileauth.core.protocols import IStateStore
from profileauth.models import SuspendedState

logger = logging.getLogger(__name__)


def resume_state(store: IStateStore, token: Optional[str], stage: str) -> SuspendedState:
    """Return the state suspended under ``token`` at ``stage``. Read-only.

    Raises:
        BadRequestError: no token supplied.
        InvalidTokenError: token is malformed or tampered with.
        StateNotFoundError: nothing stored under the token (expired or unknown).
        StageMismatchError: the state was suspended at a different stage.
    """
    if token is None or not token.strip():
        raise BadRequestError("Missing AuthState parameter.")

    if not store.validate(token):
        logger.warning("Rejected malformed AuthState %s", short_token(token))
        raise InvalidTokenError("Invalid AuthState parameter.")

    state = store.load(token, stage)
    if state is None:
        raise StateNotFoundError(f"No suspended state for AuthState {short_token(token)}")
    return state
