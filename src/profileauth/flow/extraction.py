"""Candidate id extraction with request > stored > cookie precedence."""

from __future__ import annotations

from typing import Optional

from profileauth.models import SuspendedState


def extract_candidate_id(
    request_id: Optional[str],
    state: SuspendedState,
    cookie_id: Optional[str] = None,
) -> str:
    """Return the id to commit, or ``""`` when nothing has been chosen yet.

    A request parameter that is present wins even when it trims to empty.
    """
    if request_id is not None:
        return request_id.strip()
    if state.remembered_id is not None:
        return str(state.remembered_id)
    if cookie_id is not None:
        return cookie_id.strip()
    return ""
