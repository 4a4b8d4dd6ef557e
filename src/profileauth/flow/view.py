"""Assemble the data bag handed to the rendering boundary."""

from __future__ import annotations

from typing import Optional

from profileauth.core.error_codes import get_all_error_codes
from profileauth.core.protocols import ISelectionSource
from profileauth.core.urls import login_url
from profileauth.models import SelectionOutcome, SelectionView


def build_view(
    source: ISelectionSource,
    outcome: SelectionOutcome,
    base_url: str,
    error_codes: Optional[dict[str, dict[str, str]]] = None,
) -> SelectionView:
    error = outcome.error
    return SelectionView(
        candidates=source.candidates,
        form_url=login_url(base_url, outcome.token),
        auth_state=outcome.token,
        error_code=error.code if error else None,
        error_params=dict(error.params) if error else None,
        error_codes=error_codes if error_codes is not None else get_all_error_codes(),
        sp_metadata=outcome.state.sp_metadata,
    )
