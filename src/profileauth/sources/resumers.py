"""IFlowResumer implementations handing completed state back to the parent flow."""

from __future__ import annotations

import logging
from typing import Callable

from profileauth.core.exceptions import BadRequestError
from profileauth.core.logging import short_token
from profileauth.core.protocols import IStateStore
from profileauth.core.urls import append_query
from profileauth.models import SuspendedState

logger = logging.getLogger(__name__)


class CallbackResumer:
    """Resume by calling an in-process hook of the parent engine."""

    requires_return_to = False

    def __init__(self, callback: Callable[[SuspendedState], str]) -> None:
        self._callback = callback

    def resume(self, state: SuspendedState) -> str:
        return self._callback(state)


class RecordingResumer:
    """Collects completed states; returns a fixed location."""

    requires_return_to = False

    def __init__(self, location: str = "/resumed") -> None:
        self.location = location
        self.completed: list[SuspendedState] = []

    def resume(self, state: SuspendedState) -> str:
        self.completed.append(state)
        return self.location


class ReturnToResumer:
    """Persist the completed state for the parent flow and redirect to ``return_to``."""

    requires_return_to = True

    def __init__(self, store: IStateStore, stage: str) -> None:
        self._store = store
        self._stage = stage

    def resume(self, state: SuspendedState) -> str:
        if not state.return_to:
            raise BadRequestError("Suspended state has no return location")
        token = self._store.save(state, self._stage)
        logger.info(
            "Handed profile %r to parent flow as %s", state.selected_id, short_token(token)
        )
        return append_query(state.return_to, {"AuthState": token})
