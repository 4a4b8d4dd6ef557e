"""SelectionResolver: one resume -> commit -> complete/re-suspend interaction.

Each step takes a value and returns a new one. A failed commit never touches
the entry it was loaded from: the errored state is saved under a freshly
minted token, which replaces the old one for rendering and resubmission.
"""

from __future__ import annotations

import logging
from typing import Optional

from profileauth.core.exceptions import SourceNotFoundError, SourceStageError
from profileauth.core.logging import short_token
from profileauth.core.protocols import ISelectionSource, ISourceRegistry, IStateStore
from profileauth.flow.extraction import extract_candidate_id
from profileauth.flow.resume_gate import resume_state
from profileauth.models import (
    CommitErr,
    CommitOk,
    InteractionPhase,
    SelectionOutcome,
    SuspendedState,
)
from profileauth.sources.profile_list import ProfileListSource

logger = logging.getLogger(__name__)


class SelectionResolver:
    """Drives the selection step for states suspended at ``stage``."""

    def __init__(
        self,
        store: IStateStore,
        registry: ISourceRegistry,
        stage: str = ProfileListSource.STAGE,
    ) -> None:
        self._store = store
        self._registry = registry
        self._stage = stage

    @property
    def stage(self) -> str:
        return self._stage

    def lookup_source(self, source_id: str) -> ISelectionSource:
        source = self._registry.get_by_id(source_id)
        if source is None:
            logger.error("Suspended state references unknown source %r", source_id)
            raise SourceNotFoundError(source_id)
        if source.stage != self._stage:
            logger.error("Source %r suspends at %r, not %r", source_id, source.stage, self._stage)
            raise SourceStageError(source_id, expected=self._stage, actual=source.stage)
        return source

    def resume(self, token: Optional[str]) -> tuple[SuspendedState, ISelectionSource]:
        """Load the state behind ``token`` and the source that owns it."""
        state = resume_state(self._store, token, self._stage)
        return state, self.lookup_source(state.source_id)

    def resolve(
        self,
        token: Optional[str],
        request_id: Optional[str] = None,
        cookie_id: Optional[str] = None,
    ) -> tuple[SelectionOutcome, ISelectionSource]:
        state, source = self.resume(token)
        current = state.token or ""
        if cookie_id is not None and not _offers(source, cookie_id.strip()):
            # stale remembered choice: show the list instead of an error
            cookie_id = None
        candidate_id = extract_candidate_id(request_id, state, cookie_id)

        if not candidate_id:
            logger.debug("%s: %s, no profile chosen", short_token(current), InteractionPhase.SKIPPING)
            return _skip(state, current), source

        logger.debug("%s: %s profile %r", short_token(current), InteractionPhase.COMMITTING, candidate_id)
        result = source.attempt_commit(current, candidate_id)
        if isinstance(result, CommitOk):
            return _complete(state, current, candidate_id, result), source
        return _resuspend(self._store, state, current, source, candidate_id, result), source


def _offers(source: ISelectionSource, candidate_id: str) -> bool:
    return any(c.id == candidate_id and c.enabled for c in source.candidates)


def _skip(state: SuspendedState, token: str) -> SelectionOutcome:
    return SelectionOutcome(
        phase=InteractionPhase.RESUSPENDED,
        token=token,
        previous_token=token,
        state=state,
        error=state.error,
    )


def _complete(state: SuspendedState, token: str, candidate_id: str, result: CommitOk) -> SelectionOutcome:
    completed = (result.state or state).without_error()
    logger.info("Profile %r selected for %s", candidate_id, short_token(token))
    return SelectionOutcome(
        phase=InteractionPhase.COMPLETED,
        token=token,
        previous_token=token,
        state=completed,
        candidate_id=candidate_id,
        error=None,
        location=result.location,
    )


def _resuspend(
    store: IStateStore,
    state: SuspendedState,
    token: str,
    source: ISelectionSource,
    candidate_id: str,
    result: CommitErr,
) -> SelectionOutcome:
    errored = state.with_error(result.code, result.params)
    new_token = store.save(errored, source.stage)
    logger.info(
        "Profile %r rejected with %s; re-suspended %s as %s",
        candidate_id, result.code, short_token(token), short_token(new_token),
    )
    return SelectionOutcome(
        phase=InteractionPhase.RESUSPENDED,
        token=new_token,
        previous_token=token,
        state=errored.with_token(new_token, source.stage),
        candidate_id=candidate_id,
        error=errored.error,
    )
