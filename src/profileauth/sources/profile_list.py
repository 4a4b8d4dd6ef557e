"""Selection source backed by a fixed list of profiles."""

from __future__ import annotations

import logging
from typing import Iterable

from profileauth.core.exceptions import BadRequestError, SelectionRejected, StateNotFoundError
from profileauth.core.logging import short_token
from profileauth.core.protocols import IFlowResumer, IStateStore
from profileauth.core.urls import login_url
from profileauth.models import Candidate, CommitErr, CommitOk, CommitResult, SuspendedState

logger = logging.getLogger(__name__)


class ProfileListSource:
    """ISelectionSource that lets the user click one of a list of profiles.

    ``authenticate`` suspends an incoming flow and returns the selection page
    URL; ``attempt_commit`` validates a choice and hands the completed state
    to the parent flow through the injected resumer.
    """

    STAGE = "profileauth:ProfileList"

    def __init__(
        self,
        source_id: str,
        candidates: Iterable[Candidate],
        *,
        store: IStateStore,
        resumer: IFlowResumer,
        base_url: str = "http://localhost:8000",
    ) -> None:
        self._source_id = source_id
        self._candidates = list(candidates)
        self._by_id = {c.id: c for c in self._candidates}
        self._store = store
        self._resumer = resumer
        self._base_url = base_url

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def stage(self) -> str:
        return self.STAGE

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    def authenticate(self, state: SuspendedState) -> str:
        """Suspend ``state`` at this source's stage; return the selection page URL."""
        if self._resumer.requires_return_to and not state.return_to:
            raise BadRequestError("Flow cannot be suspended without a return location")
        owned = state.model_copy(update={"source_id": self._source_id})
        token = self._store.save(owned, self.stage)
        logger.info("Suspended flow for source %s as %s", self._source_id, short_token(token))
        return login_url(self._base_url, token)

    def select(self, candidate_id: str) -> Candidate:
        candidate = self._by_id.get(candidate_id)
        if candidate is None:
            raise SelectionRejected("NOTFOUND", {"id": candidate_id})
        if not candidate.enabled:
            raise SelectionRejected("NOACCESS", {"id": candidate_id})
        return candidate

    def attempt_commit(self, token: str, candidate_id: str) -> CommitResult:
        state = self._store.load(token, self.stage)
        if state is None:
            raise StateNotFoundError(f"State {short_token(token)} expired before commit")

        try:
            candidate = self.select(candidate_id)
        except SelectionRejected as exc:
            logger.info("Source %s rejected profile %r: %s", self._source_id, candidate_id, exc.code)
            return CommitErr(code=exc.code, params=exc.params)

        completed = state.with_selection(candidate.id, candidate.attributes)
        location = self._resumer.resume(completed)
        return CommitOk(location=location, state=completed)
