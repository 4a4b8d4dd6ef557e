"""Shared test doubles: memory store, recording resumer, stub selection source."""

from __future__ import annotations

from typing import Any, Optional

from profileauth.models import Candidate, CommitErr, CommitOk, CommitResult
from profileauth.persistence.memory_backend import MemoryStateStore
from profileauth.sources.profile_list import ProfileListSource
from profileauth.sources.resumers import RecordingResumer


class StubSource:
    """ISelectionSource that accepts everything unless told which ids to reject."""

    def __init__(
        self,
        source_id: str = "src1",
        candidates: Optional[list[Candidate]] = None,
        reject: Optional[dict[str, dict[str, Any]]] = None,
        stage: str = ProfileListSource.STAGE,
        location: str = "/resumed",
    ) -> None:
        self._source_id = source_id
        self._candidates = candidates or []
        self._reject = reject or {}
        self._stage = stage
        self._location = location
        self.commits: list[tuple[str, str]] = []

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def stage(self) -> str:
        return self._stage

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    def attempt_commit(self, token: str, candidate_id: str) -> CommitResult:
        self.commits.append((token, candidate_id))
        if candidate_id in self._reject:
            return CommitErr(**self._reject[candidate_id])
        return CommitOk(location=self._location)


__all__ = ["MemoryStateStore", "RecordingResumer", "StubSource"]
