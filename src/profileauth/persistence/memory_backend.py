"""In-memory state store for unit tests and single-process development."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable

from profileauth.core.exceptions import StageMismatchError
from profileauth.core.logging import short_token
from profileauth.models import SuspendedState
from profileauth.persistence.tokens import is_valid_token, mint_token

logger = logging.getLogger(__name__)


class MemoryStateStore:
    """Dict-backed IStateStore. Entries expire after ``ttl`` seconds."""

    def __init__(self, ttl: int = 3600, clock: Callable[[], float] = time.time) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, str, str]] = {}
        self.writes = 0

    def validate(self, token: str) -> bool:
        return is_valid_token(token)

    def load(self, token: str, stage: str) -> SuspendedState | None:
        entry = self._entries.get(token)
        if entry is None:
            return None
        expires_at, stored_stage, payload = entry
        if expires_at <= self._clock():
            del self._entries[token]
            return None
        if stored_stage != stage:
            raise StageMismatchError(token, expected=stage, actual=stored_stage)
        record: dict[str, Any] = json.loads(payload)
        return SuspendedState.from_record(record, token=token, stage=stored_stage)

    def save(self, state: SuspendedState, stage: str) -> str:
        token = mint_token()
        payload = json.dumps(state.to_record())
        self._entries[token] = (self._clock() + self._ttl, stage, payload)
        self.writes += 1
        logger.debug("Saved state %s at stage %s", short_token(token), stage)
        return token

    def delete(self, token: str) -> None:
        self._entries.pop(token, None)

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._entries)
