"""Redis state store implementing IStateStore."""

from __future__ import annotations

import json
import logging

import redis

from profileauth.core.exceptions import StageMismatchError, StateStoreError
from profileauth.core.logging import short_token
from profileauth.models import SuspendedState
from profileauth.persistence.tokens import is_valid_token, mint_token

logger = logging.getLogger(__name__)


class RedisStateStore:
    """Production IStateStore backed by Redis, one key per token with a TTL."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 ttl: int = 3600, key_prefix: str = "profileauth:state:") -> None:
        self._host = host
        self._port = port
        self._db = db
        self._ttl = ttl
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, token: str) -> str:
        return f"{self._key_prefix}{token}"

    def validate(self, token: str) -> bool:
        return is_valid_token(token)

    def load(self, token: str, stage: str) -> SuspendedState | None:
        try:
            raw = self._client.get(self._key(token))
        except Exception as exc:
            raise StateStoreError(f"Redis GET failed for state {short_token(token)}: {exc}") from exc
        if raw is None:
            return None
        entry = json.loads(raw)
        if entry["stage"] != stage:
            raise StageMismatchError(token, expected=stage, actual=entry["stage"])
        return SuspendedState.from_record(entry["state"], token=token, stage=entry["stage"])

    def save(self, state: SuspendedState, stage: str) -> str:
        token = mint_token()
        entry = json.dumps({"stage": stage, "state": state.to_record()})
        try:
            # nx: a freshly minted token must never overwrite an existing entry
            stored = self._client.set(self._key(token), entry, ex=self._ttl, nx=True)
        except Exception as exc:
            raise StateStoreError(f"Redis SET failed for state {short_token(token)}: {exc}") from exc
        if not stored:
            raise StateStoreError(f"Token collision for state {short_token(token)}")
        logger.debug("Saved state %s at stage %s", short_token(token), stage)
        return token

    def delete(self, token: str) -> None:
        try:
            self._client.delete(self._key(token))
        except Exception as exc:
            raise StateStoreError(f"Redis DELETE failed for state {short_token(token)}: {exc}") from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except Exception:
            logger.warning("Redis ping failed for %s:%s/%s", self._host, self._port, self._db)
            return False
