"""Suspended authentication state.

A ``SuspendedState`` is an immutable value. Every transformation returns a
new instance, so a state loaded from the store is never changed in place;
re-suspending always goes through ``IStateStore.save`` and yields a new token.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectionErrorInfo(BaseModel):
    """Error from a failed commit, kept with the state for redisplay."""

    model_config = ConfigDict(frozen=True)

    code: str
    params: dict[str, Any] = Field(default_factory=dict)


class SuspendedState(BaseModel):
    """An in-flight authentication request paused at the selection step."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    token: Optional[str] = None
    stage: str = ""
    error: Optional[SelectionErrorInfo] = None
    remembered_id: Optional[str | int] = None
    sp_metadata: Optional[dict[str, Any]] = None
    return_to: Optional[str] = None
    selected_id: Optional[str] = None
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    extra: dict[str, Any] = Field(default_factory=dict)

    def with_error(self, code: str, params: dict[str, Any] | None = None) -> SuspendedState:
        return self.model_copy(
            update={"error": SelectionErrorInfo(code=code, params=params or {})}
        )

    def without_error(self) -> SuspendedState:
        if self.error is None:
            return self
        return self.model_copy(update={"error": None})

    def with_selection(self, candidate_id: str, attributes: dict[str, list[str]]) -> SuspendedState:
        """Record the chosen candidate; any earlier error no longer applies."""
        return self.model_copy(
            update={
                "selected_id": candidate_id,
                "attributes": {k: list(v) for k, v in attributes.items()},
                "error": None,
            }
        )

    def with_token(self, token: str, stage: str) -> SuspendedState:
        return self.model_copy(update={"token": token, "stage": stage})

    def to_record(self) -> dict[str, Any]:
        """Serializable form for storage backends (token is the key, not a field)."""
        return self.model_dump(mode="json", exclude={"token", "stage"})

    @classmethod
    def from_record(cls, record: dict[str, Any], token: str, stage: str) -> SuspendedState:
        return cls.model_validate({**record, "token": token, "stage": stage})
