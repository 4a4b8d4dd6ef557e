"""Commit results, interaction outcomes and the view handed to the renderer."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from profileauth.models.identity import Candidate
from profileauth.models.state import SelectionErrorInfo, SuspendedState


class InteractionPhase(StrEnum):
    RESUMED = "RESUMED"
    COMMITTING = "COMMITTING"
    SKIPPING = "SKIPPING"
    COMPLETED = "COMPLETED"
    RESUSPENDED = "RESUSPENDED"


class CommitOk(BaseModel):
    """The source accepted the selection and handed the flow back to its parent."""

    model_config = ConfigDict(frozen=True)

    location: str = ""
    state: Optional[SuspendedState] = None


class CommitErr(BaseModel):
    """The source rejected the selection."""

    model_config = ConfigDict(frozen=True)

    code: str
    params: dict[str, Any] = Field(default_factory=dict)


CommitResult = Union[CommitOk, CommitErr]


class SelectionOutcome(BaseModel):
    """Terminal result of one resume/commit/re-suspend interaction."""

    model_config = ConfigDict(frozen=True)

    phase: InteractionPhase
    token: str
    previous_token: str
    state: SuspendedState
    candidate_id: str = ""
    error: Optional[SelectionErrorInfo] = None
    location: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.phase == InteractionPhase.COMPLETED

    @property
    def minted_new_token(self) -> bool:
        return self.token != self.previous_token


class SelectionView(BaseModel):
    """Data bag consumed by the rendering boundary."""

    candidates: list[Candidate]
    form_url: str
    auth_state: str
    error_code: Optional[str] = None
    error_params: Optional[dict[str, Any]] = None
    error_codes: dict[str, dict[str, str]] = Field(default_factory=dict)
    sp_metadata: Optional[dict[str, Any]] = None
