"""Pydantic models for suspended state, candidates and selection outcomes."""

from __future__ import annotations

from profileauth.models.identity import Candidate
from profileauth.models.selection import (
    CommitErr,
    CommitOk,
    CommitResult,
    InteractionPhase,
    SelectionOutcome,
    SelectionView,
)
from profileauth.models.state import SelectionErrorInfo, SuspendedState

__all__ = [
    "Candidate",
    "CommitErr",
    "CommitOk",
    "CommitResult",
    "InteractionPhase",
    "SelectionErrorInfo",
    "SelectionOutcome",
    "SelectionView",
    "SuspendedState",
]
