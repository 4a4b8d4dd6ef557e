"""Selectable identity (profile) model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """A profile the user may pick. Owned by its selection source."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str = ""
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    enabled: bool = True
