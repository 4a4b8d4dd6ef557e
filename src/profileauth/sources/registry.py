"""Typed registry mapping source ids to selection sources."""

from __future__ import annotations

from typing import Iterator, Optional

from profileauth.core.config import AppSettings
from profileauth.core.protocols import IFlowResumer, ISelectionSource, IStateStore
from profileauth.models import Candidate
from profileauth.sources.profile_list import ProfileListSource


class SourceRegistry:
    """ISourceRegistry over an explicit id -> source mapping."""

    def __init__(self, sources: Optional[list[ISelectionSource]] = None) -> None:
        self._sources: dict[str, ISelectionSource] = {}
        for source in sources or []:
            self.register(source)

    def register(self, source: ISelectionSource) -> None:
        if source.source_id in self._sources:
            raise ValueError(f"Selection source {source.source_id!r} is already registered")
        self._sources[source.source_id] = source

    def get_by_id(self, source_id: str) -> Optional[ISelectionSource]:
        return self._sources.get(source_id)

    def __iter__(self) -> Iterator[ISelectionSource]:
        return iter(self._sources.values())

    def __len__(self) -> int:
        return len(self._sources)


def build_registry(settings: AppSettings, store: IStateStore, resumer: IFlowResumer) -> SourceRegistry:
    """Create a ProfileListSource for every source declared in settings."""
    registry = SourceRegistry()
    for cfg in settings.sources:
        candidates = [Candidate.model_validate(c.model_dump()) for c in cfg.candidates]
        registry.register(
            ProfileListSource(
                cfg.id,
                candidates,
                store=store,
                resumer=resumer,
                base_url=settings.base_url,
            )
        )
    return registry
