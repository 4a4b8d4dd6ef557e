"""Selection sources, their registry and parent-flow resumers."""

from __future__ import annotations

from profileauth.sources.profile_list import ProfileListSource
from profileauth.sources.registry import SourceRegistry, build_registry
from profileauth.sources.resumers import CallbackResumer, RecordingResumer, ReturnToResumer

__all__ = [
    "CallbackResumer",
    "ProfileListSource",
    "RecordingResumer",
    "ReturnToResumer",
    "SourceRegistry",
    "build_registry",
]
