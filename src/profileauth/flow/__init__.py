"""Resume/commit/re-suspend pipeline for the profile selection step."""

from __future__ import annotations

from profileauth.flow.extraction import extract_candidate_id
from profileauth.flow.resolver import SelectionResolver
from profileauth.flow.resume_gate import resume_state
from profileauth.flow.view import build_view

__all__ = ["SelectionResolver", "build_view", "extract_candidate_id", "resume_state"]
