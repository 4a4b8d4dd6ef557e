"""Shared fixtures for profileauth tests."""

from __future__ import annotations

import pytest

from profileauth.models import Candidate, SuspendedState
from profileauth.sources import ProfileListSource, SourceRegistry
from tests.fakes import MemoryStateStore, RecordingResumer

STAGE = ProfileListSource.STAGE

CANDIDATES = [
    Candidate(id="1", display_name="Alice (student)", attributes={"eduPersonAffiliation": ["student"]}),
    Candidate(id="2", display_name="Alice (staff)", attributes={"eduPersonAffiliation": ["staff"]}),
    Candidate(id="3", display_name="Alice (alumni)", enabled=False),
]


@pytest.fixture
def store():
    return MemoryStateStore()


@pytest.fixture
def resumer():
    return RecordingResumer()


@pytest.fixture
def source(store, resumer):
    return ProfileListSource("src1", CANDIDATES, store=store, resumer=resumer, base_url="https://idp.example.org")


@pytest.fixture
def registry(source):
    return SourceRegistry([source])


@pytest.fixture
def suspend(store):
    """Save a state for ``src1`` at the selection stage and return its token."""

    def _suspend(**fields) -> str:
        stage = fields.pop("stage", STAGE)
        fields.setdefault("source_id", "src1")
        return store.save(SuspendedState(**fields), stage)

    return _suspend
