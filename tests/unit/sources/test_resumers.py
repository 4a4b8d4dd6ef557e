"""Tests for parent-flow resumers."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from profileauth.core.exceptions import BadRequestError
from profileauth.models import SuspendedState
from profileauth.sources import CallbackResumer, ReturnToResumer

DONE = "profileauth:completed"


def test_callback_resumer_delegates():
    seen = []
    resumer = CallbackResumer(lambda state: seen.append(state) or "/next")
    state = SuspendedState(source_id="src1")
    assert resumer.resume(state) == "/next"
    assert seen == [state]


class TestReturnToResumer:
    def test_persists_completed_state_and_redirects(self, store):
        resumer = ReturnToResumer(store, DONE)
        state = SuspendedState(source_id="src1", return_to="https://idp/resume?x=1").with_selection(
            "2", {"uid": ["alice"]}
        )
        location = resumer.resume(state)
        query = parse_qs(urlsplit(location).query)
        assert query["x"] == ["1"]
        handed_off = store.load(query["AuthState"][0], DONE)
        assert handed_off.selected_id == "2"
        assert handed_off.attributes == {"uid": ["alice"]}

    def test_missing_return_to(self, store):
        with pytest.raises(BadRequestError):
            ReturnToResumer(store, DONE).resume(SuspendedState(source_id="src1"))
