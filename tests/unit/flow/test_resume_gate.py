"""Tests for AuthState validation and state loading."""

from __future__ import annotations

import pytest

from profileauth.core.exceptions import (
    BadRequestError,
    InvalidTokenError,
    StageMismatchError,
    StateNotFoundError,
)
from profileauth.flow import resume_state
from profileauth.sources import ProfileListSource

STAGE = ProfileListSource.STAGE


class TestMissingToken:
    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_bad_request(self, store, token):
        with pytest.raises(BadRequestError, match="Missing AuthState"):
            resume_state(store, token, STAGE)


class TestInvalidToken:
    @pytest.mark.parametrize("token", ["garbage", "_" + "z" * 40, "_" + "0" * 12])
    def test_malformed_token_is_rejected_without_write(self, store, token):
        with pytest.raises(InvalidTokenError):
            resume_state(store, token, STAGE)
        assert store.writes == 0

    def test_invalid_token_is_a_bad_request(self):
        assert issubclass(InvalidTokenError, BadRequestError)


class TestLookup:
    def test_returns_stored_state(self, store, suspend):
        token = suspend(sp_metadata={"entityid": "https://sp.example.org"})
        state = resume_state(store, token, STAGE)
        assert state.source_id == "src1"
        assert state.token == token
        assert state.sp_metadata == {"entityid": "https://sp.example.org"}

    def test_unknown_token(self, store):
        with pytest.raises(StateNotFoundError):
            resume_state(store, "_" + "0" * 40, STAGE)

    @pytest.mark.parametrize("saved_at, expected", [("A", "B"), ("B", "A"), ("other", STAGE)])
    def test_stage_isolation(self, store, suspend, saved_at, expected):
        token = suspend(stage=saved_at)
        with pytest.raises(StageMismatchError):
            resume_state(store, token, expected)

    def test_resume_is_read_only(self, store, suspend):
        token = suspend()
        writes = store.writes
        resume_state(store, token, STAGE)
        resume_state(store, token, STAGE)
        assert store.writes == writes
