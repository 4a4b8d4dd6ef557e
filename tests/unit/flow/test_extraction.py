"""Tests for candidate id precedence."""

from __future__ import annotations

from profileauth.flow import extract_candidate_id
from profileauth.models import SuspendedState


def _state(remembered=None):
    return SuspendedState(source_id="src1", remembered_id=remembered)


def test_request_id_beats_stored_id():
    assert extract_candidate_id("7", _state("3")) == "7"


def test_stored_id_when_request_has_none():
    assert extract_candidate_id(None, _state("3")) == "3"


def test_empty_when_neither():
    assert extract_candidate_id(None, _state()) == ""


def test_request_value_is_trimmed():
    assert extract_candidate_id("  7\n", _state()) == "7"


def test_present_but_blank_request_id_means_no_selection():
    assert extract_candidate_id("  ", _state("3")) == ""


def test_stored_int_is_coerced_to_string():
    assert extract_candidate_id(None, _state(3)) == "3"


def test_cookie_is_last_fallback():
    assert extract_candidate_id(None, _state(), cookie_id="5") == "5"
    assert extract_candidate_id(None, _state("3"), cookie_id="5") == "3"
    assert extract_candidate_id("7", _state("3"), cookie_id="5") == "7"
