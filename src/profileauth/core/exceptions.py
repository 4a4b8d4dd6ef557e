"""profileauth exception hierarchy."""

from __future__ import annotations

from typing import Any


class ProfileAuthError(Exception):
    """Base exception for all profileauth errors."""

    code = "UNHANDLEDEXCEPTION"


class BadRequestError(ProfileAuthError):
    """The caller sent a request this step cannot act on."""

    code = "BADREQUEST"


class InvalidTokenError(BadRequestError):
    """AuthState token failed the format/integrity check."""

    code = "NOSTATE"


class StateNotFoundError(ProfileAuthError):
    """No suspended state is stored under the given token."""

    code = "NOSTATE"


class StageMismatchError(StateNotFoundError):
    """The stored state was suspended at a different stage of the flow."""

    code = "STAGEMISMATCH"

    def __init__(self, token: str, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"State {token[:8]}... was saved at stage {actual!r}, expected {expected!r}"
        )


class SourceNotFoundError(ProfileAuthError):
    """Suspended state references a selection source that is not registered."""

    def __init__(self, source_id: str) -> None:
        self.source_id = source_id
        super().__init__(f"Could not find selection source with id {source_id!r}")


class SourceStageError(SourceNotFoundError):
    """Registered source suspends at a stage this resolver does not resume."""

    def __init__(self, source_id: str, expected: str, actual: str) -> None:
        self.source_id = source_id
        self.expected = expected
        self.actual = actual
        ProfileAuthError.__init__(
            self, f"Selection source {source_id!r} uses stage {actual!r}, resolver expects {expected!r}"
        )


class SelectionRejected(ProfileAuthError):
    """A selection source refused to commit the chosen candidate."""

    def __init__(self, code: str, params: dict[str, Any] | None = None) -> None:
        self.code = code
        self.params = params or {}
        super().__init__(f"Selection rejected: {code}")


class StateStoreError(ProfileAuthError):
    """State store backend operation failed."""
