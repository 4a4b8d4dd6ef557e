"""Protocol interfaces for all profileauth collaborators.

Every seam of the selection step is a Protocol: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from profileauth.models import (
        Candidate,
        CommitResult,
        SelectionView,
        SuspendedState,
    )


# ---------------------------------------------------------------------------
# Persistence: State Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IStateStore(Protocol):
    """Keyed storage for suspended-flow state, addressed by token + stage."""

    def validate(self, token: str) -> bool: ...

    def load(self, token: str, stage: str) -> Optional[SuspendedState]: ...

    def save(self, state: SuspendedState, stage: str) -> str: ...

    def delete(self, token: str) -> None: ...

    def ping(self) -> bool: ...


# ---------------------------------------------------------------------------
# Selection Source
# ---------------------------------------------------------------------------

@runtime_checkable
class ISelectionSource(Protocol):
    """Owner of a candidate list and the authority to accept a selection."""

    @property
    def source_id(self) -> str: ...

    @property
    def stage(self) -> str: ...

    @property
    def candidates(self) -> list[Candidate]: ...

    def attempt_commit(self, token: str, candidate_id: str) -> CommitResult: ...


@runtime_checkable
class ISourceRegistry(Protocol):
    """Lookup of selection sources by id. Absence is ``None``."""

    def get_by_id(self, source_id: str) -> Optional[ISelectionSource]: ...

    def __iter__(self) -> Iterator[ISelectionSource]: ...


@runtime_checkable
class ISuspendableSource(ISelectionSource, Protocol):
    """Selection source that can suspend an incoming flow at its own stage."""

    def authenticate(self, state: SuspendedState) -> str: ...


# ---------------------------------------------------------------------------
# Parent flow handoff
# ---------------------------------------------------------------------------

@runtime_checkable
class IFlowResumer(Protocol):
    """Hands a completed state back to the parent identity-provider flow.

    Returns the location the user agent should be sent to next.
    """

    requires_return_to: bool

    def resume(self, state: SuspendedState) -> str: ...


# ---------------------------------------------------------------------------
# Rendering boundary
# ---------------------------------------------------------------------------

@runtime_checkable
class IRenderer(Protocol):
    """Turns the selection view data bag into a response body."""

    def render(self, view: SelectionView) -> Any: ...


@runtime_checkable
class ICookieWriter(Protocol):
    """Writes cookies on the outgoing response."""

    def set_cookie(self, name: str, value: str, max_age: int) -> None: ...
