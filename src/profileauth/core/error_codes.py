"""Catalog of error codes the selection page knows how to display."""

from __future__ import annotations

ERROR_CODES: dict[str, dict[str, str]] = {
    "BADREQUEST": {
        "title": "Bad request received",
        "description": "There is an error in the request to this page.",
    },
    "NOSTATE": {
        "title": "State information lost",
        "description": "State information lost, and no way to restart the request.",
    },
    "STAGEMISMATCH": {
        "title": "Wrong step of the login flow",
        "description": "The login request was resumed at a step it was not suspended at.",
    },
    "NOTFOUND": {
        "title": "Profile not found",
        "description": "The selected profile does not exist. Choose one from the list.",
    },
    "NOACCESS": {
        "title": "No access",
        "description": "You are not allowed to log in with the selected profile.",
    },
    "UNHANDLEDEXCEPTION": {
        "title": "Unhandled exception",
        "description": "An unhandled exception was thrown.",
    },
}


def get_all_error_codes() -> dict[str, dict[str, str]]:
    """Return a copy of the full error code catalog."""
    return {code: dict(messages) for code, messages in ERROR_CODES.items()}
