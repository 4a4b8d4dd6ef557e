"""Admin endpoints for suspending flows and inspecting selection sources."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import parse_qs, urlsplit

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from profileauth.api.dependencies import get_registry
from profileauth.core.protocols import ISourceRegistry, ISuspendableSource
from profileauth.models import SuspendedState

router = APIRouter(tags=["admin"])


class SuspendRequest(BaseModel):
    """Flow to suspend at a selection source, as the parent engine would."""

    source_id: str
    return_to: Optional[str] = None
    remembered_id: Optional[str] = None
    sp_metadata: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = Field(default_factory=dict)


@router.post("/states", status_code=201)
def suspend_state(
    body: SuspendRequest,
    registry: ISourceRegistry = Depends(get_registry),
) -> dict[str, str]:
    """Suspend a new flow and return its token and selection page URL."""
    source = registry.get_by_id(body.source_id)
    if source is None:
        raise HTTPException(status_code=404, detail=f"Unknown selection source {body.source_id!r}")
    if not isinstance(source, ISuspendableSource):
        raise HTTPException(status_code=400, detail=f"Source {body.source_id!r} cannot suspend flows")

    location = source.authenticate(SuspendedState(**body.model_dump()))
    token = parse_qs(urlsplit(location).query)["AuthState"][0]
    return {"token": token, "location": location}


@router.get("/sources")
def list_sources(registry: ISourceRegistry = Depends(get_registry)) -> dict[str, Any]:
    """Return registered selection sources and their candidate ids."""
    sources = [
        {
            "id": source.source_id,
            "stage": source.stage,
            "candidates": [c.id for c in source.candidates],
        }
        for source in registry
    ]
    return {"sources": sources}
