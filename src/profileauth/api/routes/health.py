"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from profileauth.api.dependencies import get_store
from profileauth.core.protocols import IStateStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(store: IStateStore = Depends(get_store)) -> dict[str, str]:
    if not store.ping():
        raise HTTPException(status_code=503, detail="State store unavailable")
    return {"status": "ready"}
