"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..app_state import GatewayState
from ..deps import get_state

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health_check(state: GatewayState = Depends(get_state)) -> dict:
    """Report gateway liveness with store and subscriber counts."""
    return {
        "status": "ok",
        "version": "0.1.0",
        "recognitions": len(state.store),
        "subscribers": state.hub.subscriber_count,
    }
