"""Directory listing endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_service
from ..services.recognition_service import RecognitionService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(service: RecognitionService = Depends(get_service)) -> dict:
    """List every caller in the directory."""
    return {"users": [c.model_dump(mode="json") for c in service.list_callers()]}
