"""Recognition query and creation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_service
from ..errors import InvalidVisibility, UnknownCaller
from ..models.recognition import RecognitionSubmission
from ..services.recognition_service import RecognitionService

router = APIRouter(prefix="/api/recognitions", tags=["recognitions"])


@router.get("")
async def list_recognitions(
    user_id: str = Query(..., alias="userId"),
    service: RecognitionService = Depends(get_service),
) -> dict:
    """List all recognitions visible to a given user."""
    try:
        records = service.list_visible(user_id)
    except UnknownCaller as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"recognitions": [r.model_dump(mode="json") for r in service.expand(records)]}


@router.get("/mine")
async def my_recognitions(
    user_id: str = Query(..., alias="userId"),
    service: RecognitionService = Depends(get_service),
) -> dict:
    """List only the recognitions received by this user."""
    try:
        records = service.list_mine(user_id)
    except UnknownCaller as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"recognitions": [r.model_dump(mode="json") for r in service.expand(records)]}


@router.post("")
async def send_recognition(
    body: RecognitionSubmission,
    service: RecognitionService = Depends(get_service),
) -> dict:
    """Send a new recognition from one user to another."""
    try:
        record = service.create(
            sender_id=body.senderId,
            recipient_id=body.recipientId,
            message=body.message,
            emoji=body.emoji,
            visibility=body.visibility,
        )
    except UnknownCaller as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidVisibility as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"recognition": service.expand([record])[0].model_dump(mode="json")}
