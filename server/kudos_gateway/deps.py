"""FastAPI dependencies for gateway state resolution."""

from __future__ import annotations

from fastapi import Request

from .app_state import GatewayState
from .services.recognition_service import RecognitionService


def get_state(request: Request) -> GatewayState:
    return request.app.state.gateway


def get_service(request: Request) -> RecognitionService:
    """Resolve the recognition service owned by this app."""
    return get_state(request).service
