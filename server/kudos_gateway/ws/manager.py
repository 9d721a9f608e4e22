"""WebSocket connection manager relaying new recognitions to clients."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import WebSocket, WebSocketDisconnect
from fastapi.websockets import WebSocketState

from ..models.recognition import RecognitionView
from ..services.broadcast import Subscription
from ..services.recognition_service import RecognitionService

logger = logging.getLogger(__name__)

EVENT_NEW_RECOGNITION = "new_recognition"


def encode_event(view: RecognitionView) -> str:
    return json.dumps({"type": EVENT_NEW_RECOGNITION, "data": view.model_dump(mode="json")})


class ConnectionManager:
    """Binds each WebSocket connection to its own hub subscription."""

    def __init__(self, service: RecognitionService) -> None:
        self._service = service
        self._hub = service.hub
        # id(ws) -> subscription
        self._subscriptions: dict[int, Subscription] = {}

    @property
    def active(self) -> int:
        return len(self._subscriptions)

    async def connect(self, ws: WebSocket) -> Subscription:
        # Attach before accepting so nothing published after the handshake is missed
        sub = self._hub.subscribe()
        try:
            await ws.accept()
        except Exception:
            sub.close()
            raise
        self._subscriptions[id(ws)] = sub
        logger.info("WebSocket client connected (%d total)", self.active)
        return sub

    def disconnect(self, ws: WebSocket) -> None:
        sub = self._subscriptions.pop(id(ws), None)
        if sub is not None:
            sub.close()
        logger.info("WebSocket client disconnected (%d total)", self.active)

    async def serve(self, ws: WebSocket) -> None:
        """Relay pushes until the client disconnects or the subscription ends."""
        sub = await self.connect(ws)
        listener = asyncio.create_task(self._listen(ws))
        relay = asyncio.create_task(self._relay(ws, sub))
        try:
            done, pending = await asyncio.wait({listener, relay}, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                exc = task.exception()
                if exc is not None:
                    logger.warning("WebSocket connection error: %s", exc)
        finally:
            for task in (listener, relay):
                task.cancel()
            self.disconnect(ws)
        if pending:
            await asyncio.wait(pending)

        if relay in done and ws.client_state == WebSocketState.CONNECTED:
            await ws.close()

    async def _listen(self, ws: WebSocket) -> None:
        # We don't expect client messages, but reading is how disconnects surface
        try:
            while True:
                await ws.receive_text()
        except WebSocketDisconnect:
            return

    async def _relay(self, ws: WebSocket, sub: Subscription) -> None:
        async for record in sub:
            try:
                await ws.send_text(encode_event(self._service.expand([record])[0]))
            except Exception as exc:
                logger.warning("Push of recognition %s to subscriber %s failed: %s", record.id, sub.id, exc)
                return
