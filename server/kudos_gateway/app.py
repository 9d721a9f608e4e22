"""FastAPI application for the Kudos Gateway."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware

from .app_state import GatewayState, build_state
from .config import config
from .routers.health import router as health_router
from .routers.recognitions import router as recognitions_router
from .routers.users import router as users_router
from .ws.manager import ConnectionManager

logging.basicConfig(level=config.log_level, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def create_app(state: GatewayState | None = None) -> FastAPI:
    """Build the gateway app around an explicitly owned engine state."""
    state = state or build_state(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown."""
        logger.info("Kudos Gateway starting on %s:%d", config.host, config.port)
        logger.info("Store holds %d recognitions", len(state.store))

        yield

        # Shutdown
        state.shutdown()
        logger.info("Kudos Gateway stopped")

    app = FastAPI(
        title="Kudos Gateway",
        description="HTTP/WebSocket API for sending and receiving recognitions",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.gateway = state
    app.state.ws_manager = ConnectionManager(state.service)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(recognitions_router)

    @app.websocket("/api/ws/recognitions")
    async def recognition_stream(ws: WebSocket):
        """Push every recognition created after the client connects.

        Messages: {"type": "new_recognition", "data": <recognition>}
        """
        await app.state.ws_manager.serve(ws)

    return app


app = create_app()
