"""Gateway state: the explicitly owned engine components for one app."""

from __future__ import annotations

import logging

from .config import GatewayConfig
from .demo import DEMO_CALLERS, demo_recognitions
from .services.broadcast import BroadcastHub
from .services.directory import Directory, StaticDirectory
from .services.recognition_service import RecognitionService
from .services.recognition_store import RecognitionStore

logger = logging.getLogger(__name__)


class GatewayState:
    """Holds the store, hub, directory and service for one app instance."""

    def __init__(
        self,
        directory: Directory,
        store: RecognitionStore | None = None,
        hub: BroadcastHub | None = None,
    ) -> None:
        self.directory = directory
        self.store = store or RecognitionStore()
        self.hub = hub or BroadcastHub()
        self.service = RecognitionService(self.store, self.directory, self.hub)

    def shutdown(self) -> None:
        """Release every live subscription."""
        self.hub.close_all()


def build_state(cfg: GatewayConfig) -> GatewayState:
    """Build gateway state from configuration."""
    directory = StaticDirectory(DEMO_CALLERS if cfg.seed_demo else ())
    state = GatewayState(directory, hub=BroadcastHub(queue_size=cfg.subscriber_queue_size))
    if cfg.seed_demo:
        state.service.seed(demo_recognitions())
    return state
