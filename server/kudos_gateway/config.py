"""Environment-based configuration for the Kudos Gateway."""

from __future__ import annotations

import os


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class GatewayConfig:
    """Gateway configuration loaded from environment variables."""

    def __init__(self) -> None:
        self.host = os.environ.get("KUDOS_GATEWAY_HOST", "0.0.0.0")
        self.port = int(os.environ.get("KUDOS_GATEWAY_PORT", "4000"))
        self.log_level = os.environ.get("KUDOS_LOG_LEVEL", "INFO").upper()

        # Seed the demo directory and recognitions on startup
        self.seed_demo = _flag("KUDOS_SEED_DEMO", "1")

        # Per-subscriber push queue bound
        self.subscriber_queue_size = int(os.environ.get("KUDOS_SUBSCRIBER_QUEUE_SIZE", "100"))

        # CORS origins (comma-separated)
        origins = os.environ.get("KUDOS_CORS_ORIGINS", "")
        self.cors_origins: list[str] = [o.strip() for o in origins.split(",") if o.strip()] if origins else ["*"]


# Singleton
config = GatewayConfig()
