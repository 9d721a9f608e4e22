"""Run the Kudos Gateway with uvicorn."""

from __future__ import annotations

import uvicorn

from .config import config


def main() -> None:
    uvicorn.run("kudos_gateway.app:app", host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
