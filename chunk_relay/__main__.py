"""Run the relay with uvicorn: `python -m chunk_relay`."""

import logging

import uvicorn

from .config import get_settings
from .logging import setup_logging


def main() -> None:
    """Start uvicorn on the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logging.getLogger(__name__).info("Open relay", extra={"url": f"http://localhost:{settings.port}"})
    uvicorn.run("chunk_relay.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
