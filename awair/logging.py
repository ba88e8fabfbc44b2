"""Logging configuration for the Awair exporter."""

import logging
import sys

_configured = False

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s - %(message)s"


def configure(level: int | str = logging.INFO) -> None:
    """Configure logging for the application.

    Safe to call multiple times - only configures once.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("awair")
    root.setLevel(level)
    root.addHandler(handler)

    # Route uvicorn through the same handler so server and poller lines match
    uv_log = logging.getLogger("uvicorn")
    uv_log.handlers.clear()
    uv_log.addHandler(handler)
    uv_log.setLevel(level)

    # Scrapes hit /metrics every few seconds, access lines are noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the 'awair' namespace.

    Args:
        name: Logger name (will be prefixed with 'awair.')

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(f"awair.{name}")
