"""Web server entrypoint.

Serves /metrics with uvicorn and polls the configured Awair devices in the
background. Configuration comes from environment variables or flags:

    python -m awair.server --awair_addresses http://awair-1/air-data/latest \\
        --poll_frequency 30s --port 2112

Usage: python -m awair.server
"""
import sys

import uvicorn
from pydantic import ValidationError

from awair.lib.config import Settings
from awair.logging import configure, get_logger

from .entrypoint import create_app

logger = get_logger("server")


def load_settings(args: list[str] | bool = True) -> Settings:
    """Build settings from the environment and command line flags.

    Exits the process if the configuration is invalid, for instance when
    the poll frequency is not a valid duration.
    """
    try:
        return Settings(_cli_parse_args=args, _cli_prog_name="awair-exporter")
    except ValidationError as e:
        configure()
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)


def main() -> None:
    """Run the exporter until interrupted."""
    settings = load_settings()
    app = create_app(settings)
    # uvicorn logs the bind error and exits non-zero if the port is taken
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
