"""Application factory for the web server."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.routing import Route

from awair.lib.config import Settings
from awair.lib.metrics import MetricsStore
from awair.lib.utils import format_duration
from awair.logging import configure, get_logger
from awair.poller.polling import AwairPollingService, create_service

from .api.metrics import get_metrics

_logger = get_logger("server.entrypoint")

# Upper bound on waiting for the poller to notice stop() before cancelling it
_SHUTDOWN_GRACE_SEC = 5.0


async def _stop_poller(service: AwairPollingService, task: asyncio.Task) -> None:
    """Stop the polling task, cancelling it if a device request is hanging."""
    service.stop()
    try:
        await asyncio.wait_for(asyncio.shield(task), timeout=_SHUTDOWN_GRACE_SEC)
    except TimeoutError:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass


def _make_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        """Run the poller as a background task for the life of the server."""
        service = create_service(app.state.metrics, settings)
        task = asyncio.create_task(service.run())
        app.state.poller = service
        _logger.info(
            "Awair poller started on %s polling Awair devices at %s every %s",
            settings.server.bind,
            list(service.addresses),
            format_duration(settings.poll_frequency),
        )

        try:
            yield
        finally:
            await _stop_poller(service, task)
            _logger.info("Awair poller stopped")

    return lifespan


def create_app(settings: Settings) -> Starlette:
    """Create and configure the Starlette application.

    The metrics store is created here, so it exists even when the app runs
    without its lifespan (as in tests); the poller that fills it only starts
    with the lifespan.

    Returns:
        Configured Starlette application instance.
    """
    configure(str(settings.log_level))

    routes = [
        Route("/metrics", get_metrics),
    ]

    app = Starlette(routes=routes, lifespan=_make_lifespan(settings))
    app.state.settings = settings
    app.state.metrics = MetricsStore(
        process_metrics=settings.metrics.process_metrics
    )
    return app
