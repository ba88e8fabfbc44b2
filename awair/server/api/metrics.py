"""Prometheus scrape endpoint."""

from prometheus_client import CONTENT_TYPE_LATEST
from starlette.requests import Request
from starlette.responses import Response

from awair.lib.metrics import MetricsStore


async def get_metrics(request: Request) -> Response:
    """Return the current contents of the metrics store."""
    store: MetricsStore = request.app.state.metrics
    return Response(store.render(), media_type=CONTENT_TYPE_LATEST)
