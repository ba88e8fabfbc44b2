"""Shared pytest fixtures for the test suite."""

import json
import logging
from collections.abc import Callable

import httpx
import pytest

from awair.lib.metrics import MetricsStore
from awair.poller.client import AwairClient


@pytest.fixture(autouse=True)
def configure_caplog(caplog):
    """Ensure caplog captures logs from the awair namespace."""
    caplog.set_level(logging.DEBUG, logger="awair")


@pytest.fixture
def air_data():
    """A full payload as returned by an Awair Element local API."""
    return {
        "timestamp": "2024-06-15T12:00:00.000Z",
        "score": 87,
        "dew_point": 7.62,
        "temp": 21.5,
        "humid": 40.2,
        "abs_humid": 7.58,
        "co2": 612,
        "co2_est": 640,
        "co2_est_baseline": 35286,
        "voc": 110,
        "voc_baseline": 37380,
        "voc_h2_raw": 26,
        "voc_ethanol_raw": 38,
        "pm25": 8,
        "pm10_est": 10,
    }


@pytest.fixture
def store():
    """An isolated metrics store for each test."""
    return MetricsStore()


@pytest.fixture
def make_client() -> Callable[..., AwairClient]:
    """Build an AwairClient whose requests go to a handler function."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AwairClient:
        return AwairClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build a device response with a JSON body."""

    def _response(payload: object, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return _response


@pytest.fixture
def refuse() -> Callable[[httpx.Request], httpx.Response]:
    """Handler simulating a device that refuses connections."""

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    return _refuse
