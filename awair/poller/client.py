"""HTTP client for Awair local air-data endpoints."""

import httpx

from awair.lib.exceptions import (
    DeviceReadError,
    DeviceStatusError,
    DeviceUnreachableError,
)
from awair.logging import get_logger

from .models import AirData, parse_air_data

logger = get_logger("poller.client")

# Transport-level failures: connection refused, DNS, timeouts, bad URLs
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


class AwairClient:
    """Fetch and decode air-data from Awair devices.

    One GET per call, redirects followed, no retries and no auth. Requests
    never time out unless ``timeout_sec`` is given.
    """

    def __init__(
        self,
        *,
        timeout_sec: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout_sec,
            follow_redirects=True,
            transport=transport,
        )

    async def fetch(self, address: str) -> AirData:
        """GET the address and decode its body.

        Raises:
            DeviceUnreachableError: The request failed at the transport level.
            DeviceStatusError: The device answered with a non-2xx status.
            DeviceReadError: The response body could not be read.
            DeviceDecodeError: The body is not a valid air-data payload.
        """
        try:
            async with self._client.stream("GET", address) as response:
                if not response.is_success:
                    raise DeviceStatusError(address, response.status_code)
                try:
                    body = await response.aread()
                except httpx.HTTPError as e:
                    raise DeviceReadError(
                        address, f"failed to read response body: {e!r}"
                    ) from e
        except _TRANSPORT_ERRORS as e:
            raise DeviceUnreachableError(address, f"GET failed: {e!r}") from e

        logger.debug("Fetched %d bytes from %s", len(body), address)
        return parse_air_data(address, body)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "AwairClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
