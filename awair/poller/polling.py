"""Poll Awair devices for air-data, and publish readings as gauges.

Every cycle GETs each configured address in order, one at a time, and
writes the decoded reading into the metrics store. A device that fails
keeps whatever values it last published; the next cycle is its retry.
"""

from collections.abc import Sequence
from typing import override

from awair.lib.config import PollingSettings, Settings
from awair.lib.exceptions import DeviceError
from awair.lib.metrics import MetricsStore
from awair.lib.polling import PollingService
from awair.logging import get_logger

from .client import AwairClient
from .models import AirData

logger = get_logger("poller.polling")


class AwairPollingService(PollingService):
    """Polling service for one or more Awair local air-data endpoints."""

    def __init__(
        self,
        addresses: Sequence[str],
        store: MetricsStore,
        client: AwairClient,
        frequency_sec: float,
    ) -> None:
        if not addresses:
            raise ValueError("at least one device address is required")
        super().__init__(name="awair", frequency_sec=frequency_sec)
        self.addresses = tuple(addresses)
        self._store = store
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: PollingSettings, store: MetricsStore, client: AwairClient
    ) -> "AwairPollingService":
        """Build the service from polling settings."""
        return cls(settings.addresses, store, client, settings.frequency_sec)

    @override
    async def initialize(self) -> None:
        """Nothing to set up, the client connects lazily."""

    @override
    async def cleanup(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @override
    async def poll_cycle(self) -> None:
        """Poll every configured address once, in order."""
        for address in self.addresses:
            if self.stopping:
                return
            await self.update_device(address)

    async def poll(self, address: str) -> AirData | None:
        """Fetch a reading from one device.

        Returns:
            The decoded reading, or None if the device failed and should be
            skipped this cycle.
        """
        try:
            return await self._client.fetch(address)
        except DeviceError as e:
            logger.error("Failed to poll Awair device: %s", e)
            return None

    def persist(self, address: str, reading: AirData) -> None:
        """Publish the reading as the device's current gauge values."""
        self._store.update(address, reading)
        logger.debug(
            "Updated %s: temp=%s humid=%s co2=%s voc=%s pm25=%s score=%s",
            address,
            reading.temp,
            reading.humid,
            reading.co2,
            reading.voc,
            reading.pm25,
            reading.score,
        )

    async def update_device(self, address: str) -> bool:
        """Fetch, decode and publish one device.

        Returns:
            True if the device's metrics were updated.
        """
        reading = await self.poll(address)
        if reading is None:
            return False
        self.persist(address, reading)
        return True


def _create_client(settings: Settings) -> AwairClient:
    """Create the device client based on configuration."""
    timeout_sec = settings.polling.request_timeout_sec
    if settings.mock_sensors:
        from awair.lib.mock import MockAwairDevice

        logger.info("Using mock Awair device")
        return AwairClient(
            timeout_sec=timeout_sec,
            transport=MockAwairDevice().transport(),
        )
    return AwairClient(timeout_sec=timeout_sec)


def create_service(
    store: MetricsStore, settings: Settings
) -> AwairPollingService:
    """Create the polling service publishing into the given store."""
    return AwairPollingService.from_settings(
        settings.polling, store, _create_client(settings)
    )
