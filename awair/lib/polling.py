"""Generic async polling service abstraction.

Provides a reusable base class for services that run one poll cycle, sleep
for a fixed interval and repeat until they are asked to stop.
"""
import asyncio
from abc import ABC, abstractmethod

from awair.logging import get_logger


class PollingService(ABC):
    """Abstract base class for async polling services.

    Implements the common polling loop pattern with:
    - A fixed sleep between the end of one cycle and the start of the next
    - A stop signal that also interrupts the sleep
    - Error recovery: a failing cycle is logged and the loop carries on
    """

    def __init__(self, name: str, frequency_sec: float) -> None:
        """Initialize the polling service.

        Args:
            name: Service name for logging.
            frequency_sec: Time to sleep between cycles, in seconds.
        """
        if frequency_sec <= 0:
            raise ValueError(f"frequency_sec must be positive, got {frequency_sec}")
        self.name = name
        self.frequency_sec = frequency_sec
        self.cycles = 0
        self._stop_requested = asyncio.Event()
        self._logger = get_logger(f"polling.{name}")

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize any resources needed before polling starts.

        Called once at the start of run().
        """

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources before exit.

        Called once when the polling loop exits, whatever the reason.
        """

    @abstractmethod
    async def poll_cycle(self) -> None:
        """Execute a single poll cycle."""

    def on_poll_error(self, error: Exception) -> None:
        """Handle an error that escaped a poll cycle.

        Override to customize error handling. Default logs the error.
        """
        self._logger.exception("%s poll cycle failed: %s", self.name, error)

    @property
    def stopping(self) -> bool:
        """True once stop() has been called."""
        return self._stop_requested.is_set()

    def stop(self) -> None:
        """Ask the loop to exit after the current device, waking it if asleep."""
        if not self._stop_requested.is_set():
            self._logger.info("Stopping %s polling service...", self.name)
        self._stop_requested.set()

    async def _sleep(self) -> None:
        """Sleep for the polling interval, returning early on stop()."""
        try:
            await asyncio.wait_for(
                self._stop_requested.wait(), timeout=self.frequency_sec
            )
        except TimeoutError:
            pass

    async def run(self) -> None:
        """Run the polling loop until stop() is called.

        1. Calls initialize()
        2. Repeats poll_cycle() then sleeps for the configured interval
        3. Calls cleanup() on exit, including on cancellation
        """
        await self.initialize()
        self._logger.info("%s polling service started", self.name)

        try:
            while not self.stopping:
                try:
                    await self.poll_cycle()
                except Exception as e:
                    self.on_poll_error(e)
                self.cycles += 1

                if self.stopping:
                    break
                await self._sleep()
        finally:
            self._logger.info("Cleaning up resources...")
            await self.cleanup()
            self._logger.info("%s shutdown complete", self.name)
