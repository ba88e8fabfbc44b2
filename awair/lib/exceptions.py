"""Custom exceptions for the Awair exporter.

Provides a hierarchy of domain-specific exceptions so the poller can tell
per-device failures (logged, retried next cycle) from startup failures
(fatal).
"""


class AwairExporterError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(AwairExporterError):
    """Raised when the startup configuration is invalid."""


class DeviceError(AwairExporterError):
    """Base exception for failures polling a single Awair device."""

    def __init__(self, address: str, message: str) -> None:
        self.address = address
        super().__init__(f"{address}: {message}")


class DeviceUnreachableError(DeviceError):
    """Raised when the GET request fails at the transport level."""


class DeviceStatusError(DeviceError):
    """Raised when the device answers with a non-2xx status."""

    def __init__(self, address: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(address, f"unexpected HTTP status {status_code}")


class DeviceReadError(DeviceError):
    """Raised when the response body cannot be read."""


class DeviceDecodeError(DeviceError):
    """Raised when the response body is not a valid air-data payload."""
