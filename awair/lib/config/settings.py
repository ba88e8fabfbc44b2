"""Settings models and configuration loading for the Awair exporter."""

from datetime import timedelta
from functools import cached_property
from typing import Annotated, Any, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from awair.lib.config.constants import (
    DEFAULT_AWAIR_ADDRESS,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_LISTEN_PORT,
    DEFAULT_POLL_FREQUENCY,
)
from awair.lib.config.enums import LogLevel
from awair.lib.utils import parse_duration

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(v: Any) -> bool:
    """Parse boolean from string '1'/'0' (or true/false) or actual bool."""
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return bool(v)


def _parse_duration(v: Any) -> timedelta:
    """Parse a duration string ("30s", "1m30s") into a timedelta."""
    if isinstance(v, timedelta):
        return v
    if isinstance(v, str):
        return parse_duration(v)
    raise ValueError(f"expected a duration string such as '30s', got {v!r}")


def _parse_optional_duration(v: Any) -> timedelta | None:
    """Parse a duration string, treating None and empty string as unset."""
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    return _parse_duration(v)


def _parse_log_level(v: Any) -> Any:
    """Accept log level names in any case."""
    if isinstance(v, str):
        return v.strip().upper()
    return v


def split_addresses(raw: str) -> tuple[str, ...]:
    """Split a comma-separated address list, dropping blank items.

    Order and duplicates are preserved: each entry is polled independently.
    """
    return tuple(a.strip() for a in raw.split(",") if a.strip())


_BoolFromStr = Annotated[bool, BeforeValidator(_parse_bool)]
_Duration = Annotated[timedelta, BeforeValidator(_parse_duration)]
_OptionalDuration = Annotated[
    timedelta | None, BeforeValidator(_parse_optional_duration)
]
_LogLevel = Annotated[LogLevel, BeforeValidator(_parse_log_level)]


class ServerSettings(BaseModel):
    """HTTP listener settings for the /metrics endpoint."""

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_LISTEN_ADDRESS
    port: int = DEFAULT_LISTEN_PORT

    @property
    def bind(self) -> str:
        """Listen string in host:port form."""
        return f"{self.host}:{self.port}"


class PollingSettings(BaseModel):
    """Polling service settings."""

    model_config = ConfigDict(frozen=True)

    addresses: tuple[str, ...] = (DEFAULT_AWAIR_ADDRESS,)
    frequency_sec: float = 30.0
    request_timeout_sec: float | None = None


class MetricsSettings(BaseModel):
    """Metrics registry settings."""

    model_config = ConfigDict(frozen=True)

    process_metrics: bool = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The same fields are accepted as command line flags (--listen, --port,
    --awair_addresses, --poll_frequency, ...) when the settings are built
    with CLI parsing enabled.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP listener
    listen: str = Field(
        default=DEFAULT_LISTEN_ADDRESS, description="Listen address"
    )
    port: int = Field(
        default=DEFAULT_LISTEN_PORT, ge=1, le=65535, description="Listen port number"
    )

    # Devices
    awair_addresses: str = Field(
        default=DEFAULT_AWAIR_ADDRESS,
        description="Comma-separated list of Awair air-data URLs",
    )
    poll_frequency: _Duration = Field(
        default=parse_duration(DEFAULT_POLL_FREQUENCY),
        description="Time to wait between polling devices (e.g. 30s, 1m)",
    )
    request_timeout: _OptionalDuration = Field(
        default=None,
        description="Timeout for each device request (unset means no timeout)",
    )

    # Observability
    log_level: _LogLevel = LogLevel.INFO
    process_metrics: _BoolFromStr = True

    # Development
    mock_sensors: _BoolFromStr = False

    @cached_property
    def addresses(self) -> tuple[str, ...]:
        """Configured device addresses in polling order."""
        return split_addresses(self.awair_addresses)

    @cached_property
    def server(self) -> ServerSettings:
        """Get HTTP listener settings."""
        return ServerSettings(host=self.listen, port=self.port)

    @cached_property
    def polling(self) -> PollingSettings:
        """Get polling settings."""
        timeout = self.request_timeout
        return PollingSettings(
            addresses=self.addresses,
            frequency_sec=self.poll_frequency.total_seconds(),
            request_timeout_sec=(
                timeout.total_seconds() if timeout is not None else None
            ),
        )

    @cached_property
    def metrics(self) -> MetricsSettings:
        """Get metrics registry settings."""
        return MetricsSettings(process_metrics=self.process_metrics)

    @model_validator(mode="after")
    def validate_settings(self) -> Self:
        """Validate cross-field configuration constraints."""
        errors: list[str] = []

        if self.poll_frequency <= timedelta(0):
            errors.append(
                f"POLL_FREQUENCY ({self.poll_frequency}) must be a positive duration"
            )

        if self.request_timeout is not None and self.request_timeout <= timedelta(0):
            errors.append(
                f"REQUEST_TIMEOUT ({self.request_timeout}) must be a positive duration"
            )

        if not split_addresses(self.awair_addresses):
            errors.append("AWAIR_ADDRESSES must list at least one device address")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n  - "
                + "\n  - ".join(errors)
            )

        return self
