"""Centralized configuration for the Awair exporter.

This package provides:
- Enums for exported metric names and log levels
- Pydantic settings models for configuration
"""

from .constants import (
    DEFAULT_AWAIR_ADDRESS,
    DEVICE_LABEL,
    METRIC_NAMESPACE,
    METRIC_SUBSYSTEM,
)
from .enums import LogLevel, MetricName
from .settings import (
    MetricsSettings,
    PollingSettings,
    ServerSettings,
    Settings,
    split_addresses,
)

__all__ = [
    # Enums
    "LogLevel",
    "MetricName",
    # Settings models
    "MetricsSettings",
    "PollingSettings",
    "ServerSettings",
    "Settings",
    # Constants
    "DEFAULT_AWAIR_ADDRESS",
    "DEVICE_LABEL",
    "METRIC_NAMESPACE",
    "METRIC_SUBSYSTEM",
    # Functions
    "split_addresses",
]
