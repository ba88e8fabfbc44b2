"""Shared constants for the configuration module."""

# Prometheus naming: awair_climate_<metric>
METRIC_NAMESPACE = "awair"
METRIC_SUBSYSTEM = "climate"
DEVICE_LABEL = "device_address"

DEFAULT_AWAIR_ADDRESS = "http://localhost/air-data/latest"
DEFAULT_LISTEN_ADDRESS = "0.0.0.0"
DEFAULT_LISTEN_PORT = 2112
DEFAULT_POLL_FREQUENCY = "30s"
