"""Latest-value metrics store exposed on /metrics.

Each store owns its own prometheus_client registry, so the poller and the
scrape handler share state only through the store instance they are given.
"""

from typing import Protocol

from prometheus_client import (
    CollectorRegistry,
    Gauge,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from awair.lib.config import (
    DEVICE_LABEL,
    METRIC_NAMESPACE,
    METRIC_SUBSYSTEM,
    MetricName,
)

_HELP = {
    MetricName.TEMPERATURE: "The current temperature in C",
    MetricName.HUMIDITY: "The current % relative humidity",
    MetricName.CO2: "The current CO2 PPM",
    MetricName.VOC: "The current Volatile Organic Compound reading in parts per billion",
    MetricName.PM25: "The current concentration of 2.5 micron particles in micrograms per meter cubed",
    MetricName.SCORE: "The current Awair Score",
}


class ClimateReading(Protocol):
    """The subset of a device reading that is exported."""

    @property
    def temp(self) -> float: ...

    @property
    def humid(self) -> float: ...

    @property
    def co2(self) -> int: ...

    @property
    def voc(self) -> int: ...

    @property
    def pm25(self) -> int: ...

    @property
    def score(self) -> int: ...


def full_metric_name(name: MetricName) -> str:
    """Return the exposed name, e.g. awair_climate_temp_c."""
    return f"{METRIC_NAMESPACE}_{METRIC_SUBSYSTEM}_{name}"


class MetricsStore:
    """Gauges keyed by (metric name, device address).

    Writes are last-write-wins per sample. prometheus_client guards every
    sample with its own lock, so a scrape can run while the poller writes;
    a scrape may see some metrics of a device from the previous poll.
    """

    def __init__(self, *, process_metrics: bool = False) -> None:
        self.registry = CollectorRegistry()
        self._gauges = {
            name: Gauge(
                str(name),
                _HELP[name],
                [DEVICE_LABEL],
                namespace=METRIC_NAMESPACE,
                subsystem=METRIC_SUBSYSTEM,
                registry=self.registry,
            )
            for name in MetricName
        }
        if process_metrics:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)

    def set(self, name: MetricName, device_address: str, value: float) -> None:
        """Upsert the value of one metric for one device."""
        self._gauges[name].labels(device_address).set(float(value))

    def get(self, name: MetricName, device_address: str) -> float | None:
        """Return the current value, or None if never set for this device."""
        return self.registry.get_sample_value(
            full_metric_name(name), {DEVICE_LABEL: device_address}
        )

    def update(self, device_address: str, reading: ClimateReading) -> None:
        """Set all exported metrics of a device from one decoded reading."""
        self.set(MetricName.TEMPERATURE, device_address, reading.temp)
        self.set(MetricName.HUMIDITY, device_address, reading.humid)
        # Raw sensor value, not the co2_est estimate
        self.set(MetricName.CO2, device_address, reading.co2)
        self.set(MetricName.VOC, device_address, reading.voc)
        self.set(MetricName.PM25, device_address, reading.pm25)
        self.set(MetricName.SCORE, device_address, reading.score)

    def render(self) -> bytes:
        """Render the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry)
