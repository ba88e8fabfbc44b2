"""Enumerations for the Awair exporter."""

from enum import StrEnum


class MetricName(StrEnum):
    """Climate gauges exported per device, without namespace and subsystem."""

    TEMPERATURE = "temp_c"
    HUMIDITY = "relative_humidity"
    CO2 = "co2_ppm"
    VOC = "voc_ppb"
    PM25 = "pm25_ug_m3"
    SCORE = "score"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
