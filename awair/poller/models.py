"""Domain models for Awair air-data readings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationError

from awair.lib.exceptions import DeviceDecodeError


class AirData(BaseModel):
    """Snapshot returned by a device's local air-data endpoint.

    Field names are the JSON keys the device emits. Unknown keys are
    ignored and missing keys keep their zero default. Values are not
    coerced: booleans, numeric strings and fractional integers are rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    timestamp: datetime | None = None
    score: int = 0
    dew_point: float = 0.0
    temp: float = 0.0
    humid: float = 0.0
    abs_humid: float = 0.0
    co2: int = 0
    co2_est: int = 0
    co2_est_baseline: int = 0
    voc: int = 0
    voc_baseline: int = 0
    voc_h2_raw: int = 0
    voc_ethanol_raw: int = 0
    pm25: int = 0
    pm10_est: int = 0


def parse_air_data(address: str, body: bytes) -> AirData:
    """Decode a response body into an AirData reading.

    Raises:
        DeviceDecodeError: If the body is not JSON, not an object, or has
            values of the wrong type.
    """
    try:
        return AirData.model_validate_json(body)
    except ValidationError as e:
        raise DeviceDecodeError(
            address, f"invalid air-data payload ({e.error_count()} errors): {e}"
        ) from e
