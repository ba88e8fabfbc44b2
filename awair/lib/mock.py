"""Mock Awair device for development.

Serves realistic air-data payloads through an httpx mock transport, so the
exporter can run without hardware. Used by the poller when MOCK_SENSORS=1
is set.
"""

import random
from datetime import UTC, datetime

import httpx


def _random_walk(
    current: float, drift: float, min_val: float, max_val: float
) -> float:
    """Generate next value using random walk with bounds."""
    change = random.gauss(0, drift)
    new_val = current + change
    return max(min_val, min(max_val, new_val))


class MockAwairDevice:
    """Simulated Awair device answering every address it is asked for.

    Each address gets its own independent random walk:
    - Temperature: drift=0.15, bounds 15-30
    - Humidity: drift=0.3, bounds 30-70
    - CO2: drift=15, bounds 400-2000
    - VOC: drift=10, bounds 20-1500
    - PM2.5: drift=1, bounds 0-80
    """

    def __init__(self) -> None:
        self._state: dict[str, dict[str, float]] = {}

    def _initial_state(self) -> dict[str, float]:
        return {
            "temp": random.uniform(20.0, 23.0),
            "humid": random.uniform(45.0, 55.0),
            "co2": random.uniform(450.0, 700.0),
            "voc": random.uniform(80.0, 200.0),
            "pm25": random.uniform(2.0, 10.0),
        }

    def reading(self, address: str) -> dict:
        """Generate the next air-data payload for an address."""
        state = self._state.setdefault(address, self._initial_state())
        state["temp"] = _random_walk(state["temp"], 0.15, 15.0, 30.0)
        state["humid"] = _random_walk(state["humid"], 0.3, 30.0, 70.0)
        state["co2"] = _random_walk(state["co2"], 15.0, 400.0, 2000.0)
        state["voc"] = _random_walk(state["voc"], 10.0, 20.0, 1500.0)
        state["pm25"] = _random_walk(state["pm25"], 1.0, 0.0, 80.0)

        co2 = round(state["co2"])
        voc = round(state["voc"])
        pm25 = round(state["pm25"])
        return {
            "timestamp": datetime.now(UTC).isoformat(),
            "score": _score(co2, voc, pm25),
            "dew_point": round(state["temp"] - (100 - state["humid"]) / 5, 2),
            "temp": round(state["temp"], 2),
            "humid": round(state["humid"], 2),
            "abs_humid": round(state["humid"] / 5, 2),
            "co2": co2,
            "co2_est": co2 + random.randint(-20, 20),
            "co2_est_baseline": 35000,
            "voc": voc,
            "voc_baseline": 37000,
            "voc_h2_raw": 26,
            "voc_ethanol_raw": 38,
            "pm25": pm25,
            "pm10_est": pm25 + 2,
        }

    def handle(self, request: httpx.Request) -> httpx.Response:
        """httpx MockTransport handler."""
        return httpx.Response(200, json=self.reading(str(request.url)))

    def transport(self) -> httpx.MockTransport:
        """Build a transport that routes every request to this device."""
        return httpx.MockTransport(self.handle)


def _score(co2: int, voc: int, pm25: int) -> int:
    """Rough 0-100 score, lower when any pollutant is high."""
    penalty = max(0, co2 - 600) / 20 + max(0, voc - 300) / 15 + max(0, pm25 - 12) / 1.5
    return max(0, min(100, round(100 - penalty)))
