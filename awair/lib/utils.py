"""Shared utility functions."""
import re
from datetime import timedelta

# Seconds per duration unit, same unit set as Go's time.ParseDuration
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # micro sign
    "μs": 1e-6,  # greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PATTERN = re.compile(r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)[a-zµμ]+)+$")
_DURATION_TERM = re.compile(r"(\d+\.?\d*|\.\d+)([a-zµμ]+)")


def parse_duration(value: str) -> timedelta:
    """Parse a duration string such as "30s", "1m30s" or "1.5h".

    A duration is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a mandatory unit suffix. Valid units are
    "ns", "us" (or "µs"), "ms", "s", "m" and "h". The bare string "0" is
    also accepted.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    text = value.strip()
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION_PATTERN.match(text):
        raise ValueError(f"invalid duration {value!r}")

    sign = -1 if text.startswith("-") else 1
    total = 0.0
    for number, unit in _DURATION_TERM.findall(text.lstrip("+-")):
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {value!r}")
        total += float(number) * scale
    return timedelta(seconds=sign * total)


def format_duration(value: timedelta) -> str:
    """Format a timedelta in the short form accepted by parse_duration."""
    seconds = value.total_seconds()
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{int(hours)}h")
    if minutes:
        parts.append(f"{int(minutes)}m")
    if secs or not parts:
        parts.append(f"{secs:g}s")
    return sign + "".join(parts)
