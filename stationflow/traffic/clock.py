# stationflow/traffic/clock.py
from __future__ import annotations

from datetime import datetime

from stationflow.config import MINUTES_PER_DAY


def minute_of_day(ts: datetime) -> int:
    """
    Minutes since midnight of the timestamp's own wall clock.

    Date, seconds and sub-second precision are ignored. Works for
    datetime and pandas.Timestamp (tz-aware values keep their local fields).
    """
    return ts.hour * 60 + ts.minute


def _check_minute(minute) -> int:
    if isinstance(minute, bool) or not isinstance(minute, int):
        raise ValueError(f"minute must be an int, got {minute!r}")
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValueError(f"minute must be in [0, {MINUTES_PER_DAY}), got {minute}")
    return minute


def format_clock(minute: int, style: str = "12h") -> str:
    """
    Render a minute-of-day as a short clock string.

      style="12h": 485 -> "8:05 AM", 0 -> "12:00 AM"
      style="24h": 485 -> "08:05"

    Out-of-range minutes raise ValueError rather than wrapping.
    """
    minute = _check_minute(minute)
    hour, mm = divmod(minute, 60)

    if style == "24h":
        return f"{hour:02d}:{mm:02d}"
    if style != "12h":
        raise ValueError(f"unknown clock style: {style!r}")

    suffix = "AM" if hour < 12 else "PM"
    h12 = hour % 12 or 12
    return f"{h12}:{mm:02d} {suffix}"
