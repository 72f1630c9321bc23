# stationflow/traffic/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from stationflow.config import ANY_TIME, MINUTES_PER_DAY
from stationflow.traffic.clock import minute_of_day


class InvalidFilterError(ValueError):
    """Filter minute outside [0, 1440) that is not the "any time" value."""


def normalize_station_id(raw) -> str | None:
    """
    Station ids come as ints from one source and strings from another
    ("12", 12, 12.0 once pandas has seen a NaN). Map them all to "12".
    Returns None for missing ids.
    """
    if raw is None:
        return None
    if isinstance(raw, float):
        if math.isnan(raw):
            return None
        if raw.is_integer():
            return str(int(raw))
    sid = str(raw).strip()
    if not sid or sid.lower() == "nan":
        return None
    if sid.endswith(".0") and sid[:-2].isdigit():
        sid = sid[:-2]
    return sid


@dataclass(frozen=True)
class TripRecord:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime

    @property
    def started_minute(self) -> int:
        return minute_of_day(self.started_at)

    @property
    def ended_minute(self) -> int:
        return minute_of_day(self.ended_at)


@dataclass(frozen=True)
class Station:
    """Durable station attributes. Traffic counts live on StationTraffic."""
    station_id: str
    name: str = ""
    lat: float | None = None
    lon: float | None = None
    capacity: int | None = None

    @property
    def has_position(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass(frozen=True)
class StationTraffic:
    station: Station
    departures: int = 0
    arrivals: int = 0

    @property
    def station_id(self) -> str:
        return self.station.station_id

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals

    @property
    def departure_share(self) -> float:
        # zero traffic -> 0, not an error
        return self.departures / max(self.total_traffic, 1)


# ------------------------------------------------------------
# Filter state: Unfiltered | CenteredAt(minute)
# ------------------------------------------------------------
@dataclass(frozen=True)
class Unfiltered:
    @property
    def is_filtered(self) -> bool:
        return False


@dataclass(frozen=True)
class CenteredAt:
    minute: int

    def __post_init__(self):
        m = self.minute
        if isinstance(m, bool) or not isinstance(m, int):
            raise InvalidFilterError(f"filter minute must be an int, got {m!r}")
        if not 0 <= m < MINUTES_PER_DAY:
            raise InvalidFilterError(
                f"filter minute must be in [0, {MINUTES_PER_DAY}), got {m}"
            )

    @property
    def is_filtered(self) -> bool:
        return True


FilterState = Unfiltered | CenteredAt


def filter_from_slider(value) -> FilterState:
    """
    Slider values: -1 means "any time", 0..1439 a minute-of-day.
    Anything else raises InvalidFilterError.
    """
    if value is None:
        return Unfiltered()
    if isinstance(value, bool):
        raise InvalidFilterError(f"not a slider value: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidFilterError(f"not a slider value: {value!r}")
    try:
        v = int(value)
    except (TypeError, ValueError):
        raise InvalidFilterError(f"not a slider value: {value!r}") from None
    if isinstance(value, float) and not value.is_integer():
        raise InvalidFilterError(f"not a slider value: {value!r}")
    if v == ANY_TIME:
        return Unfiltered()
    return CenteredAt(v)
