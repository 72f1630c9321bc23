# stationflow/traffic/window.py
from __future__ import annotations

from itertools import chain
from typing import List, Sequence

from stationflow.config import MINUTES_PER_DAY, WINDOW_HALF_WIDTH
from stationflow.traffic.types import CenteredAt, FilterState, TripRecord, Unfiltered


def window_minutes(center: int, half_width: int = WINDOW_HALF_WIDTH) -> List[int]:
    """
    Minutes covered by a circular window around center, both ends inclusive.

    lo = (center - half_width) mod 1440, hi = (center + half_width) mod 1440.
    When lo > hi the window wraps past midnight: [lo..1439] then [0..hi].
    """
    half_width = int(half_width)
    if half_width < 0:
        raise ValueError("half_width must be >= 0")

    if 2 * half_width + 1 >= MINUTES_PER_DAY:
        return list(range(MINUTES_PER_DAY))

    lo = (center - half_width + MINUTES_PER_DAY) % MINUTES_PER_DAY
    hi = (center + half_width) % MINUTES_PER_DAY

    if lo <= hi:
        return list(range(lo, hi + 1))
    return list(range(lo, MINUTES_PER_DAY)) + list(range(0, hi + 1))


def select_window(
    buckets: Sequence[List[TripRecord]],
    filter_state: FilterState,
    half_width: int = WINDOW_HALF_WIDTH,
) -> List[TripRecord]:
    """
    Flatten the minute buckets selected by filter_state.

    buckets is one minute-indexed array (departures or arrivals).
    Unfiltered returns every trip; only the selected buckets are touched
    otherwise.
    """
    if len(buckets) != MINUTES_PER_DAY:
        raise ValueError(f"expected {MINUTES_PER_DAY} buckets, got {len(buckets)}")

    if isinstance(filter_state, Unfiltered):
        return list(chain.from_iterable(buckets))
    if not isinstance(filter_state, CenteredAt):
        raise TypeError(f"unsupported filter state: {filter_state!r}")

    minutes = window_minutes(filter_state.minute, half_width)
    return list(chain.from_iterable(buckets[m] for m in minutes))


def window_trip_count(
    buckets: Sequence[List[TripRecord]],
    filter_state: FilterState,
    half_width: int = WINDOW_HALF_WIDTH,
) -> int:
    if isinstance(filter_state, Unfiltered):
        return sum(len(b) for b in buckets)
    if not isinstance(filter_state, CenteredAt):
        raise TypeError(f"unsupported filter state: {filter_state!r}")
    return sum(len(buckets[m]) for m in window_minutes(filter_state.minute, half_width))
