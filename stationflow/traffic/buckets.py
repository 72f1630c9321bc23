# stationflow/traffic/buckets.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Tuple

import pandas as pd

from stationflow.config import MINUTES_PER_DAY
from stationflow.traffic.clock import minute_of_day
from stationflow.traffic.types import TripRecord, normalize_station_id
from stationflow.util.console import warn


def _usable(trip: TripRecord) -> bool:
    if normalize_station_id(trip.start_station_id) is None:
        return False
    if normalize_station_id(trip.end_station_id) is None:
        return False
    for ts in (trip.started_at, trip.ended_at):
        if not isinstance(ts, datetime) or pd.isna(ts):
            return False
    return True


@dataclass(frozen=True)
class MinuteBuckets:
    """
    departures[m]: trips with started_minute == m
    arrivals[m]:   trips with ended_minute == m

    Both are tuples of exactly 1440 lists. Nothing mutates them after build().
    excluded: records dropped because of a missing id or timestamp.
    """
    departures: Tuple[List[TripRecord], ...]
    arrivals: Tuple[List[TripRecord], ...]
    excluded: int = 0

    @classmethod
    def build(cls, trips: Iterable[TripRecord]) -> "MinuteBuckets":
        departures = tuple([] for _ in range(MINUTES_PER_DAY))
        arrivals = tuple([] for _ in range(MINUTES_PER_DAY))
        excluded = 0

        for trip in trips:
            if not _usable(trip):
                excluded += 1
                continue
            departures[minute_of_day(trip.started_at)].append(trip)
            arrivals[minute_of_day(trip.ended_at)].append(trip)

        if excluded:
            warn(f"Excluded {excluded} unusable trip records")

        return cls(departures=departures, arrivals=arrivals, excluded=excluded)

    @property
    def trip_count(self) -> int:
        return sum(len(b) for b in self.departures)

    def bucket_sizes(self, kind: str = "departures") -> List[int]:
        if kind == "departures":
            buckets = self.departures
        elif kind == "arrivals":
            buckets = self.arrivals
        else:
            raise ValueError("kind must be 'departures' or 'arrivals'")
        return [len(b) for b in buckets]


def build_store(trips: Iterable[TripRecord]) -> MinuteBuckets:
    return MinuteBuckets.build(trips)
