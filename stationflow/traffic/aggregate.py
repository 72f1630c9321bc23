# stationflow/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from stationflow.config import WINDOW_HALF_WIDTH
from stationflow.traffic.buckets import MinuteBuckets
from stationflow.traffic.types import (
    FilterState,
    Station,
    StationTraffic,
    TripRecord,
    normalize_station_id,
)
from stationflow.traffic.window import select_window


def count_by_station(trips: Iterable[TripRecord], key: str) -> Dict[str, int]:
    """
    key: "start_station_id" (departures) or "end_station_id" (arrivals)
    """
    counts: Dict[str, int] = {}
    for trip in trips:
        sid = normalize_station_id(getattr(trip, key))
        if sid is None:
            continue
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def aggregate(
    trips: Iterable[TripRecord],
    stations: Sequence[Station],
    arriving: Iterable[TripRecord] | None = None,
) -> List[StationTraffic]:
    """
    Departure / arrival counts for every station, in input order.

    trips are grouped by start station; arriving (defaults to trips) by end
    station. Stations without trips get zeros.
    """
    trips = list(trips)
    departures = count_by_station(trips, "start_station_id")
    arrivals = count_by_station(trips if arriving is None else arriving, "end_station_id")

    out: List[StationTraffic] = []
    for s in stations:
        sid = normalize_station_id(s.station_id)
        out.append(
            StationTraffic(
                station=s,
                departures=departures.get(sid, 0),
                arrivals=arrivals.get(sid, 0),
            )
        )
    return out


def compute_station_traffic(
    store: MinuteBuckets,
    stations: Sequence[Station],
    filter_state: FilterState,
    half_width: int = WINDOW_HALF_WIDTH,
) -> List[StationTraffic]:
    departing = select_window(store.departures, filter_state, half_width)
    arriving = select_window(store.arrivals, filter_state, half_width)
    return aggregate(departing, stations, arriving=arriving)
