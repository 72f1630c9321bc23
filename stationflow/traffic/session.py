# stationflow/traffic/session.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from stationflow.config import ANY_TIME_LABEL, WINDOW_HALF_WIDTH
from stationflow.traffic.aggregate import compute_station_traffic
from stationflow.traffic.buckets import MinuteBuckets
from stationflow.traffic.clock import format_clock
from stationflow.traffic.scales import RadiusScale, flow_ratio_for, radius_scale_for
from stationflow.traffic.types import (
    CenteredAt,
    FilterState,
    Station,
    StationTraffic,
    TripRecord,
    Unfiltered,
    filter_from_slider,
)
from stationflow.traffic.window import window_trip_count


@dataclass(frozen=True)
class TrafficSnapshot:
    filter_state: FilterState
    stations: List[StationTraffic]
    radius: RadiusScale
    departing_trips: int
    arriving_trips: int

    @property
    def label(self) -> str:
        if isinstance(self.filter_state, CenteredAt):
            return format_clock(self.filter_state.minute)
        return ANY_TIME_LABEL

    @property
    def slider_value(self) -> int:
        if isinstance(self.filter_state, CenteredAt):
            return self.filter_state.minute
        return -1

    @property
    def max_traffic(self) -> int:
        return max((t.total_traffic for t in self.stations), default=0)

    def to_records(self) -> List[Dict]:
        rows = []
        for t in self.stations:
            rows.append({
                "station_id": t.station_id,
                "name": t.station.name,
                "lat": t.station.lat,
                "lon": t.station.lon,
                "departures": t.departures,
                "arrivals": t.arrivals,
                "total_traffic": t.total_traffic,
                "radius": self.radius(t.total_traffic),
                "flow_ratio": flow_ratio_for(t.departures, t.total_traffic),
            })
        return rows


class TrafficSession:
    """
    One analysis session: the minute buckets (built once, read-only) plus the
    station list. recompute() is pure; update_from_slider() also remembers
    the latest filter and snapshot for the interaction loop.
    """

    def __init__(
        self,
        store: MinuteBuckets,
        stations: Sequence[Station],
        *,
        half_width: int = WINDOW_HALF_WIDTH,
    ):
        self.store = store
        self.stations = list(stations)
        self.half_width = int(half_width)

        self._lock = threading.Lock()
        self._filter: FilterState = Unfiltered()
        self._snapshot: TrafficSnapshot | None = None

        # radius domain for every filter: busiest station over the whole day
        all_day = compute_station_traffic(store, self.stations, Unfiltered())
        self.all_day_max = max((t.total_traffic for t in all_day), default=0)

    @classmethod
    def from_trips(
        cls,
        trips: Iterable[TripRecord],
        stations: Sequence[Station],
        **kwargs,
    ) -> "TrafficSession":
        return cls(MinuteBuckets.build(trips), stations, **kwargs)

    def recompute(self, filter_state: FilterState) -> TrafficSnapshot:
        traffic = compute_station_traffic(
            self.store, self.stations, filter_state, self.half_width
        )

        return TrafficSnapshot(
            filter_state=filter_state,
            stations=traffic,
            radius=radius_scale_for(traffic, filter_state, domain_max=self.all_day_max),
            departing_trips=window_trip_count(
                self.store.departures, filter_state, self.half_width
            ),
            arriving_trips=window_trip_count(
                self.store.arrivals, filter_state, self.half_width
            ),
        )

    @property
    def filter_state(self) -> FilterState:
        return self._filter

    def current(self) -> TrafficSnapshot:
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self.recompute(self._filter)
            return self._snapshot

    def update(self, filter_state: FilterState) -> TrafficSnapshot:
        # serialized: the last call to finish is the filter that sticks
        with self._lock:
            self._filter = filter_state
            self._snapshot = self.recompute(filter_state)
            return self._snapshot

    def update_from_slider(self, value) -> TrafficSnapshot:
        return self.update(filter_from_slider(value))
