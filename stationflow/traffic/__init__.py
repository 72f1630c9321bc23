from stationflow.traffic.aggregate import aggregate, compute_station_traffic, count_by_station
from stationflow.traffic.buckets import MinuteBuckets, build_store
from stationflow.traffic.clock import format_clock, minute_of_day
from stationflow.traffic.scales import RadiusScale, flow_ratio_for, quantize_flow, radius_scale_for
from stationflow.traffic.session import TrafficSession, TrafficSnapshot
from stationflow.traffic.types import (
    CenteredAt,
    FilterState,
    InvalidFilterError,
    Station,
    StationTraffic,
    TripRecord,
    Unfiltered,
    filter_from_slider,
    normalize_station_id,
)
from stationflow.traffic.window import select_window, window_minutes, window_trip_count

__all__ = [
    "aggregate",
    "compute_station_traffic",
    "count_by_station",
    "MinuteBuckets",
    "build_store",
    "format_clock",
    "minute_of_day",
    "RadiusScale",
    "flow_ratio_for",
    "quantize_flow",
    "radius_scale_for",
    "TrafficSession",
    "TrafficSnapshot",
    "CenteredAt",
    "FilterState",
    "InvalidFilterError",
    "Station",
    "StationTraffic",
    "TripRecord",
    "Unfiltered",
    "filter_from_slider",
    "normalize_station_id",
    "select_window",
    "window_minutes",
    "window_trip_count",
]
