from __future__ import annotations

from datetime import datetime

import pytest

from stationflow.traffic.types import Station, TripRecord


def at(hh: int, mm: int, day: int = 1) -> datetime:
    return datetime(2024, 3, day, hh, mm)


def trip(start: str, end: str, started: datetime, ended: datetime) -> TripRecord:
    return TripRecord(
        start_station_id=start,
        end_station_id=end,
        started_at=started,
        ended_at=ended,
    )


@pytest.fixture
def stations():
    return [
        Station(station_id="A", name="Alpha", lat=42.36, lon=-71.09),
        Station(station_id="B", name="Bravo", lat=42.37, lon=-71.10),
        Station(station_id="C", name="Charlie", lat=42.35, lon=-71.08),
    ]


@pytest.fixture
def morning_trip():
    return trip("A", "B", at(8, 5), at(8, 20))
