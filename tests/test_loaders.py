from __future__ import annotations

import json
import textwrap

import pytest

from stationflow.util.stations import load_stations
from stationflow.util.trips import load_trips


def _write_stations(tmp_path, stations):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {"stations": stations}}), encoding="utf-8")
    return path


def test_load_stations_normalizes_ids_and_drops_unplaced(tmp_path):
    path = _write_stations(
        tmp_path,
        [
            {"station_id": 7, "name": "Seven", "lat": 42.3, "lon": -71.1, "capacity": "15"},
            {"short_name": "A32000", "name": "Short", "Lat": "42.31", "Long": "-71.12"},
            {"Number": "B1", "NAME": "Legacy", "lat": 42.32, "lon": -71.13},
            {"station_id": "9", "name": "No position", "lat": None, "lon": -71.0},
        ],
    )
    stations = load_stations(path)

    assert [s.station_id for s in stations] == ["7", "A32000", "B1"]
    assert stations[0].capacity == 15
    assert stations[1].lat == pytest.approx(42.31)
    assert stations[1].capacity is None
    assert stations[2].name == "Legacy"


def test_load_trips_skips_malformed_rows(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text(
        textwrap.dedent(
            """\
            ride_id,started_at,ended_at,start_station_id,end_station_id
            r1,2024-03-01 08:05:12,2024-03-01 08:20:40,A,B
            r2,not a time,2024-03-01 08:20:40,A,B
            r3,2024-03-01 09:00:00,2024-03-01 09:10:00,,B
            r4,2024-03-02 23:55:00,2024-03-03 00:04:00,12.0,A
            """
        ),
        encoding="utf-8",
    )
    result = load_trips(path, progress=False)

    assert result.skipped == 2
    assert len(result.trips) == 2
    first, last = result.trips
    assert (first.start_station_id, first.end_station_id) == ("A", "B")
    assert first.started_minute == 485
    assert first.ended_minute == 500
    assert last.start_station_id == "12"
    assert last.ended_minute == 4


def test_load_trips_accepts_toronto_headers(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text(
        "Trip Id,Start Station Id,Start Time,End Station Id,End Time\n"
        "1,7000,09/01/2024 00:00,7001,09/01/2024 00:15\n",
        encoding="utf-8",
    )
    result = load_trips(path, progress=False)
    assert result.skipped == 0
    assert result.trips[0].ended_minute == 15


def test_load_trips_missing_column(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text("started_at,ended_at,start_station_id\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_trips(path, progress=False)
