from __future__ import annotations

import math
import threading

import pytest

from stationflow.traffic.session import TrafficSession
from stationflow.traffic.types import (
    CenteredAt,
    InvalidFilterError,
    Station,
    TripRecord,
    Unfiltered,
    filter_from_slider,
)

from conftest import at, trip


@pytest.fixture
def session(stations, morning_trip):
    return TrafficSession.from_trips(
        [morning_trip, trip("B", "C", at(17, 0), at(17, 20))],
        stations,
    )


def test_recompute_unfiltered(session):
    snap = session.recompute(Unfiltered())
    assert snap.label == "(any time)"
    assert snap.slider_value == -1
    assert snap.departing_trips == 2
    assert snap.radius.range_ == (0.0, 25.0)
    assert [t.total_traffic for t in snap.stations] == [1, 2, 1]


def test_recompute_centered(session):
    snap = session.recompute(CenteredAt(485))
    assert snap.label == "8:05 AM"
    assert snap.departing_trips == 1
    assert snap.arriving_trips == 1
    assert snap.radius.range_ == (3.0, 50.0)
    assert snap.max_traffic == 1


def test_to_records(session):
    rows = session.recompute(Unfiltered()).to_records()
    b = next(r for r in rows if r["station_id"] == "B")
    assert b["departures"] == 1
    assert b["arrivals"] == 1
    assert b["radius"] == pytest.approx(25)
    assert b["flow_ratio"] == 0.5


def test_update_keeps_latest_filter(session):
    assert session.filter_state == Unfiltered()
    session.update_from_slider(485)
    session.update_from_slider("1020")
    assert session.filter_state == CenteredAt(1020)
    assert session.current().label == "5:00 PM"

    session.update_from_slider(-1)
    assert session.current().filter_state == Unfiltered()


def test_current_computes_lazily(session):
    assert session.current().departing_trips == 2


def test_concurrent_updates_leave_consistent_state(session):
    minutes = list(range(0, 1440, 37))
    threads = [threading.Thread(target=session.update, args=(CenteredAt(m),)) for m in minutes]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert session.current().filter_state == session.filter_state
    assert session.filter_state.minute in minutes


@pytest.mark.parametrize("value", [None, -1, "-1"])
def test_filter_from_slider_any_time(value):
    assert filter_from_slider(value) == Unfiltered()


@pytest.mark.parametrize(
    "value",
    [1440, "-2", "abc", 8.5, "8.5", True, False, float("inf"), float("-inf"), float("nan")],
)
def test_filter_from_slider_rejects_bad_values(value):
    with pytest.raises(InvalidFilterError):
        filter_from_slider(value)


def test_bad_slider_value_keeps_previous_filter(session):
    session.update_from_slider(485)
    with pytest.raises(InvalidFilterError):
        session.update_from_slider(5000)
    assert session.filter_state == CenteredAt(485)


def test_numeric_zero_station_gets_its_trip():
    stations = [Station(station_id=0), Station(station_id=1)]
    session = TrafficSession.from_trips([TripRecord(0, 1, at(8, 5), at(8, 20))], stations)

    snap = session.recompute(Unfiltered())
    assert [(t.departures, t.arrivals) for t in snap.stations] == [(1, 0), (0, 1)]


def test_filtered_radius_uses_all_day_domain():
    # busiest station: 42 departures spread over the evening
    trips = [trip("A", "B", at(18, m), at(18, m)) for m in range(42)]
    trips.append(trip("C", "B", at(8, 0), at(8, 10)))
    stations = [Station(station_id=s) for s in ("A", "B", "C")]
    session = TrafficSession.from_trips(trips, stations)

    assert session.all_day_max == 43

    snap = session.recompute(CenteredAt(480))
    assert snap.radius.domain_max == 43
    assert snap.radius(1) == pytest.approx(3 + 47 * math.sqrt(1 / 43))
    assert snap.radius(1) < 15

    evening = session.recompute(CenteredAt(1080))
    assert evening.radius.domain_max == 43


def test_window_trip_counts_match_selection(session):
    snap = session.recompute(CenteredAt(1020))
    assert (snap.departing_trips, snap.arriving_trips) == (1, 1)
