from __future__ import annotations

import pytest

from stationflow.traffic.session import TrafficSession
from stationflow.viz.app.single import create_app
from stationflow.viz.overlays.stations import mix_color

from conftest import trip, at


@pytest.fixture
def client(stations, morning_trip):
    session = TrafficSession.from_trips(
        [morning_trip, trip("B", "A", at(18, 0), at(18, 30))],
        stations,
    )
    app = create_app(session, title="Test Map")
    app.config["TESTING"] = True
    return app.test_client()


def test_api_traffic_unfiltered(client):
    resp = client.get("/api/traffic")
    assert resp.status_code == 200
    data = resp.get_json()

    assert data["t"] == -1
    assert data["label"] == "(any time)"
    by_id = {s["station_id"]: s for s in data["stations"]}
    assert by_id["A"]["total_traffic"] == 2
    assert by_id["A"]["flow_ratio"] == 0.5
    assert by_id["C"]["total_traffic"] == 0
    assert by_id["A"]["radius"] == pytest.approx(25)


def test_api_traffic_filtered(client):
    data = client.get("/api/traffic?t=1080").get_json()
    assert data["label"] == "6:00 PM"
    by_id = {s["station_id"]: s for s in data["stations"]}
    assert (by_id["B"]["departures"], by_id["B"]["arrivals"]) == (1, 0)
    assert by_id["B"]["flow_ratio"] == 1.0
    assert by_id["A"]["flow_ratio"] == 0.0
    assert by_id["C"]["radius"] == pytest.approx(3)


@pytest.mark.parametrize("t", ["1440", "-5", "noon"])
def test_invalid_time_is_a_bad_request(client, t):
    assert client.get(f"/api/traffic?t={t}").status_code == 400
    assert client.get(f"/?t={t}").status_code == 400


def test_map_page_renders(client):
    resp = client.get("/?t=485")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "time-slider" in html
    assert "8:05 AM" in html
    assert "Test Map" in html
    assert "1 trips (1 departures, 0 arrivals)" in html


def test_mix_color_endpoints():
    assert mix_color(1.0) == "#4682b4"
    assert mix_color(0.0) == "#ff8c00"
