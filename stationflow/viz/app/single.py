# stationflow/viz/app/single.py
from __future__ import annotations

from pathlib import Path

from flask import Flask, abort, jsonify, request

from stationflow.traffic.session import TrafficSession
from stationflow.traffic.types import InvalidFilterError, filter_from_slider
from stationflow.util.console import done, step
from stationflow.util.stations import load_stations
from stationflow.util.trips import load_trips
from stationflow.viz.maps.render import render_map_document


def _requested_filter():
    try:
        return filter_from_slider(request.args.get("t"))
    except InvalidFilterError as e:
        abort(400, description=str(e))


def create_app(session: TrafficSession, *, title: str | None = None, bike_lanes: bool = True):
    """
    Routes:
      /              map page, ?t=<minute 0..1439> or ?t=-1 (any time)
      /api/traffic   same snapshot as JSON

    Each request computes its own snapshot from ?t, so concurrent requests
    never share a filter.
    """
    app = Flask(__name__)

    @app.route("/")
    def _index():
        snapshot = session.recompute(_requested_filter())
        return render_map_document(
            snapshot=snapshot,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/api/traffic")
    def _traffic():
        snapshot = session.recompute(_requested_filter())
        return jsonify(
            {
                "t": snapshot.slider_value,
                "label": snapshot.label,
                "departing_trips": snapshot.departing_trips,
                "arriving_trips": snapshot.arriving_trips,
                "max_traffic": snapshot.max_traffic,
                "excluded_trips": session.store.excluded,
                "stations": snapshot.to_records(),
            }
        )

    return app


def serve_traffic_map(
    *,
    trips_csv: str | Path,
    stations_file: str | Path,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bike Traffic by Time of Day",
):
    stations = load_stations(stations_file)
    loaded = load_trips(trips_csv)

    step("Bucketing trips by minute of day…")
    session = TrafficSession.from_trips(loaded.trips, stations)
    done(f"Ready: {len(stations)} stations, {session.store.trip_count:,} trips")

    app = create_app(session, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
