# main.py
import os

from stationflow.traffic.session import TrafficSession
from stationflow.traffic.scales import flow_ratio_for
from stationflow.util.stations import load_stations
from stationflow.util.trips import load_trips


TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")
STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")
TIME = os.environ.get("TIME", "-1")  # minute of day, or -1 for any time
TOP_N = int(os.environ.get("TOP_N", "15"))

FLOW_NAMES = {0.0: "arrivals", 0.5: "balanced", 1.0: "departures"}


def main():
    stations = load_stations(STATIONS)
    loaded = load_trips(TRIPS)

    session = TrafficSession.from_trips(loaded.trips, stations)
    snapshot = session.update_from_slider(TIME)

    busiest = sorted(snapshot.stations, key=lambda t: t.total_traffic, reverse=True)

    print(f"\nBusiest stations ({snapshot.label}):\n")
    for i, t in enumerate(busiest[:TOP_N], 1):
        flow = FLOW_NAMES[flow_ratio_for(t.departures, t.total_traffic)]
        print(
            f"{i:02d}. "
            f"{t.station.name or t.station_id:40.40s} | "
            f"{t.total_traffic:6d} trips "
            f"({t.departures} out, {t.arrivals} in) | "
            f"r={snapshot.radius(t.total_traffic):5.1f} | {flow}"
        )

    print(
        f"\nTrips in window: {snapshot.departing_trips} departing, "
        f"{snapshot.arriving_trips} arriving "
        f"(skipped at load: {loaded.skipped}, excluded at build: {session.store.excluded})"
    )


if __name__ == "__main__":
    main()
