import os

from stationflow.viz.app.single import serve_traffic_map

TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")
STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")


def main():
  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      trips_csv=TRIPS,
      stations_file=STATIONS,
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
      title="Bike Traffic by Time of Day",
  )


if __name__ == "__main__":
  main()
