import json

from stationflow.traffic.types import Station, normalize_station_id


def _first(s, *keys):
    for k in keys:
        v = s.get(k)
        if v not in (None, ""):
            return v
    return None


def load_stations(path):
    """
    Load stations from a GBFS station_information.json.

    Returns Station values for stations that have an id and a position.
    Ids fall back to short_name / Number for feeds that key trips on those.
    """
    with open(path) as f:
        raw = json.load(f)["data"]["stations"]

    stations = []
    for s in raw:
        sid = normalize_station_id(_first(s, "station_id", "short_name", "Number"))
        lat = _first(s, "lat", "Lat")
        lon = _first(s, "lon", "Long")
        if sid is None or lat is None or lon is None:
            continue

        cap = s.get("capacity")
        stations.append(
            Station(
                station_id=sid,
                name=s.get("name", s.get("NAME", "")) or "",
                lat=float(lat),
                lon=float(lon),
                capacity=int(cap) if cap is not None else None,
            )
        )

    return stations
