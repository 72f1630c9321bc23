import folium

from stationflow.config import ARRIVAL_COLOR, DEPARTURE_COLOR
from stationflow.traffic.scales import flow_ratio_for


def _hex_to_rgb(h):
    h = h.lstrip("#")
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


def mix_color(ratio):
    """
    ratio 1 -> departure color, 0 -> arrival color, 0.5 -> halfway.
    """
    d = _hex_to_rgb(DEPARTURE_COLOR)
    a = _hex_to_rgb(ARRIVAL_COLOR)
    rgb = [round(dc * ratio + ac * (1 - ratio)) for dc, ac in zip(d, a)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def traffic_tooltip(t):
    return f"{t.total_traffic} trips ({t.departures} departures, {t.arrivals} arrivals)"


def add_traffic_markers(m, snapshot):
    """
    One circle per station:
      - radius from the snapshot's sqrt scale
      - fill mixed between departure / arrival colors by the quantized flow ratio
    """
    for t in snapshot.stations:
        s = t.station
        if not s.has_position:
            continue

        ratio = flow_ratio_for(t.departures, t.total_traffic)

        folium.CircleMarker(
            location=[float(s.lat), float(s.lon)],
            radius=snapshot.radius(t.total_traffic),
            color="white",
            weight=1,
            fill=True,
            fill_color=mix_color(ratio),
            fill_opacity=0.8,
            opacity=0.8,
            tooltip=traffic_tooltip(t),
            popup=f"<b>{s.name or s.station_id}</b><br>Station ID: {s.station_id}",
        ).add_to(m)
