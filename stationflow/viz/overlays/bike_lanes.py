import json

import folium

from stationflow.config import BIKE_LANE_COLOR, BIKE_LANE_SOURCES


def add_bike_lanes(m, sources=None):
    """
    Bike network layers. The browser fetches the GeoJSON itself, so building
    the page never touches the network.
    """
    sources = BIKE_LANE_SOURCES if sources is None else sources
    if not sources:
        return

    urls = json.dumps(list(sources.values()))
    style = json.dumps({"color": BIKE_LANE_COLOR, "weight": 3, "opacity": 0.5})

    m.get_root().html.add_child(
        folium.Element(
            f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const map = window["{m.get_name()}"];
  if (!map) return;

  {urls}.forEach((url) => {{
    fetch(url)
      .then((r) => r.json())
      .then((data) => L.geoJSON(data, {{ style: {style} }}).addTo(map))
      .catch((e) => console.error("bike lanes:", url, e));
  }});
}});
</script>
"""
        )
    )
