# stationflow/viz/maps/render.py
import folium

from stationflow.config import CENTER_LAT, CENTER_LON, MAX_ZOOM, MIN_ZOOM, ZOOM_START
from stationflow.viz.overlays.bike_lanes import add_bike_lanes
from stationflow.viz.overlays.stations import add_traffic_markers
from stationflow.viz.widgets.legend import build_legend_widget
from stationflow.viz.widgets.time_slider import build_time_slider


def render_map_document(
    *,
    snapshot,
    title: str | None = None,
    bike_lanes: bool = True,
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    if bike_lanes:
        add_bike_lanes(m)

    # stations
    add_traffic_markers(m, snapshot)

    # legend + slider (widgets)
    m.get_root().html.add_child(build_legend_widget())
    m.get_root().html.add_child(build_time_slider(snapshot))

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%r;wrap.appendChild(t);" % title if title else ""}

  const slider = document.getElementById("time-filter");
  if (slider) wrap.appendChild(slider);
}});
</script>
"""
        )
    )

    return m.get_root().render()
