# stationflow/viz/widgets/time_slider.py
import folium

from stationflow.config import ANY_TIME, ANY_TIME_LABEL, MINUTES_PER_DAY


def build_time_slider(snapshot):
    """
    Time-of-day slider (-1 = any time, 0..1439 = minute of day).

    Releasing the slider reloads the page with ?t=<minute>; while dragging
    only the label is updated.
    """
    value = snapshot.slider_value
    selected = "" if value == ANY_TIME else snapshot.label
    any_display = "block" if value == ANY_TIME else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-size: 13px;
}}
#time-filter input {{
  width: 260px;
}}
#time-filter time, #time-filter em {{
  display: block;
  text-align: right;
}}
#time-filter em {{
  color: #888;
}}
</style>

<div id="time-filter">
  <label>Filter by time:
    <input id="time-slider" type="range" min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}"
           value="{value}">
  </label>
  <time id="selected-time">{selected}</time>
  <em id="any-time" style="display:{any_display}">{ANY_TIME_LABEL}</em>
</div>

<script>
function formatTime(minutes) {{
  const date = new Date(0, 0, 0, 0, minutes);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  const wrap = document.getElementById("map-wrap");
  if (wrap) wrap.appendChild(document.getElementById("time-filter"));

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    selected.textContent = t === {ANY_TIME} ? "" : formatTime(t);
    anyTime.style.display = t === {ANY_TIME} ? "block" : "none";
  }});

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("t", slider.value);
    window.location.href = url.toString();
  }});
}});
</script>
"""
    )
