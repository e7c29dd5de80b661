# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.traffic.window import NO_FILTER
from bikeflow.viz.scales import format_time
from bikeflow.viz.widgets.overlay import on_map_wrap


def build_time_slider(time_filter, *, param="t"):
    """
    Time-of-day slider over [-1, 1439]; -1 is "any time".

    Moving the slider updates the label live; releasing it reloads the
    page with ?t=<minute> so the server recomputes station traffic.
    """
    label = format_time(time_filter)
    any_display = "inline" if time_filter == NO_FILTER else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 260px;
  display: block;
}}
#time-filter time {{
  font-weight: 600;
}}
#any-time {{
  color: #666;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label for="time-slider">Filter by time:</label>
  <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}"
         value="{int(time_filter)}">
  <time id="selected-time">{label}</time>
  <em id="any-time" style="display:{any_display}">(any time)</em>
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

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    if (t === {NO_FILTER}) {{
      selected.textContent = "";
      anyTime.style.display = "inline";
    }} else {{
      selected.textContent = formatTime(t);
      anyTime.style.display = "none";
    }}
  }});

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("{param}", slider.value);
    window.location.href = url.toString();
  }});
}});
</script>
"""
        + on_map_wrap(
            '  const box = document.getElementById("time-filter");\n'
            "  if (box) wrap.appendChild(box);"
        )
    )
