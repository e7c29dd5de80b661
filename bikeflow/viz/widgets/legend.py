# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.overlays.stations import FLOW_COLORS, NO_TRAFFIC_COLOR
from bikeflow.viz.widgets.overlay import on_map_wrap, replace_in_wrap

LEGEND_ROWS = [
    (FLOW_COLORS[1.0], "more departures"),
    (FLOW_COLORS[0.5], "balanced"),
    (FLOW_COLORS[0.0], "more arrivals"),
    (NO_TRAFFIC_COLOR, "no trips"),
]


def build_legend_widget():
    """Floating legend for the departure/arrival marker colors."""
    rows = "".join(
        f'<div><span style="color:{color}">●</span> {label}</div>'
        for color, label in LEGEND_ROWS
    )
    build = f"const el = document.createElement('div'); el.innerHTML = `{rows}`;"

    return folium.Element(
        """
<style>
#map-legend {
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  line-height: 1.5;
  z-index: 1200;
}
</style>
"""
        + on_map_wrap(replace_in_wrap("map-legend", build))
    )
