# bikeflow/viz/maps/render.py
import json

import folium

from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.overlay import on_map_wrap, replace_in_wrap
from bikeflow.viz.widgets.time_slider import build_time_slider

# Cambridge / Boston
CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18


def render_map_document(state, *, title: str | None = None):
    """
    Single place that assembles the full Folium map HTML document for a
    TrafficState (its time filter decides which trips are counted).
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=False,
    )

    # stations
    add_station_markers(m, state.station_traffic(), filtered=state.is_filtered)

    # title + wrap so widgets sit on-map
    title_js = ""
    if title:
        title_js = replace_in_wrap(
            "map-title",
            f"const el = document.createElement('div'); el.textContent = {json.dumps(title)};",
        )

    m.get_root().html.add_child(
        folium.Element(
            """
<style>
#map-wrap {
  position: relative;
  width: 100%;
}
#map-wrap .leaflet-container {
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}
#map-title {
  position: absolute;
  top: 12px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}
</style>
"""
            + on_map_wrap(title_js)
        )
    )

    # slider + legend (widgets), added after the wrapper script so they land inside it
    m.get_root().html.add_child(build_time_slider(state.time_filter))
    m.get_root().html.add_child(build_legend_widget())

    return m.get_root().render()
