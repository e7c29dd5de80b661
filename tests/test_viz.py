from __future__ import annotations

import folium
import pytest

from bikeflow.traffic.aggregate import StationTraffic
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.stations import (
    FLOW_COLORS,
    NO_TRAFFIC_COLOR,
    add_station_markers,
    station_color,
    traffic_tooltip,
)
from bikeflow.viz.scales import FILTERED_RADIUS, UNFILTERED_RADIUS, format_time, radius_scale
from bikeflow.viz.widgets.overlay import on_map_wrap, replace_in_wrap


@pytest.mark.parametrize(
    "minutes, text",
    [(0, "12:00 AM"), (5, "12:05 AM"), (59, "12:59 AM"), (720, "12:00 PM"), (1020, "5:00 PM"), (1439, "11:59 PM")],
)
def test_format_time(minutes: int, text: str) -> None:
    assert format_time(minutes) == text


def test_format_time_no_filter() -> None:
    assert format_time(-1) == ""


def test_radius_scale_unfiltered() -> None:
    scale = radius_scale(100, filtered=False)

    assert scale(0) == UNFILTERED_RADIUS[0]
    assert scale(100) == UNFILTERED_RADIUS[1]
    assert scale(25) == pytest.approx(12.5)


def test_radius_scale_filtered() -> None:
    scale = radius_scale(100, filtered=True)

    assert scale(0) == FILTERED_RADIUS[0]
    assert scale(100) == FILTERED_RADIUS[1]


def test_radius_scale_zero_domain() -> None:
    assert radius_scale(0, filtered=False)(0) == UNFILTERED_RADIUS[0]
    assert radius_scale(0, filtered=True)(0) == FILTERED_RADIUS[0]


def _traffic(dep: int, arr: int) -> StationTraffic:
    return StationTraffic(id="A", lon=-71.1, lat=42.3, departures=dep, arrivals=arr)


def test_station_color() -> None:
    assert station_color(_traffic(5, 0)) == FLOW_COLORS[1.0]
    assert station_color(_traffic(2, 2)) == FLOW_COLORS[0.5]
    assert station_color(_traffic(0, 5)) == FLOW_COLORS[0.0]
    assert station_color(_traffic(0, 0)) == NO_TRAFFIC_COLOR


def test_traffic_tooltip() -> None:
    assert traffic_tooltip(_traffic(2, 3)) == "5 trips (2 departures, 3 arrivals)"


def test_add_station_markers_one_per_station() -> None:
    m = folium.Map(location=[42.36, -71.09], zoom_start=12)
    traffic = [_traffic(1, 1), _traffic(0, 0)]

    add_station_markers(m, traffic, filtered=False)

    markers = [c for c in m._children.values() if isinstance(c, folium.CircleMarker)]
    assert len(markers) == 2


def test_render_map_document(state) -> None:
    html = render_map_document(state.with_time_filter(480), title="Test map")

    assert "time-slider" in html
    assert 'value="480"' in html
    assert "8:00 AM" in html
    assert "map-legend" in html
    assert "Test map" in html
    assert "trips (" in html


def test_render_map_document_unfiltered(state) -> None:
    html = render_map_document(state)

    assert 'value="-1"' in html
    assert "(any time)" in html


def test_on_map_wrap_runs_body_inside_wrapper() -> None:
    script = on_map_wrap("  wrap.dataset.ready = 1;")

    assert script.strip().startswith("<script>")
    assert 'wrap.id = "map-wrap"' in script
    assert "wrap.dataset.ready = 1;" in script


def test_replace_in_wrap_drops_previous_element() -> None:
    js = replace_in_wrap("map-legend", "const el = document.createElement('div');")

    assert 'document.getElementById("map-legend")' in js
    assert "old.remove()" in js
    assert 'el.id = "map-legend"' in js
    assert "wrap.appendChild(el)" in js


def test_every_widget_shares_one_wrapper_bootstrap(state) -> None:
    html = render_map_document(state, title="Wrapped")

    # map title, time slider and legend each hook into the same #map-wrap
    assert html.count('wrap.id = "map-wrap"') == 3
