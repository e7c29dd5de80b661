import folium

from bikeflow.traffic.flow import departure_flow
from bikeflow.viz.scales import radius_scale

# flow level -> fill color
FLOW_COLORS = {
    1.0: "#4682b4",  # departure-heavy (steelblue)
    0.5: "#a2875a",  # balanced
    0.0: "#ff8c00",  # arrival-heavy (darkorange)
}
NO_TRAFFIC_COLOR = "#9e9e9e"


def station_color(traffic):
    level = departure_flow(traffic)
    if level is None:
        return NO_TRAFFIC_COLOR
    return FLOW_COLORS[level]


def traffic_tooltip(traffic):
    return (
        f"{traffic.total_traffic} trips "
        f"({traffic.departures} departures, {traffic.arrivals} arrivals)"
    )


def add_station_markers(m, station_traffic, *, filtered):
    """
    One circle per station, area proportional to its traffic, colored by
    whether it mostly sends or receives bikes in the current window.
    Markers are geo-anchored, so Leaflet repositions them on pan/zoom.
    """
    max_total = max((t.total_traffic for t in station_traffic), default=0)
    scale = radius_scale(max_total, filtered)

    for t in station_traffic:
        popup = [
            f"<b>{t.name or t.id}</b>",
            f"Station: {t.id}",
            traffic_tooltip(t),
        ]

        folium.CircleMarker(
            location=[t.lat, t.lon],
            radius=scale(t.total_traffic),
            fill=True,
            fill_color=station_color(t),
            fill_opacity=0.6,
            color="white",
            weight=1,
            opacity=0.6,
            tooltip=traffic_tooltip(t),
            popup="<br>".join(popup),
        ).add_to(m)
