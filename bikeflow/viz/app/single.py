# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.traffic.window import NO_FILTER
from bikeflow.viz.maps.render import render_map_document


def resolve_time_filter(raw) -> int:
    """
    Query value -> time filter. Garbage means "any time"; numbers outside
    the day are clamped onto [-1, 1439].
    """
    if raw is None:
        return NO_FILTER

    try:
        t = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return NO_FILTER

    return max(NO_FILTER, min(MINUTES_PER_DAY - 1, t))


def build_app(state, *, title: str | None = None) -> Flask:
    """
    Flask app over a loaded TrafficState.

    Routes:
      /             map document for ?t=<minute>
      /api/traffic  per-station records for ?t=<minute> as JSON
    """
    if state is None:
        raise ValueError("build_app requires a loaded TrafficState")

    app = Flask(__name__)

    @app.route("/")
    def _index():
        t_cur = resolve_time_filter(request.args.get("t"))
        return render_map_document(state.with_time_filter(t_cur), title=title)

    @app.route("/api/traffic")
    def _traffic():
        t_cur = resolve_time_filter(request.args.get("t"))
        view = state.with_time_filter(t_cur)
        return jsonify(
            {
                "time_filter": view.time_filter,
                "stations": [s.as_record() for s in view.station_traffic()],
            }
        )

    return app


def serve_traffic_map(
    *,
    state,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bluebikes traffic",
):
    app = build_app(state, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
