# bikeflow/traffic/flow.py
from __future__ import annotations

from bisect import bisect_right

# departure share -> 3 discrete levels over [0, 1]
FLOW_LEVELS = (0.0, 0.5, 1.0)
FLOW_THRESHOLDS = (1 / 3, 2 / 3)


def flow_ratio(departures: int, total: int) -> float | None:
    if total <= 0:
        return None
    return departures / total


def quantize_flow(ratio: float) -> float:
    """
    Quantize a ratio in [0, 1] to FLOW_LEVELS. A value sitting on a
    threshold goes to the upper level; out-of-domain values clamp.
    """
    return FLOW_LEVELS[bisect_right(FLOW_THRESHOLDS, ratio)]


def departure_flow(traffic) -> float | None:
    """
    Flow level of a StationTraffic, or None when it saw no trips.
    """
    ratio = flow_ratio(traffic.departures, traffic.total_traffic)
    if ratio is None:
        return None
    return quantize_flow(ratio)
