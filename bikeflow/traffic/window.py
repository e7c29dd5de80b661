# bikeflow/traffic/window.py
from __future__ import annotations

from typing import List, Sequence

from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.util.trips import Trip

NO_FILTER = -1
WINDOW_MINUTES = 60


def validate_time_filter(minute) -> int:
    minute = int(minute)
    if minute != NO_FILTER and not (0 <= minute < MINUTES_PER_DAY):
        raise ValueError(
            f"time filter must be -1 or a minute in [0, {MINUTES_PER_DAY - 1}], got {minute}"
        )
    return minute


def window_buckets(minute: int) -> List[int]:
    """
    Bucket indices selected for a time filter, in selection order.

    The window is [minute - 60, minute + 60) around the day, so it wraps
    past midnight: minute=30 selects 1410..1439 then 0..89.
    """
    minute = validate_time_filter(minute)
    if minute == NO_FILTER:
        return list(range(MINUTES_PER_DAY))

    min_minute = (minute - WINDOW_MINUTES + MINUTES_PER_DAY) % MINUTES_PER_DAY
    max_minute = (minute + WINDOW_MINUTES) % MINUTES_PER_DAY

    if min_minute > max_minute:
        return list(range(min_minute, MINUTES_PER_DAY)) + list(range(0, max_minute))
    return list(range(min_minute, max_minute))


def filter_by_minute(trips_by_minute: Sequence[Sequence[Trip]], minute: int) -> List[Trip]:
    """
    Flatten the buckets inside the window around `minute`
    (or every bucket when minute == NO_FILTER).
    """
    if len(trips_by_minute) != MINUTES_PER_DAY:
        raise ValueError(f"expected {MINUTES_PER_DAY} buckets, got {len(trips_by_minute)}")

    out: List[Trip] = []
    for idx in window_buckets(minute):
        out.extend(trips_by_minute[idx])
    return out
