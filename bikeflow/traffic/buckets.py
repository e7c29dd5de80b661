# bikeflow/traffic/buckets.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from tqdm import tqdm

from bikeflow.util.trips import Trip

MINUTES_PER_DAY = 1440


def minutes_since_midnight(ts) -> int:
    """
    Minute-of-day of a timestamp (hour * 60 + minute). The date, seconds
    and sub-seconds are discarded.
    """
    try:
        return int(ts.hour) * 60 + int(ts.minute)
    except AttributeError as exc:
        raise TypeError(f"Expected a timestamp, got {type(ts).__name__}") from exc


@dataclass(frozen=True)
class MinuteBuckets:
    """
    departures[m]: trips that started at minute-of-day m
    arrivals[m]:   trips that ended at minute-of-day m
    """
    departures: List[List[Trip]]
    arrivals: List[List[Trip]]

    def __len__(self) -> int:
        return MINUTES_PER_DAY


def bucket_trips(trips: Iterable[Trip], *, progress: bool = False) -> MinuteBuckets:
    departures: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
    arrivals: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]

    it = tqdm(trips, desc="Bucketing trips", unit="trip") if progress else trips
    for trip in it:
        departures[minutes_since_midnight(trip.started_at)].append(trip)
        arrivals[minutes_since_midnight(trip.ended_at)].append(trip)

    return MinuteBuckets(departures=departures, arrivals=arrivals)
