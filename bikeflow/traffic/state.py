# bikeflow/traffic/state.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from bikeflow.traffic.aggregate import StationTraffic, aggregate_station_traffic
from bikeflow.traffic.buckets import MinuteBuckets, bucket_trips
from bikeflow.traffic.window import NO_FILTER, filter_by_minute, validate_time_filter
from bikeflow.util.stations import Station
from bikeflow.util.trips import Trip


@dataclass(frozen=True)
class TrafficState:
    """
    Everything a traffic view needs: the station directory, the trips
    bucketed by minute-of-day, and the current time filter.

    Read-only once built; changing the filter returns a new state.
    """
    stations: Tuple[Station, ...]
    buckets: MinuteBuckets
    trip_count: int
    time_filter: int = NO_FILTER

    @classmethod
    def build(cls, stations: Iterable[Station], trips: Iterable[Trip], *, progress: bool = False):
        trips = list(trips)
        return cls(
            stations=tuple(stations),
            buckets=bucket_trips(trips, progress=progress),
            trip_count=len(trips),
        )

    @property
    def is_filtered(self) -> bool:
        return self.time_filter != NO_FILTER

    def with_time_filter(self, minute: int) -> "TrafficState":
        return replace(self, time_filter=validate_time_filter(minute))

    def selected_departures(self) -> List[Trip]:
        return filter_by_minute(self.buckets.departures, self.time_filter)

    def selected_arrivals(self) -> List[Trip]:
        return filter_by_minute(self.buckets.arrivals, self.time_filter)

    def station_traffic(self) -> List[StationTraffic]:
        return aggregate_station_traffic(
            self.stations,
            self.selected_departures(),
            self.selected_arrivals(),
        )
