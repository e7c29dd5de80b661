# bikeflow/traffic/aggregate.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List

from bikeflow.util.stations import Station
from bikeflow.util.trips import Trip


@dataclass(frozen=True)
class StationTraffic:
    id: str
    lon: float
    lat: float
    departures: int
    arrivals: int
    name: str = ""

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals

    def as_record(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "lon": self.lon,
            "lat": self.lat,
            "departures": self.departures,
            "arrivals": self.arrivals,
            "totalTraffic": self.total_traffic,
        }


def aggregate_station_traffic(
    stations: Iterable[Station],
    departures: Iterable[Trip],
    arrivals: Iterable[Trip],
) -> List[StationTraffic]:
    """
    Per-station departure/arrival counts over a selection of trips.

    Every station is returned (zeros included), in directory order.
    Trips pointing at ids that are not in the directory are dropped.
    """
    dep_counts = Counter(t.start_station_id for t in departures)
    arr_counts = Counter(t.end_station_id for t in arrivals)

    return [
        StationTraffic(
            id=s.id,
            lon=s.lon,
            lat=s.lat,
            departures=dep_counts.get(s.id, 0),
            arrivals=arr_counts.get(s.id, 0),
            name=s.name,
        )
        for s in stations
    ]
