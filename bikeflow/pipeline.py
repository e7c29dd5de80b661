# bikeflow/pipeline.py
from __future__ import annotations

import sys
from dataclasses import dataclass

from colorama import Fore, Style

from bikeflow.traffic.state import TrafficState
from bikeflow.util.sources import DataSourceError
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips

STAGE_STATIONS = "stations"
STAGE_TRIPS = "trips"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading the station directory and then the trip log."""

    state: TrafficState | None
    error: str | None = None
    stage: str | None = None

    @property
    def ok(self) -> bool:
        return self.state is not None and self.error is None


def _fail(stage: str, exc: Exception) -> LoadResult:
    print(
        f"{Fore.RED}Error loading {stage}: {exc}{Style.RESET_ALL}",
        file=sys.stderr,
    )
    return LoadResult(state=None, error=str(exc), stage=stage)


def load_traffic_state(stations_source, trips_source, *, progress: bool = True) -> LoadResult:
    """
    Load the station directory, then the trip log, then bucket the trips.

    The trip log is only requested once the directory has loaded. Nothing
    is retried and a failure at either stage yields no state at all.
    """
    print(f"{Fore.CYAN}Loading station directory…{Style.RESET_ALL}")
    try:
        stations = load_stations(stations_source)
    except DataSourceError as exc:
        return _fail(STAGE_STATIONS, exc)

    print(f"{Fore.CYAN}Loading trip log…{Style.RESET_ALL}")
    try:
        trips = load_trips(trips_source)
    except DataSourceError as exc:
        return _fail(STAGE_TRIPS, exc)

    state = TrafficState.build(stations, trips, progress=progress)

    print(
        f"{Fore.GREEN}Loaded {len(state.stations)} stations and "
        f"{state.trip_count} trips.{Style.RESET_ALL}"
    )
    return LoadResult(state=state)
