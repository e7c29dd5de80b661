from __future__ import annotations

import pytest

from bikeflow.traffic.state import TrafficState
from bikeflow.util.stations import Station
from bikeflow.util.trips import Trip
from tests.helpers import make_trip


@pytest.fixture()
def stations() -> list[Station]:
    return [
        Station(id="A", lon=-71.10, lat=42.36, name="Alpha"),
        Station(id="B", lon=-71.09, lat=42.37, name="Bravo"),
        Station(id="C", lon=-71.08, lat=42.35, name="Charlie"),
    ]


@pytest.fixture()
def trips() -> list[Trip]:
    return [
        make_trip("00:05:00", "00:50:00", "A", "B"),
        make_trip("08:00:30", "08:20:59", "B", "A"),
        make_trip("08:10:00", "08:40:00", "A", "C"),
        make_trip("23:30:00", "00:10:00", "C", "A"),
        make_trip("12:00:00", "12:15:00", "A", "ZZZ"),
    ]


@pytest.fixture()
def state(stations, trips) -> TrafficState:
    return TrafficState.build(stations, trips)
