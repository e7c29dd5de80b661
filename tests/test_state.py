from __future__ import annotations

import pytest

from bikeflow.traffic.state import TrafficState
from bikeflow.traffic.window import NO_FILTER
from tests.helpers import make_trip


def _by_id(state: TrafficState) -> dict:
    return {t.id: t for t in state.station_traffic()}


def test_build_counts_trips(state, trips) -> None:
    assert state.trip_count == len(trips)
    assert state.time_filter == NO_FILTER
    assert not state.is_filtered


def test_unfiltered_selection_is_everything(state, trips) -> None:
    assert len(state.selected_departures()) == len(trips)
    assert len(state.selected_arrivals()) == len(trips)


def test_unfiltered_total_traffic_is_twice_known_trips(stations) -> None:
    trips = [
        make_trip("00:05:00", "00:50:00", "A", "B"),
        make_trip("08:00:00", "08:20:00", "B", "C"),
        make_trip("17:00:00", "17:30:00", "C", "A"),
    ]
    state = TrafficState.build(stations, trips)

    assert sum(t.total_traffic for t in state.station_traffic()) == 2 * len(trips)


def test_unknown_station_trip_only_counts_known_end(state) -> None:
    # the 12:00 A -> ZZZ trip contributes one departure and nothing else
    traffic = state.with_time_filter(720).station_traffic()

    assert sum(t.departures for t in traffic) == 1
    assert sum(t.arrivals for t in traffic) == 0


def test_morning_window(state) -> None:
    traffic = _by_id(state.with_time_filter(480))

    assert traffic["A"].departures == 1
    assert traffic["B"].departures == 1
    assert traffic["A"].arrivals == 1
    assert traffic["C"].arrivals == 1
    assert traffic["C"].departures == 0


def test_midnight_window_wraps(state) -> None:
    traffic = _by_id(state.with_time_filter(0))

    # 23:30 departure from C and 00:05 departure from A are both in [23:00, 01:00)
    assert traffic["C"].departures == 1
    assert traffic["A"].departures == 1
    assert traffic["A"].arrivals == 1
    assert traffic["B"].arrivals == 1


def test_with_time_filter_returns_new_state(state) -> None:
    filtered = state.with_time_filter(700)

    assert filtered is not state
    assert filtered.time_filter == 700
    assert filtered.is_filtered
    assert state.time_filter == NO_FILTER
    assert filtered.buckets is state.buckets


def test_with_time_filter_rejects_out_of_range(state) -> None:
    with pytest.raises(ValueError):
        state.with_time_filter(1440)


def test_quiet_window_has_zero_traffic(state) -> None:
    traffic = state.with_time_filter(240).station_traffic()
    assert all(t.total_traffic == 0 for t in traffic)
