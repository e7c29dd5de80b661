from __future__ import annotations

from datetime import datetime

from bikeflow.util.trips import Trip


def make_trip(start: str, end: str, start_id: str = "A", end_id: str = "B") -> Trip:
    return Trip(
        started_at=datetime.fromisoformat(f"2024-03-01T{start}"),
        ended_at=datetime.fromisoformat(f"2024-03-01T{end}"),
        start_station_id=start_id,
        end_station_id=end_id,
    )
