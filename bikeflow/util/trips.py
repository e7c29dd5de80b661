# bikeflow/util/trips.py
from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime
from typing import List

import pandas as pd

from bikeflow.util.sources import DataSourceError, read_source_text

REQUIRED_COLUMNS = ("started_at", "ended_at", "start_station_id", "end_station_id")


@dataclass(frozen=True)
class Trip:
    started_at: datetime
    ended_at: datetime
    start_station_id: str
    end_station_id: str


def _to_timestamp(value):
    try:
        return pd.Timestamp(value)
    except (TypeError, ValueError, OverflowError):
        return pd.NaT


def _parse_times(df: pd.DataFrame, col: str) -> pd.Series:
    """
    Parse a timestamp column, keeping each value's own wall-clock time.

    Logs that cross a DST change mix UTC offsets (-05:00 / -04:00), which
    pandas refuses to parse as one column, so those are parsed per value.
    """
    try:
        parsed = pd.to_datetime(df[col], errors="coerce", format="mixed")
    except (TypeError, ValueError):
        parsed = pd.Series(
            [_to_timestamp(v) for v in df[col]],
            index=df.index,
            dtype=object,
        )

    bad = parsed.isna()
    if bad.any():
        row = int(bad.to_numpy().nonzero()[0][0])
        raise DataSourceError(
            f"Unparseable {col} value {df[col].iloc[row]!r} at data row {row + 1}"
        )
    return parsed


def parse_trips_csv(text: str) -> List[Trip]:
    """
    Parse a trip log CSV with columns:

      started_at, ended_at, start_station_id, end_station_id, ...

    Station ids stay strings so they compare exactly against the station
    directory. Any timestamp that does not parse is an error.
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
        )
    except ValueError as exc:
        raise DataSourceError(f"Trip log is not valid CSV: {exc}") from exc
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataSourceError(f"Trip log missing columns: {', '.join(missing)}")

    started = _parse_times(df, "started_at")
    ended = _parse_times(df, "ended_at")

    trips = []
    for s0, s1, t0, t1 in zip(
        df["start_station_id"],
        df["end_station_id"],
        started,
        ended,
    ):
        trips.append(
            Trip(
                started_at=pd.Timestamp(t0).to_pydatetime(),
                ended_at=pd.Timestamp(t1).to_pydatetime(),
                start_station_id=str(s0).strip(),
                end_station_id=str(s1).strip(),
            )
        )

    return trips


def load_trips(source) -> List[Trip]:
    """
    Load the trip log from a URL or a local CSV path.
    """
    return parse_trips_csv(read_source_text(source))
