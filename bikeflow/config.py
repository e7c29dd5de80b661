# bikeflow/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_STATIONS_SOURCE = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_SOURCE = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    stations_source: str
    trips_source: str
    host: str
    port: int
    debug: bool


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from exc
    if not (1 <= port <= 65535):
        raise ValueError(f"PORT must be in 1..65535, got {port}")
    return port


def _parse_flag(raw: str, name: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_config(environ: Mapping[str, str] | None = None, *, host: str = "127.0.0.1") -> AppConfig:
    """
    Read settings from the environment:

      BIKEFLOW_STATIONS  station directory URL or path
      BIKEFLOW_TRIPS     trip log URL or path
      HOST, PORT, DEBUG  Flask server settings
    """
    env = os.environ if environ is None else environ

    return AppConfig(
        stations_source=env.get("BIKEFLOW_STATIONS", DEFAULT_STATIONS_SOURCE),
        trips_source=env.get("BIKEFLOW_TRIPS", DEFAULT_TRIPS_SOURCE),
        host=env.get("HOST", host),
        port=_parse_port(env.get("PORT", "8080")),
        debug=_parse_flag(env.get("DEBUG", ""), "DEBUG"),
    )
