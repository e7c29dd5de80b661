import json
from dataclasses import dataclass

from bikeflow.util.sources import DataSourceError, read_source_text


@dataclass(frozen=True)
class Station:
    id: str
    lon: float
    lat: float
    name: str = ""


def parse_stations(raw_text):
    """
    Parse a GBFS-style station directory:

      { "data": { "stations": [ {"short_name": ..., "lon": ..., "lat": ...} ] } }

    The station id is the short_name, which is what the trip log refers to.
    Entries without a short_name are skipped.
    """
    try:
        raw = json.loads(raw_text)["data"]["stations"]
    except (ValueError, KeyError, TypeError) as exc:
        raise DataSourceError(f"Station directory has an unexpected shape: {exc}") from exc

    stations = []
    for s in raw:
        sid = s.get("short_name")
        if sid is None or str(sid).strip() == "":
            continue
        try:
            lon = float(s["lon"])
            lat = float(s["lat"])
        except (KeyError, TypeError, ValueError) as exc:
            raise DataSourceError(f"Station {sid} has no usable coordinates") from exc

        stations.append(
            Station(
                id=str(sid).strip(),
                lon=lon,
                lat=lat,
                name=str(s.get("name", "")),
            )
        )

    return stations


def load_stations(source):
    """
    Load bike share stations from a URL or a local station JSON file.
    """
    return parse_stations(read_source_text(source))
