# bikeflow/util/sources.py
from __future__ import annotations

from pathlib import Path

import requests

FETCH_TIMEOUT_SECONDS = 30
ENCODING = "utf-8-sig"


class DataSourceError(RuntimeError):
    """Raised when a station directory or trip log cannot be fetched or parsed."""


def is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _decode(raw: bytes, source) -> str:
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise DataSourceError(f"{source} is not valid UTF-8: {exc}") from exc


def read_source_text(source: str | Path) -> str:
    """
    Return the text behind a source, which is either an http(s) URL or a
    local file path. Both are decoded as UTF-8 whatever the server claims.
    """
    if is_url(source):
        try:
            resp = requests.get(source, timeout=FETCH_TIMEOUT_SECONDS)
        except requests.RequestException as exc:
            raise DataSourceError(f"Request for {source} failed: {exc}") from exc

        if resp.status_code != 200:
            raise DataSourceError(f"Request for {source} failed: HTTP {resp.status_code}")
        return _decode(resp.content, source)

    try:
        with open(source, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise DataSourceError(f"Could not read {source}: {exc}") from exc

    return _decode(raw, source)
