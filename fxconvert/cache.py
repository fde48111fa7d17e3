"""Rate caches keyed by currency pair."""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from fxconvert.models import CacheData
from fxconvert.storage import read_file, save_file

CACHE_TTL = timedelta(minutes=10)


class Cache(ABC):
    """A store of conversion rates."""

    @abstractmethod
    def get(self, key: str) -> float | None:
        """Return the cached rate for key, or None."""

    @abstractmethod
    def set(self, key: str, value: float) -> None:
        """Store a rate under key."""


def _format_rfc3339(moment: datetime) -> str:
    text = moment.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _is_expired(expiration_date: str, now: datetime) -> bool:
    text = expiration_date[:-1] + "+00:00" if expiration_date.endswith("Z") else expiration_date
    try:
        expiry = datetime.fromisoformat(text)
    except ValueError:
        return True
    if expiry.tzinfo is None:
        expiry = expiry.astimezone()
    return expiry < now


class FileCache(Cache):
    """A cache kept as a JSON object in a file; entries live ten minutes."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def get(self, key: str) -> float | None:
        entries = self._read()
        if entries is None or key not in entries:
            return None
        entry = entries[key]
        if _is_expired(entry.expiration_date, datetime.now(timezone.utc)):
            del entries[key]
            self._write(entries)
            return None
        return entry.currency

    def set(self, key: str, value: float) -> None:
        entries = self._read() or {}
        expiry = datetime.now().astimezone() + CACHE_TTL
        entries[key] = CacheData(currency=value, expiration_date=_format_rfc3339(expiry))
        self._write(entries)

    def _read(self) -> dict[str, CacheData] | None:
        raw = read_file(self.path)
        if raw is None:
            return None
        data = json.loads(raw)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"cache file {self.path} does not hold a JSON object")
        return {key: CacheData.from_dict(value) for key, value in data.items()}

    def _write(self, entries: dict[str, CacheData]) -> None:
        payload = {key: entry.to_dict() for key, entry in entries.items()}
        text = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        save_file(self.path, text.encode("utf-8"))