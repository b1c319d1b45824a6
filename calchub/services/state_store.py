"""
Favorites and recent-conversion history for one converter page.

Backed by an optional key/value storage port (see infra.state_storage).
Storage is best effort: every read and write is wrapped, and on failure the
store keeps working from its in-memory copy without surfacing an error.

Persisted layout (JSON arrays):
    <namespace>:favorites  -> ["L/min", "m3/h", ...]
    <namespace>:history    -> [{"v": "10", "from": "L/min", "to": "m3/s", "ts": 1700000000000}, ...]
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .unit_registry import Registry, Unit

logger = logging.getLogger("calchub.state")

DEFAULT_MAX_FAVORITES = 8
DEFAULT_MAX_HISTORY = 10


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class HistoryEntry:
    value_text: str
    from_key: str
    to_key: str
    timestamp: int = field(default_factory=_now_ms)

    def same_request(self, other: "HistoryEntry") -> bool:
        return (
            self.value_text == other.value_text
            and self.from_key == other.from_key
            and self.to_key == other.to_key
        )

    def to_json(self) -> dict:
        return {"v": self.value_text, "from": self.from_key, "to": self.to_key, "ts": self.timestamp}

    @classmethod
    def from_json(cls, data) -> Optional["HistoryEntry"]:
        if not isinstance(data, dict):
            return None
        v, f, t, ts = data.get("v"), data.get("from"), data.get("to"), data.get("ts")
        if not all(isinstance(x, str) for x in (v, f, t)):
            return None
        if not isinstance(ts, int) or isinstance(ts, bool):
            ts = 0
        return cls(value_text=v, from_key=f, to_key=t, timestamp=ts)


class StateStore:
    def __init__(
        self,
        storage,
        namespace: str,
        default_favorites: Iterable[str] = (),
        max_favorites: int = DEFAULT_MAX_FAVORITES,
        max_history: int = DEFAULT_MAX_HISTORY,
    ):
        self.storage = storage
        self.namespace = namespace
        self.default_favorites = list(default_favorites)
        self.max_favorites = max_favorites
        self.max_history = max_history

        # Loaded lazily on first use
        self._favorites: Optional[list[str]] = None
        self._history: Optional[list[HistoryEntry]] = None

    @property
    def favorites_key(self) -> str:
        return f"{self.namespace}:favorites"

    @property
    def history_key(self) -> str:
        return f"{self.namespace}:history"

    # --- Storage access (never raises) ---

    def _read_list(self, key: str) -> Optional[list]:
        if self.storage is None:
            return None
        try:
            raw = self.storage.get(key)
        except Exception as e:
            logger.warning(f"State read failed for {key}: {e}")
            return None
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Discarding malformed state at {key}")
            return None
        return data if isinstance(data, list) else None

    def _write_list(self, key: str, value: list) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set(key, json.dumps(value))
        except Exception as e:
            logger.warning(f"State write failed for {key}: {e}")

    # --- Favorites ---

    def _load_favorites(self) -> list[str]:
        if self._favorites is None:
            stored = self._read_list(self.favorites_key)
            if stored is None:
                self._favorites = self.default_favorites[: self.max_favorites]
            else:
                keys = []
                for k in stored:
                    if isinstance(k, str) and k not in keys:
                        keys.append(k)
                self._favorites = keys[: self.max_favorites]
        return self._favorites

    def get_favorites(self) -> list[str]:
        return list(self._load_favorites())

    def is_favorite(self, key: str) -> bool:
        return key in self._load_favorites()

    def toggle_favorite(self, key: str) -> list[str]:
        """Remove if present, else append; overflow is dropped silently."""
        current = self._load_favorites()
        if key in current:
            updated = [k for k in current if k != key]
        else:
            updated = (current + [key])[: self.max_favorites]
        self._favorites = updated
        self._write_list(self.favorites_key, updated)
        return list(updated)

    def favorite_groups(self, registry: Registry) -> tuple[list[Unit], list[Unit]]:
        """Split registry units into (favorites, everything else) for pickers."""
        favs = self._load_favorites()
        favored = [registry.get(k) for k in favs if k in registry]
        others = [u for u in registry if u.key not in favs]
        return favored, others

    # --- History ---

    def _load_history(self) -> list[HistoryEntry]:
        if self._history is None:
            stored = self._read_list(self.history_key) or []
            entries = []
            for item in stored:
                entry = HistoryEntry.from_json(item)
                if entry is not None:
                    entries.append(entry)
            self._history = entries[: self.max_history]
        return self._history

    def get_history(self) -> list[HistoryEntry]:
        return list(self._load_history())

    def record_history(self, entry: HistoryEntry) -> bool:
        """Prepend unless it repeats the head. Returns True if recorded."""
        current = self._load_history()
        if current and current[0].same_request(entry):
            return False
        updated = ([entry] + current)[: self.max_history]
        self._history = updated
        self._write_list(self.history_key, [e.to_json() for e in updated])
        return True
