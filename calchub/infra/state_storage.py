"""
Key/value storage adapters for converter state (favorites, history).

All adapters implement the same tiny port:

    get(key) -> str | None
    set(key, value: str)
    delete(key)

Any of them may raise; StateStore treats every failure as "storage
unavailable" and carries on in memory. `detect_storage` runs a write/delete
probe so an unusable backend can be dropped up front.
"""

import logging
from typing import Optional, Protocol

from redis import Redis
from sqlalchemy.orm import Session

from ..models import StateEntry

logger = logging.getLogger("calchub.storage")

PROBE_KEY = "__chk__"


class StoragePort(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local dict. Used for `state_backend = "memory"` and tests."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class PrefixedStorage:
    """Scopes every key under a prefix (e.g. per client)."""

    def __init__(self, inner: StoragePort, prefix: str):
        self.inner = inner
        self.prefix = prefix

    def _k(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    def get(self, key: str) -> Optional[str]:
        return self.inner.get(self._k(key))

    def set(self, key: str, value: str) -> None:
        self.inner.set(self._k(key), value)

    def delete(self, key: str) -> None:
        self.inner.delete(self._k(key))


class RedisStorage:
    def __init__(self, client: Redis):
        self.client = client

    def get(self, key: str) -> Optional[str]:
        return self.client.get(key)

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def delete(self, key: str) -> None:
        self.client.delete(key)


class SqlStorage:
    """Rows in `state_entries`; each write commits immediately."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.get(StateEntry, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        try:
            row = self.db.get(StateEntry, key)
            if row:
                row.value = value
            else:
                self.db.add(StateEntry(key=key, value=value))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def delete(self, key: str) -> None:
        try:
            row = self.db.get(StateEntry, key)
            if row:
                self.db.delete(row)
                self.db.commit()
        except Exception:
            self.db.rollback()
            raise


def detect_storage(storage: Optional[StoragePort]) -> Optional[StoragePort]:
    """Return `storage` if a probe write/delete succeeds, else None."""
    if storage is None:
        return None
    try:
        storage.set(PROBE_KEY, "1")
        storage.delete(PROBE_KEY)
        return storage
    except Exception as e:
        logger.warning(f"State storage unavailable, using in-memory state: {e}")
        return None
