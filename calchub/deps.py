"""FastAPI dependencies for CalcHub API.

Provides:
- Client resolution (header -> settings fallback)
- Converter page lookup by slug
- State storage for the configured backend, scoped per client
"""

import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Depends, Header, HTTPException

from .infra.redis_client import get_sync_redis
from .infra.state_storage import (
    MemoryStorage,
    PrefixedStorage,
    RedisStorage,
    SqlStorage,
    StoragePort,
    detect_storage,
)
from .services.converter_page import ConverterPage
from .settings import settings
from .units import get_page

logger = logging.getLogger("calchub.deps")

CLIENT_ID_RE = re.compile(r"^[A-Za-z0-9_.\-]{1,64}$")

# Shared by every request when state_backend == "memory"
memory_storage = MemoryStorage()


def get_client_id(
    x_client_id: Optional[str] = Header(None, alias="X-Client-Id"),
) -> str:
    """Resolve the client whose favorites/history are used.

    Resolution order:
    1. X-Client-Id header (must be a short slug-like token, else 400)
    2. settings.default_client_id
    """
    if x_client_id is None:
        return settings.default_client_id
    if not CLIENT_ID_RE.match(x_client_id):
        raise HTTPException(status_code=400, detail="Invalid X-Client-Id header")
    return x_client_id


def get_converter_page(slug: str) -> ConverterPage:
    page = get_page(slug)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Converter '{slug}' not found")
    return page


@contextmanager
def _backend_storage() -> Iterator[Optional[StoragePort]]:
    backend = settings.state_backend
    if backend == "memory":
        yield memory_storage
    elif backend == "redis":
        yield RedisStorage(get_sync_redis())
    elif backend == "sql":
        from .db import SessionLocal
        try:
            db = SessionLocal()()
        except Exception as e:
            logger.warning(f"SQL state storage unavailable: {e}")
            yield None
            return
        try:
            yield SqlStorage(db)
        finally:
            db.close()
    else:
        logger.warning(f"Unknown state_backend '{backend}', state will not persist")
        yield None


def get_state_storage(
    client_id: str = Depends(get_client_id),
) -> Iterator[Optional[StoragePort]]:
    """Probed, client-scoped storage; None when the backend is unusable."""
    with _backend_storage() as inner:
        if inner is None:
            yield None
        else:
            yield detect_storage(PrefixedStorage(inner, f"{settings.storage_prefix}:{client_id}"))
