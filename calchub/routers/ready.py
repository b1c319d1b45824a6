from fastapi import APIRouter, Depends

from ..deps import get_state_storage
from ..settings import settings

router = APIRouter()


@router.get("/ready")
def ready(storage=Depends(get_state_storage)):
    # Conversions never need storage; report it so ops can see degraded state
    return {"ok": True, "state_backend": settings.state_backend, "storage_ok": storage is not None}
