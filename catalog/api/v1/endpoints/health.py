"""Health check endpoint. Used for liveness probes; reports cache state without failing."""

from fastapi import APIRouter

from catalog.api.v1.dependencies import CacheDep
from catalog.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(cache: CacheDep) -> HealthResponse:
    """Return ok; cache is 'disabled', 'unavailable' or 'ok'."""
    if cache is None:
        return HealthResponse(cache="disabled")
    return HealthResponse(cache="ok" if cache.is_available() else "unavailable")
