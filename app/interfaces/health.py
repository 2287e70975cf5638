"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and store reachability.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Engine

from app.core.database import verify_connection
from app.interfaces.catalog.dependencies import get_engine
from app.interfaces.catalog.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database reachability.",
)
def health_check(
    request: Request, engine: Engine = Depends(get_engine)
) -> HealthResponse:
    """Return current application health status."""
    database = "up" if verify_connection(engine) else "down"
    return HealthResponse(
        status="ok",
        version=request.app.state.settings.version,
        database=database,
    )
