"""Health check endpoints.

Provides health status for container probes and monitoring.
"""

from fastapi import APIRouter

from app import __version__
from app.config import settings
from app.infra.database import verify_db_connection
from app.infra.logging import get_logger
from app.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready() -> HealthResponse:
    """Readiness check.

    Verifies the database is reachable before accepting traffic.
    """
    checks: dict[str, bool] = {"database": await verify_db_connection()}

    all_healthy = all(checks.values())
    if not all_healthy:
        logger.warning("Readiness check degraded", checks=checks)

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
