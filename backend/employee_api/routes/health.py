"""
Employee Directory — Health Check Route
=========================================

What:  GET /health for container health checks and load balancer probes.
How:   Runs SELECT 1 against the configured database.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (the endpoint still answers 200 so the
                 body can be read; monitoring keys off `status`)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from employee_api import __version__
from employee_api.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        from employee_api.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
