"""
BirdRef Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Probes the database through the injected BirdStore (SELECT 1).
Who:   Docker health checks, load balancers, monitoring systems.

Status levels:
    healthy:   database reachable (HTTP 200)
    unhealthy: database unreachable (HTTP 503)
"""

import time

from fastapi import APIRouter, Depends, Response

from birdref import __version__
from birdref.schemas.bird import HealthResponse
from birdref.services.sql_store import get_bird_store
from birdref.services.store_base import BirdStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: BirdStore = Depends(get_bird_store),
) -> HealthResponse:
    """
    Check the health of the service and its database.

    Every request depends on the database, so an unreachable database makes
    the whole service unhealthy.
    """
    if await store.health_check():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
