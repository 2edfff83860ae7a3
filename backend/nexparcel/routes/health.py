"""
NexParcel Backend — Health Check Route
========================================

What:  Banner at GET / and a health probe at GET /health.
How:   The probe runs `SELECT 1` against the database and reports whether a
       payment provider key is configured (no call to the provider).

Status levels:
    - healthy:   database reachable, payments configured (HTTP 200)
    - degraded:  database reachable, payments not configured (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from nexparcel import __version__
from nexparcel.schemas.common import HealthResponse
from nexparcel.services.payment_service import payment_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def root() -> str:
    return "NexParcel Server is running"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """Probe the database and payment configuration; 503 if the database is down."""
    database = request.app.state.database
    db_ok = await database.ping()
    payments_ok = payment_service.provider.is_configured()

    if not db_ok:
        overall = "unhealthy"
        response.status_code = 503
    elif not payments_ok:
        overall = "degraded"
    else:
        overall = "healthy"

    return HealthResponse(
        status=overall,
        version=__version__,
        database="connected" if db_ok else "disconnected",
        payments="configured" if payments_ok else "not_configured",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
