"""
Notes Frontend - Health Check Route
====================================

What:  Health check endpoint for monitoring and container probes.
How:   Probes the Notes API and reports the load status of the hosted view.

Status levels:
    - healthy:   Notes API answers with 2xx
    - degraded:  Notes API unreachable; the page still renders (empty list)
"""

import logging
import time

from fastapi import APIRouter, Request

from notes_frontend import __version__
from notes_frontend.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns frontend status, Notes API reachability and the view's load status.",
)
async def health_check(request: Request) -> HealthResponse:
    notes_api_status = "available"
    overall = "healthy"

    if not await request.app.state.notes_api.health_check():
        notes_api_status = "unavailable"
        overall = "degraded"
        logger.warning("Health check: Notes API unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        notes_api=notes_api_status,
        view=request.app.state.view.render().load_status.value,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
