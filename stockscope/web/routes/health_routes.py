"""
Health check routes
"""

import time

from fastapi import APIRouter, Request
from loguru import logger

from stockscope.web.models import APIResponse

router = APIRouter()


@router.get("/health", response_model=APIResponse)
async def health_check(request: Request) -> APIResponse:
    """Basic liveness and series state."""
    snapshot = request.app.state.session.snapshot()
    uptime = time.time() - getattr(request.app.state, "start_time", time.time())
    logger.debug("Health check completed", endpoint="/health", uptime_seconds=uptime)
    return APIResponse(
        success=True,
        data={
            "status": "healthy",
            "uptime_seconds": uptime,
            "series_state": snapshot.state.value,
            "insights_configured": bool(request.app.state.settings.openrouter_api_key),
        },
        message="Health check completed",
    )
