"""Health & Wakeup Probes — liveness endpoints used to keep the host warm and monitored.

Invariants:
    - GET /api/wakeup and GET /api/health return 200 while the process is up
    - Any fault inside a probe degrades to 500 with the error envelope,
      detail included (probes are operator-facing)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from dice_api.api.dependencies import get_app_settings
from dice_api.config import Settings
from dice_api.core.timestamps import utc_timestamp
from dice_api.infrastructure.process_metrics import memory_usage, uptime_seconds
from dice_api.schemas.responses import HealthResponse, WakeupResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])


def _probe_failed(message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": message, "error": str(exc)},
    )


@router.get("/wakeup", response_model=WakeupResponse)
async def wakeup(settings: Settings = Depends(get_app_settings)):
    """Wake a sleeping instance. Returns 200 if the process is up."""
    try:
        return WakeupResponse(
            timestamp=utc_timestamp(),
            message="Python server is running and ready",
            port=settings.port,
        )
    except Exception as exc:
        logger.error(f"Wakeup failed: {exc}", exc_info=True)
        return _probe_failed("Internal server error", exc)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Liveness probe with uptime and process memory."""
    try:
        return HealthResponse(
            server=settings.server_name,
            timestamp=utc_timestamp(),
            uptime=uptime_seconds(),
            memory=memory_usage(),
        )
    except Exception as exc:
        logger.error(f"Health check failed: {exc}", exc_info=True)
        return _probe_failed("Health check failed", exc)
