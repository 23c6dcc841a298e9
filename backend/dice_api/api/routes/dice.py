"""Dice Routes — single and multiple d6 rolls, plus the CORS failure demo.

Invariants:
    - Every result is in [1, 6]; total == sum(results)
    - Invalid counts raise InvalidRollCountError → 400 via the global handler,
      with no partial results
    - Roll faults degrade to 500 {"message": "Failed to roll dice", "error": ...}
    - /api/roll-dice is served by cors_demo_router (CorsExemptRoute): its
      responses carry no Access-Control-* headers, so browsers reject them

Design Decisions:
    - Count parsed outside the fault guard: client errors must not become 500s
    - The demo route keeps its own router so the exemption is visible at
      registration time in main.py
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from dice_api.api.cors import CorsExemptRoute
from dice_api.core.dice import parse_roll_count, roll_dice, roll_die
from dice_api.core.timestamps import utc_timestamp
from dice_api.schemas.responses import (
    CorsDemoRollResponse, MultipleRollResponse, SingleRollResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/roll", tags=["dice"])
cors_demo_router = APIRouter(
    prefix="/api", tags=["dice"], route_class=CorsExemptRoute,
)

CORS_DEMO_MESSAGE = (
    "This endpoint intentionally causes CORS errors when called from browser"
)


def _roll_failed(exc: Exception) -> JSONResponse:
    logger.error(f"Dice roll failed: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "error",
            "message": "Failed to roll dice",
            "error": str(exc),
        },
    )


@router.get("/single", response_model=SingleRollResponse)
async def roll_single():
    """Roll one d6."""
    try:
        return SingleRollResponse(result=roll_die(), timestamp=utc_timestamp())
    except Exception as exc:
        return _roll_failed(exc)


@router.get("/multiple/{count}", response_model=MultipleRollResponse)
async def roll_multiple(count: str):
    """Roll `count` d6 (1–100) and report each result and the total."""
    parsed = parse_roll_count(count)
    try:
        results = roll_dice(parsed)
        return MultipleRollResponse(
            count=parsed,
            results=results,
            total=sum(results),
            timestamp=utc_timestamp(),
        )
    except Exception as exc:
        return _roll_failed(exc)


@cors_demo_router.get("/roll-dice", response_model=CorsDemoRollResponse)
async def roll_dice_without_cors():
    """Roll one d6 with no cross-origin headers on the response."""
    try:
        return CorsDemoRollResponse(
            result=roll_die(),
            message=CORS_DEMO_MESSAGE,
            timestamp=utc_timestamp(),
        )
    except Exception as exc:
        return _roll_failed(exc)
