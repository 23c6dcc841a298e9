"""Legacy Probe — plain-text port check kept for existing clients.

Invariants:
    - GET /test returns text/plain "Node.js and Express running on port=<port>";
      the wording is part of the public contract and must not change
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from dice_api.api.dependencies import get_app_settings
from dice_api.config import Settings

router = APIRouter(tags=["legacy"])


@router.get("/test", response_class=PlainTextResponse)
async def legacy_port_check(settings: Settings = Depends(get_app_settings)):
    return f"Node.js and Express running on port={settings.port}"
