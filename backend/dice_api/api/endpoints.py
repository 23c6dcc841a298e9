"""Endpoint Catalogue — the public route signatures, in documentation order.

Returned by the 404 fallback and logged on startup.
"""

AVAILABLE_ENDPOINTS = (
    "GET /api/wakeup",
    "GET /api/health",
    "GET /api/roll/single",
    "GET /api/roll/multiple/:count",
    "GET /api/roll-dice",
    "GET /test",
)
