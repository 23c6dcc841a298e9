"""Dice Roller API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings built once and passed into create_app(); stored on app.state
    - Cross-origin policy applied to every request, OPTIONS answered before routing
    - Global error handlers map every failure to the {status: "error"} envelope
    - Static files mounted last so API routes take precedence

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - App factory: tests build apps with their own Settings
    - No interactive docs routes: the public surface is exactly the catalogue,
      everything else falls through to the 404 handler
    - No trailing-slash redirects: "/api/health/" is unmatched, like any other
      unknown path, whether or not the static directory exists
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from dice_api.api.cors import CrossOriginPolicyMiddleware
from dice_api.api.endpoints import AVAILABLE_ENDPOINTS
from dice_api.api.error_handlers import register_error_handlers
from dice_api.api.routes import dice, health, legacy
from dice_api.config import Settings, get_settings
from dice_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Dice Roller API started on http://localhost:{settings.port}/")
    for endpoint in AVAILABLE_ENDPOINTS:
        logger.info(f"Endpoint available: {endpoint}")
    yield
    logger.info("Dice Roller API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given (or environment) settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Dice Roller API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(CrossOriginPolicyMiddleware, settings=settings)

    app.include_router(health.router)
    app.include_router(dice.router)
    app.include_router(dice.cors_demo_router)
    app.include_router(legacy.router)

    # Mounted AFTER API routes so /api/* takes precedence
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    register_error_handlers(app, settings)
    return app


app = create_app()
