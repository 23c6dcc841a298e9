"""Error Handlers — global exception handlers for the Dice API.

Invariants:
    - DiceApiError → its own http_status and {status: "error", message}
    - Unmatched route or method (404/405) → 404 with the endpoint catalogue
    - Exception (catch-all) → 500; detail only outside production mode
    - Faults escaping a route are converted inside the cross-origin middleware
      (internal_error_response) so they keep the CORS headers; the registered
      catch-all only sees faults raised by middleware itself

Design Decisions:
    - Three-layer handler: domain (DiceApiError), routing (HTTPException), catch-all (Exception)
    - Settings passed in at registration: the production check is fixed per app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dice_api.api.endpoints import AVAILABLE_ENDPOINTS
from dice_api.config import Settings
from dice_api.core.errors import DiceApiError

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_dice_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app, settings)


def _register_dice_error_handler(app: FastAPI) -> None:
    """Register Dice API client error handler."""

    @app.exception_handler(DiceApiError)
    async def dice_error_handler(request: Request, exc: DiceApiError):
        logger.warning(
            f"DiceApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, unsupported method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in _NOT_FOUND_STATUSES:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=build_not_found_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": str(exc.detail)},
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI, settings: Settings) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return internal_error_response(request, exc, settings)


def internal_error_response(
    request: Request, exc: Exception, settings: Settings,
) -> JSONResponse:
    """Log an uncaught fault and build its 500 response."""
    logger.error(
        f"Server error on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_internal_error_response(exc, settings),
    )


def build_not_found_response() -> dict:
    return {
        "status": "error",
        "message": "Route not found",
        "availableEndpoints": list(AVAILABLE_ENDPOINTS),
    }


def build_internal_error_response(exc: Exception, settings: Settings) -> dict:
    """Catch-all envelope — detail suppressed in production mode."""
    return {
        "status": "error",
        "message": "Internal server error",
        "error": {} if settings.is_production else str(exc),
    }
