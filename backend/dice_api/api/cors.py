"""Cross-Origin Policy — per-request CORS headers with an explicit per-route opt-out.

Invariants:
    - Access-Control-Allow-Origin is echoed only for an exact allow-list match
    - Methods/Headers/Credentials headers are set on every non-exempt response
    - OPTIONS short-circuits with 200 and an empty body, before routing
    - Routes built with CorsExemptRoute never receive any Access-Control-* header,
      preflight included
    - Faults escaping a route become the catch-all 500 here, so they carry the
      same headers as any other response

Design Decisions:
    - Custom middleware over Starlette's CORSMiddleware: the allow-list gates only
      the Allow-Origin header, and exemption is decided per route
    - Exemption is a route capability (cors_exempt attribute), resolved by matching
      the request against the app's routes before dispatch
"""

import logging

from fastapi import Request, Response
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.routing import Match

from dice_api.api.error_handlers import internal_error_response
from dice_api.config import Settings

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept, Authorization"


class CorsExemptRoute(APIRoute):
    """Route whose responses must carry no cross-origin headers."""
    cors_exempt = True


def is_cors_exempt(request: Request) -> bool:
    """True if the first route matching the request opted out of CORS headers."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            return getattr(route, "cors_exempt", False)
    return False


class CrossOriginPolicyMiddleware(BaseHTTPMiddleware):
    """Applies the origin allow-list and answers preflight requests."""

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings
        self.allowed_origins = frozenset(settings.cors_origins)

    def policy_headers(self, origin: str | None) -> dict[str, str]:
        headers = {}
        if origin in self.allowed_origins:
            headers["Access-Control-Allow-Origin"] = origin
        elif origin:
            logger.debug(
                f"Origin not allowed: {origin}", extra={"origin": origin},
            )
        headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        headers["Access-Control-Allow-Credentials"] = "true"
        return headers

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        exempt = is_cors_exempt(request)
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = internal_error_response(request, exc, self.settings)
        if not exempt:
            for name, value in self.policy_headers(
                request.headers.get("origin"),
            ).items():
                response.headers[name] = value
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "origin": request.headers.get("origin"),
            },
        )
        return response
