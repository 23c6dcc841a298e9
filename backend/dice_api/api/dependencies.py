"""Route dependencies."""

from fastapi import Request

from dice_api.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (set by create_app)."""
    return request.app.state.settings
