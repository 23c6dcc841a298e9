"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings are frozen: built once at startup, passed into create_app()
    - get_settings() is cached (lru_cache) — single instance per process
    - Error-detail mode is two-valued: node_env == "production" suppresses
      internal detail, every other value exposes it

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Env names kept compatible with the existing deployment (PORT, NODE_ENV)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_MODE = "production"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "https://your-static-app.azurestaticapps.net",
    "https://your-app-service.azurewebsites.net",
]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    node_env: str = "development"
    server_name: str = "Python FastAPI on Azure"

    # API
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS
    static_dir: str = "client"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.node_env == PRODUCTION_MODE


@lru_cache
def get_settings() -> Settings:
    return Settings()
