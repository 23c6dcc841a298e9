"""Response Schemas — Pydantic models for the success envelopes of every JSON route.

Invariants:
    - Every envelope carries a `status` field
    - Field names are the public JSON names (camelCase where the API uses it)
    - Error envelopes are plain dicts built by core/errors.py and api/error_handlers.py

Design Decisions:
    - Literal status values: Pydantic rejects a handler that builds the wrong envelope
"""

from typing import Literal

from pydantic import BaseModel, Field


class WakeupResponse(BaseModel):
    status: Literal["success"] = "success"
    server: Literal["awake"] = "awake"
    timestamp: str
    message: str
    port: int


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    server: str
    timestamp: str
    uptime: float = Field(ge=0)
    memory: dict[str, int]


class SingleRollResponse(BaseModel):
    status: Literal["success"] = "success"
    die: Literal["d6"] = "d6"
    result: int = Field(ge=1, le=6)
    timestamp: str


class MultipleRollResponse(BaseModel):
    status: Literal["success"] = "success"
    dice: Literal["d6"] = "d6"
    count: int = Field(ge=1, le=100)
    results: list[int]
    total: int
    timestamp: str


class CorsDemoRollResponse(BaseModel):
    """Single roll served without cross-origin headers."""
    status: Literal["success"] = "success"
    die: Literal["d6"] = "d6"
    result: int = Field(ge=1, le=6)
    message: str
    timestamp: str
