"""Error Hierarchy — typed exceptions for client-facing failure modes.

Invariants:
    - Every error has a code (str), a message, and an http_status
    - to_response() produces the shared envelope {status: "error", message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DiceApiError base: one global handler catches all
    - Only client input errors live here; internal faults stay plain exceptions
      and are converted by the handler that caught them
"""


class DiceApiError(Exception):
    """Base exception for all Dice API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {"status": "error", "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidRollCountError(DiceApiError):
    """Dice count is not a number or falls outside the allowed range."""
    def __init__(self, raw_count: str):
        super().__init__(
            "Invalid count parameter. Must be a number between 1 and 100.",
            "INVALID_COUNT", 400,
        )
        self.raw_count = raw_count
