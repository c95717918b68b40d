"""Error Hierarchy — typed exceptions for the two failure modes of the message API.

Invariants:
    - Every error has a code (str), a message and an http_status
    - Client errors (400-level) are recoverable by resubmitting; storage errors (500-level) are not
    - to_response() produces the flat JSON body returned to the caller

Design Decisions:
    - Single hierarchy with MessageApiError base: one global handler catches all
    - details is opt-in on StorageError: only the create endpoint exposes storage error text
"""

from typing import Any


class MessageApiError(Exception):
    """Base exception for all message API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(MessageApiError):
    """A required field was absent or blank after trimming."""
    def __init__(self, received: dict[str, Any]):
        super().__init__("All fields are required", "MISSING_FIELDS", 400)
        self.received = received

    def to_response(self) -> dict:
        return {"error": self.message, "received": self.received}


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(MessageApiError):
    """Database connection or operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        details: str | None = None,
        expose_details: bool = False,
    ):
        super().__init__(message, "STORAGE_ERROR", 500)
        self.operation = operation
        self.details = details
        self.expose_details = expose_details

    def to_response(self) -> dict:
        body = super().to_response()
        if self.expose_details:
            body["details"] = self.details
        return body
