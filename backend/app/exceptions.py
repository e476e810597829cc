"""
Game Reviews Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for expected domain failures.
How:   Each exception carries a client-safe message, an HTTP status and an
       optional context dict. Global exception handlers (registered in
       main.py) turn them into `{"msg": ...}` responses.
Who:   Raised by services and route handlers; caught by global handlers.

Exception Hierarchy:
    GameReviewsError (base)  → 500 Internal Server Error
    ├── ValidationError      → 400 Bad Request
    └── NotFoundError        → 404 Not Found

Anything that is not a GameReviewsError (driver errors, bugs) propagates
unchanged and is answered with a generic 500 by the catch-all handler.
"""

from typing import Any, Dict, Optional

# ── Client-facing messages ────────────────────────────────────────────────
BAD_REQUEST = "Bad request"
INCOMPLETE_INFORMATION = "Bad request - incomplete information"
NOT_FOUND = "Not found"
PATH_NOT_FOUND = "Path not found"
INTERNAL_SERVER_ERROR = "Internal server error"


class GameReviewsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:      Client-facing error description (returned as `msg`)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = INTERNAL_SERVER_ERROR,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(GameReviewsError):
    """
    Raised when client input is malformed or incomplete.

    When:    Non-integer identifiers, comment payloads missing `username`
             or `body`.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = BAD_REQUEST,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(GameReviewsError):
    """
    Raised when a well-formed identifier or reference has no matching row.

    What:    Unknown review_id, unknown comment_id, or a comment referencing
             a user/review that does not exist.
    HTTP:    404 Not Found

    The message depends on the caller: read paths name the resource and id
    ("No review found for review 100"), comment creation uses "Not found".
    """

    status_code = 404

    def __init__(
        self,
        message: str = NOT_FOUND,
        resource: Optional[str] = None,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)

    @classmethod
    def for_resource(cls, resource: str, resource_id: Any) -> "NotFoundError":
        """Builds the read-path message, e.g. 'No review found for review 7'."""
        return cls(
            message=f"No {resource} found for {resource} {resource_id}",
            resource=resource,
            resource_id=resource_id,
        )
