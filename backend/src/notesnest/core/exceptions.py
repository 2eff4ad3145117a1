"""Exception hierarchy for NotesNest.

Every error carries the HTTP status and the machine-readable code that the
API layer reports to clients.
"""

from typing import Any, Dict, Optional


class NotesNestError(Exception):
    """Base exception for all NotesNest errors."""

    status_code: int = 500
    code: str = "InternalError"
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(NotesNestError):
    """Missing or malformed input."""

    status_code = 400
    code = "ValidationError"
    default_message = "Invalid request"


class UnauthenticatedError(NotesNestError):
    """Missing, malformed or expired credentials."""

    status_code = 401
    code = "Unauthenticated"
    default_message = "Unauthorized"


class InvalidTokenError(UnauthenticatedError):
    """Raised when a session token fails verification."""

    default_message = "Invalid token"


class ForbiddenError(NotesNestError):
    """Authenticated, but not allowed to do this."""

    status_code = 403
    code = "Forbidden"
    default_message = "Forbidden"


class NotFoundError(NotesNestError):
    """Absent, or not visible from the caller's tenant."""

    status_code = 404
    code = "NotFound"
    default_message = "Not found"


class QuotaExceededError(NotesNestError):
    """Free plan note limit reached."""

    status_code = 403
    code = "QuotaExceeded"
    default_message = "Free plan limit reached. Upgrade to Pro."


class InternalError(NotesNestError):
    """Unexpected storage or infrastructure failure."""
