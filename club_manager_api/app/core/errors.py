"""
Domain-level exceptions.

Services and guards raise these instead of ``HTTPException`` so the
business rules stay usable outside of a request.  Each class carries
the HTTP status and the stable error code rendered by the handlers in
``api.errors``.
"""

from typing import Dict, Optional


class ClubError(Exception):
    """Base class for all club errors."""

    status_code: int = 400
    code: str = "error"
    message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.headers = headers


class Unauthenticated(ClubError):
    status_code = 401
    code = "unauthenticated"
    message = "Not authenticated"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentials(Unauthenticated):
    """Raised for any failed login.

    The message never says whether the username or the password was
    wrong.
    """

    code = "invalid_credentials"
    message = "Invalid credentials"

    def __init__(self) -> None:
        super().__init__()


class Forbidden(ClubError):
    status_code = 403
    code = "forbidden"
    message = "Forbidden"


class NotFound(ClubError):
    status_code = 404
    code = "not_found"
    message = "Not found"


class Conflict(ClubError):
    status_code = 409
    code = "conflict"
    message = "Conflict"


class CapacityExceeded(ClubError):
    status_code = 400
    code = "capacity_exceeded"
    message = "Not enough capacity"


class InvalidRequest(ClubError):
    status_code = 400
    code = "invalid_request"
    message = "Invalid request"


class Unavailable(ClubError):
    status_code = 503
    code = "maintenance"
    message = "System under maintenance"


class StorageError(ClubError):
    status_code = 500
    code = "storage_error"
    message = "Storage failure"
