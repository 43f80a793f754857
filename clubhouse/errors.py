"""Domain exceptions mapped to HTTP responses by the server."""


class ClubError(Exception):
    """Base exception for business errors (400)."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthenticationError(ClubError):
    """Raised when the bearer token is missing, invalid or expired."""

    status_code = 401


class PermissionDeniedError(ClubError):
    """Raised when the caller's role is not allowed to perform an operation."""

    status_code = 403


class NotFoundError(ClubError):
    """Raised when a requested record does not exist."""

    status_code = 404
