"""
Domain exceptions.

Services raise these; ``api.errors`` maps them to HTTP responses.
"""


class AuthServiceError(Exception):
    """Base class for all service errors."""

    status_code = 500

    def __init__(self, message: str = "Internal error"):
        self.message = message
        super().__init__(message)


class ValidationError(AuthServiceError):
    """Malformed or missing input."""

    status_code = 400


class AuthenticationError(AuthServiceError):
    """Bad credentials, or an invalid or expired token."""

    status_code = 401

    def __init__(self, message: str = "Invalid authentication credentials"):
        super().__init__(message)


class NotFoundError(AuthServiceError):
    """Requested user does not exist."""

    status_code = 404


class ConflictError(AuthServiceError):
    """A user with the same email already exists."""

    status_code = 409
