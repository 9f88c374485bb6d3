"""Application error taxonomy. Each error carries the HTTP status it maps to."""


class AppError(Exception):
    """Base for errors that are translated directly into an HTTP response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input, rejected before storage is touched."""

    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(AppError):
    """Missing, invalid or expired credentials, or no identity on the request."""

    status_code = 401
    default_message = "Authentication required"


class Forbidden(AppError):
    status_code = 403
    default_message = "Access forbidden"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    """Unique value already taken (email, VIN)."""

    status_code = 400
    default_message = "Resource already exists"


class Internal(AppError):
    status_code = 500
    default_message = "Internal server error"


class DuplicateEmail(Conflict):
    default_message = "Email already in use"


class InvalidCredentials(Unauthenticated):
    # Same message for unknown email and wrong password.
    default_message = "Invalid credentials"


class InvalidToken(Unauthenticated):
    # Never says which check failed (signature, format, expiry, type).
    default_message = "Invalid or expired token"


class InvalidRefreshToken(Unauthenticated):
    default_message = "Invalid refresh token"
