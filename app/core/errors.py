"""Error taxonomy shared by the ordering pipeline and reference-data endpoints.

Every error carries an HTTP status and a stable machine code. The API layer
renders them as ``{"detail": <message>, "code": <code>}``.
"""

from __future__ import annotations


class OrderingError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    code: str = "error"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None, *, code: str | None = None) -> None:
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class Unauthenticated(OrderingError):
    status_code = 401
    code = "unauthenticated"
    default_message = "Missing Authorization Bearer token"


class InvalidCredential(OrderingError):
    status_code = 401
    code = "invalid_credential"
    default_message = "Invalid or expired token"


class Forbidden(OrderingError):
    status_code = 403
    code = "forbidden"
    default_message = "Forbidden"


class ProfileNotFound(Forbidden):
    code = "profile_not_found"
    default_message = "User profile not found"


class RoleNotRecognized(Forbidden):
    code = "role_not_recognized"
    default_message = "Unauthorized role"


class CampusMismatch(Forbidden):
    code = "campus_mismatch"
    default_message = (
        "You can only place orders from your assigned campus. "
        "Please switch back to your campus in the navbar."
    )


class ValidationFailed(OrderingError):
    status_code = 400
    code = "validation_failed"
    default_message = "Missing required order fields"


class VerificationFailed(OrderingError):
    status_code = 400
    code = "verification_failed"
    default_message = "reCAPTCHA verification failed"


class NotFound(OrderingError):
    status_code = 404
    code = "not_found"
    default_message = "Not found"


class PersistenceError(OrderingError):
    """Store fault. The message is generic; details stay in the server log."""

    status_code = 500
    code = "persistence_error"
    default_message = "Failed to save data"
