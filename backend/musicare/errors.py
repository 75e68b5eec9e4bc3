"""Error taxonomy shared by repositories, stores and the HTTP layer.

Each error knows the status code and client-facing message it maps to; the
handlers in ``musicare.main`` turn them into JSON responses.
"""
from typing import Optional


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    """Missing or invalid request fields."""
    status_code = 400
    default_message = "Missing required fields"


class PayloadTooLarge(AppError):
    status_code = 400
    default_message = "File too large. Maximum size is 5MB."


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class ConfigurationError(AppError):
    """The deployment is missing something it needs, e.g. DATABASE_URL."""
    status_code = 500
    default_message = "Database not configured"


class PersistenceError(AppError):
    """Any failure raised by the persistence provider.

    The provider's own message stays in the server log; clients only get the
    generic message.
    """
    status_code = 500


class StoreTimeout(AppError):
    status_code = 503
    default_message = "Database timed out"
