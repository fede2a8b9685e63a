"""
Key server errors.

Every error carries the message returned to the client as ``{"error": ...}``
and the HTTP status code the transport layer answers with.
"""

from typing import Optional


class KeyServerError(Exception):
    """Base exception for all key lifecycle errors."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(KeyServerError):
    """Raised when a required request field is absent or empty."""

    status_code = 400
    default_message = "Username and time are required"


class InvalidTimeFormat(KeyServerError):
    """Raised when a time expression is neither a duration nor ``lifetime``."""

    status_code = 400
    default_message = "Invalid time format (e.g., 1d, 1m, 1y, 1min)"


class InvalidKey(KeyServerError):
    """Raised on login with a key that is not registered."""

    status_code = 401
    default_message = "Invalid key"


class KeyExpired(KeyServerError):
    status_code = 401
    default_message = "Key expired"


class HwidMismatch(KeyServerError):
    status_code = 401
    default_message = "HWID mismatch"


class KeyNotFound(KeyServerError):
    """Raised by admin operations (reset, delete) on an unknown key."""

    status_code = 404
    default_message = "Key not found"


class PersistenceError(KeyServerError):
    """Raised when the registry could not be written to durable storage."""

    status_code = 500
    default_message = "Failed to persist keys"
