# src/utils/errors.py
from typing import Any, Optional


class ApiError(Exception):
    """Base for errors that map directly onto an HTTP response."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: Optional[str] = None, data: Any = None):
        self.message = message or self.error
        self.data = data
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"success": False, "error": self.error, "message": self.message}
        if self.data is not None:
            body["data"] = self.data
        return body


class ValidationError(ApiError):
    status_code = 400
    error = "Validation error"


class AuthenticationError(ApiError):
    status_code = 401
    error = "Authentication failed"


class NotFoundError(ApiError):
    status_code = 404
    error = "Not found"


class InternalFault(ApiError):
    status_code = 500
    error = "Internal server error"


class InvalidAssemblyFilter(ValueError):
    """Raised when an assembly filter contains a non-numeric token."""
