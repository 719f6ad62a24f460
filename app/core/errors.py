"""
Application error taxonomy

Every error carries the HTTP status it maps to and the message that is safe
to show to the client. Internal and database errors keep their detail for the
server log only.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors rendered through the error envelope"""

    status_code: int = 500
    error_code: str = "internal_error"
    public_message: Optional[str] = None

    def __init__(self, message: str = "", details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def client_message(self) -> str:
        return self.public_message or self.message


class NotFoundError(AppError):
    status_code = 404
    error_code = "not_found"


class BadRequestError(AppError):
    status_code = 400
    error_code = "bad_request"


class ValidationError(BadRequestError):
    """Input failed schema validation; details lists every offending field"""

    error_code = "validation_failed"

    def __init__(self, fields: List[Dict[str, str]]):
        super().__init__("Validation failed", details=fields)
        self.fields = fields


class UnauthorizedError(AppError):
    status_code = 401
    error_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InternalError(AppError):
    """Data-integrity fault or unexpected failure"""

    status_code = 500
    error_code = "internal_error"
    public_message = "Internal server error"


class DatabaseError(AppError):
    """Store-layer failure"""

    status_code = 500
    error_code = "database_error"
    public_message = "Internal server error"
