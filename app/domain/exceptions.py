"""Domain exceptions.

Each carries a machine-readable error_code; app.core.exception_handlers
turns the code into an HTTP status and ``to_dict()`` into the JSON body.
"""

from typing import Any


class TaskboardException(Exception):
    """Base for every error the API and the client raise on purpose.

    Attributes:
        message: Human-readable description (also str(exc)).
        error_code: Machine-readable code; the class name when not given.
        details: Extra context such as the offending field.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message, "details": self.details}


class ValidationException(TaskboardException):
    """A value outside its allowed set, e.g. an unknown task status."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else None)


class AuthenticationException(TaskboardException):
    """Missing, malformed or expired bearer token."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SqlNotConfiguredException(TaskboardException):
    def __init__(self) -> None:
        super().__init__(
            "SQL database is not configured. Set DATABASE_URL.", "SQL_NOT_CONFIGURED"
        )
