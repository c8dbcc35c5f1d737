"""Domain exceptions for the task service.

Defines domain-level exceptions that represent rule violations and store
failures. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskApiException(Exception):
    """Base exception for all task service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field errors).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body for this exception."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(TaskApiException):
    """Raised when request fields violate one or more validation rules.

    Carries every violation at once as a field name -> message mapping.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        """Initialize with the per-field messages.

        Args:
            field_errors: JSON field name mapped to a human-readable message.
        """
        self.field_errors = dict(field_errors)
        super().__init__(
            "Validation failed",
            "VALIDATION_ERROR",
            {"fieldErrors": self.field_errors},
        )

    def to_dict(self) -> dict[str, Any]:
        """Return {"fieldErrors": {...}}."""
        return {"fieldErrors": self.field_errors}


class PersistenceException(TaskApiException):
    """Raised when the store cannot complete a write (not retried)."""

    def __init__(self, message: str = "Failed to persist task") -> None:
        super().__init__(message, "PERSISTENCE_ERROR")
