"""Custom exceptions and error handling."""

from typing import Any

from fastapi import status


class AIVisibilityError(Exception):
    """Base exception for the AI visibility service."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AIVisibilityError):
    """Validation error."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="validation_error",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
        )


class PayloadTooLargeError(AIVisibilityError):
    """Submitted document exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            message=f"Document is {size} bytes; the limit is {limit} bytes",
            code="payload_too_large",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details={"size": size, "limit": limit},
        )
