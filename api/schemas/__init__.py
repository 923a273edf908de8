"""Pydantic schemas package."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Standard error detail."""

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response envelope."""

    error: ErrorDetail
