"""Pydantic request/response schemas."""

from app.schemas.errors import ErrorResponse, ValidationErrorItem, ValidationErrorResponse
from app.schemas.health import HealthResponse
from app.schemas.users import (
    DeleteUserRequest,
    DeleteUserResponse,
    UserPublic,
    WelcomeResponse,
)

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "ErrorResponse",
    "HealthResponse",
    "UserPublic",
    "ValidationErrorItem",
    "ValidationErrorResponse",
    "WelcomeResponse",
]
