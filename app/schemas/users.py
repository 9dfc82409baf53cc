"""Request/response schemas for the user endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserPublic(BaseModel):
    """User as returned by GET /user (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: Literal["admin", "user"]


class DeleteUserRequest(BaseModel):
    """Body of POST /delete-user."""

    id: int = Field(..., ge=1, description="Id of the user to delete")

    @field_validator("id", mode="before")
    @classmethod
    def reject_boolean_id(cls, v: object) -> object:
        # JSON true/false would otherwise coerce to 1/0; numeric strings stay accepted.
        if isinstance(v, bool):
            raise ValueError("id must be an integer, not a boolean")
        return v


class DeleteUserResponse(BaseModel):
    ok: Literal[True] = True
    message: str = Field(..., description="Human-readable confirmation")


class WelcomeResponse(BaseModel):
    """Greeting; the name inside message is HTML-escaped."""

    message: str
