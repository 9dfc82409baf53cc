"""Error response bodies, used for OpenAPI documentation of non-2xx responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Message safe to show to the caller")


class ValidationErrorItem(BaseModel):
    type: str
    msg: str
    path: str = Field(..., description="Name of the offending field")
    location: str = Field(..., description="Where the field was read from: query or body")


class ValidationErrorResponse(BaseModel):
    """Response for 400: one entry per violated rule."""

    errors: list[ValidationErrorItem]
