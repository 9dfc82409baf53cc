"""Error taxonomy and the exception handlers that turn it into JSON responses.

Client-facing detail (validation failures, missing records, auth outcomes) is
returned as-is. Anything internal is logged here and replaced by a fixed
generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.headers import apply_security_headers

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Erreur interne"


class ApiError(Exception):
    """Base for errors whose message is safe to send to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, headers: dict[str, str] | None = None) -> None:
        self.message = message
        self.headers = headers
        super().__init__(message)


class AuthenticationError(ApiError):
    """Missing or malformed credential."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Non authentifié") -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(ApiError):
    """Credential present but not accepted."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Accès refusé") -> None:
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApiError):
    """
    Store failure or unexpected exception. The caller always gets the generic
    message; pass the real cause with ``raise ... from exc`` and log it first.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self) -> None:
        super().__init__(GENERIC_ERROR_MESSAGE)


def validation_errors_to_list(exc: RequestValidationError) -> list[dict[str, str]]:
    """One entry per violated rule: type, msg, path (field name), location (query/body)."""
    items: list[dict[str, str]] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else ""
        path = ".".join(loc[1:]) if len(loc) > 1 else location
        items.append(
            {
                "type": str(err.get("type", "")),
                "msg": str(err.get("msg", "")),
                "path": path,
                "location": location,
            }
        )
    return items


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": validation_errors_to_list(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    # Served by ServerErrorMiddleware, outside the http middleware stack.
    response = JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )
    return apply_security_headers(response, request.url.path)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
