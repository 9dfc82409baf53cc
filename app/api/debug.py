"""Debug endpoint showing safe error handling: details go to the log, not the response."""

import logging

from fastapi import APIRouter

from app.core.errors import InternalError
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/debug", responses={500: {"model": ErrorResponse}})
def get_debug() -> None:
    """Always fails with 500 and the generic message."""
    try:
        raise RuntimeError("Simulated internal error")
    except RuntimeError as e:
        logger.error("Internal error (debug): %s", e)
        raise InternalError() from e
