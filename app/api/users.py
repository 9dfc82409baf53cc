"""User lookup and admin-gated deletion."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import require_admin_token
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.core.security import USERNAME_MAX_LEN, USERNAME_MIN_LEN
from app.schemas.errors import ErrorResponse, ValidationErrorResponse
from app.schemas.users import DeleteUserRequest, DeleteUserResponse, UserPublic
from app.services.user_store import delete_by_id, find_by_username

router = APIRouter()


@router.get(
    "/user",
    response_model=UserPublic,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_user(
    username: Annotated[
        str,
        Query(min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Exact username"),
    ],
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    """Return id, username and role of the user with exactly this username."""
    user = find_by_username(db, username)
    if user is None:
        raise NotFoundError("Utilisateur non trouvé")
    return UserPublic.model_validate(user)


@router.post(
    "/delete-user",
    response_model=DeleteUserResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def post_delete_user(
    _admin: Annotated[None, Depends(require_admin_token)],
    body: DeleteUserRequest,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteUserResponse:
    """
    Delete a user by id. Requires ``Authorization: Bearer <ADMIN_TOKEN>``.

    Deleting an id that does not exist (or no longer exists) returns 404.
    """
    if delete_by_id(db, body.id) == 0:
        raise NotFoundError("Utilisateur introuvable")
    return DeleteUserResponse(ok=True, message="Utilisateur supprimé")
