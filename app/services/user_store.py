"""Credential store operations: lookup by username, delete by id, seed data.

Every query goes through the ORM with bound parameters; caller-supplied
values never become part of the SQL text.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError
from app.core.security import BCRYPT_ROUNDS, hash_password
from app.models import User

logger = logging.getLogger(__name__)

# (id, username, password, role) created once at startup.
SEED_USERS: tuple[tuple[int, str, str, str], ...] = (
    (1, "admin", "password123", "admin"),
    (2, "user1", "azerty", "user"),
)


def find_by_username(db: Session, username: str) -> User | None:
    """Return the user with exactly this username, or None. At most one row (username is unique)."""
    try:
        return db.query(User).filter(User.username == username).one_or_none()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("User lookup failed: %s", e, exc_info=True)
        raise InternalError() from e


def delete_by_id(db: Session, user_id: int) -> int:
    """
    Delete the user with this id and return the number of rows removed.

    Returns 0 when nothing matched, so repeating a delete is not an error.
    """
    try:
        deleted_count = (
            db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("User delete failed: id=%s error=%s", user_id, e, exc_info=True)
        raise InternalError() from e

    if deleted_count > 0:
        logger.info("User deleted: id=%s", user_id)
    return deleted_count


def seed_users(db: Session, rounds: int = BCRYPT_ROUNDS) -> int:
    """Insert the fixed seed users that are not present yet. Idempotent; returns the number inserted."""
    inserted = 0
    for user_id, username, password, role in SEED_USERS:
        existing = (
            db.query(User.id)
            .filter((User.id == user_id) | (User.username == username))
            .first()
        )
        if existing is not None:
            continue
        db.add(
            User(
                id=user_id,
                username=username,
                password_hash=hash_password(password, rounds=rounds),
                role=role,
            )
        )
        inserted += 1
    db.commit()
    return inserted
