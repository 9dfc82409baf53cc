"""SQLite engine, session management and store bootstrap."""

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.models import Base
from app.services.user_store import seed_users

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = frozenset({"sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://", "sqlite+pysqlite:///:memory:"})


def build_engine(settings: Settings) -> Engine:
    """
    Create the engine for DATABASE_URL.

    An in-memory database lives inside a single connection, so it is shared
    by every session through StaticPool; otherwise each session would see its
    own empty database.
    """
    connect_args = {"check_same_thread": False}
    if settings.DATABASE_URL in IN_MEMORY_URLS:
        return create_engine(
            settings.DATABASE_URL,
            connect_args=connect_args,
            poolclass=StaticPool,
            echo=settings.DEBUG,
        )
    return create_engine(
        settings.DATABASE_URL,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=settings.DEBUG,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_store(engine: Engine, session_factory: sessionmaker[Session], settings: Settings) -> int:
    """Create the schema and, if enabled, the seed users. Returns the number of users inserted."""
    Base.metadata.create_all(bind=engine)
    if not settings.SEED_USERS:
        return 0
    db = session_factory()
    try:
        inserted = seed_users(db, rounds=settings.BCRYPT_ROUNDS)
    finally:
        db.close()
    logger.info("Credential store ready: seeded_users=%s", inserted)
    return inserted


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
