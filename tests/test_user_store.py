"""Unit tests for app.services.user_store against a real in-memory SQLite store."""

import logging
import unittest
from unittest.mock import MagicMock

import bcrypt
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory, init_store
from app.core.errors import InternalError
from app.models import User
from app.services.user_store import SEED_USERS, delete_by_id, find_by_username, seed_users


def _store(seed: bool = True):
    """Return (engine, session) for a fresh in-memory store."""
    settings = Settings(_env_file=None, DATABASE_URL="sqlite://", BCRYPT_ROUNDS=4, SEED_USERS=seed)
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    init_store(engine, session_factory, settings)
    return engine, session_factory()


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.db = _store()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class TestFindByUsername(StoreTestCase):
    def test_finds_seeded_admin(self) -> None:
        user = find_by_username(self.db, "admin")
        self.assertIsNotNone(user)
        self.assertEqual((user.id, user.username, user.role), (1, "admin", "admin"))

    def test_unknown_returns_none(self) -> None:
        self.assertIsNone(find_by_username(self.db, "ghost"))

    def test_match_is_exact(self) -> None:
        self.assertIsNone(find_by_username(self.db, "ADMIN"))
        self.assertIsNone(find_by_username(self.db, "admin "))
        self.assertIsNone(find_by_username(self.db, "adm%"))

    def test_injection_payloads_are_literal_values(self) -> None:
        for payload in ("admin' OR '1'='1", "' OR ''='", "admin'; DELETE FROM users; --"):
            with self.subTest(payload=payload):
                self.assertIsNone(find_by_username(self.db, payload))
        self.assertEqual(self.db.query(User).count(), 2)

    def test_username_with_quotes_can_be_found(self) -> None:
        self.db.add(User(id=3, username="o'brien", password_hash="x", role="user"))
        self.db.commit()
        user = find_by_username(self.db, "o'brien")
        self.assertIsNotNone(user)
        self.assertEqual(user.id, 3)

    def test_statement_uses_bound_parameter(self) -> None:
        statements: list[tuple[str, object]] = []

        def capture(conn, cursor, statement, parameters, context, executemany):
            statements.append((statement, parameters))

        event.listen(self.engine, "before_cursor_execute", capture)
        try:
            find_by_username(self.db, "admin' OR '1'='1")
        finally:
            event.remove(self.engine, "before_cursor_execute", capture)
        self.assertEqual(len(statements), 1)
        sql, params = statements[0]
        self.assertNotIn("OR '1'='1", sql)
        self.assertIn("admin' OR '1'='1", params)

    def test_db_error_raises_internal_error(self) -> None:
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with self.assertLogs("app.services.user_store", level=logging.ERROR):
            with self.assertRaises(InternalError) as ctx:
                find_by_username(db, "admin")
        self.assertEqual(ctx.exception.message, "Erreur interne")
        db.rollback.assert_called_once()


class TestDeleteById(StoreTestCase):
    def test_delete_existing_returns_one(self) -> None:
        self.assertEqual(delete_by_id(self.db, 2), 1)
        self.assertIsNone(find_by_username(self.db, "user1"))
        self.assertEqual(self.db.query(User).count(), 1)

    def test_delete_is_idempotent(self) -> None:
        self.assertEqual(delete_by_id(self.db, 2), 1)
        self.assertEqual(delete_by_id(self.db, 2), 0)
        self.assertEqual(self.db.query(User).count(), 1)

    def test_delete_missing_returns_zero(self) -> None:
        self.assertEqual(delete_by_id(self.db, 42), 0)
        self.assertEqual(self.db.query(User).count(), 2)

    def test_db_error_rolls_back_and_raises(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.delete.side_effect = OperationalError(
            "DELETE", {}, Exception("database is locked")
        )
        with self.assertLogs("app.services.user_store", level=logging.ERROR):
            with self.assertRaises(InternalError):
                delete_by_id(db, 1)
        db.rollback.assert_called_once()
        db.commit.assert_not_called()


class TestSeedUsers(unittest.TestCase):
    def test_seed_inserts_two_users_with_hashed_passwords(self) -> None:
        engine, db = _store(seed=False)
        try:
            self.assertEqual(seed_users(db, rounds=4), 2)
            for user_id, username, password, role in SEED_USERS:
                user = find_by_username(db, username)
                self.assertEqual((user.id, user.role), (user_id, role))
                self.assertNotEqual(user.password_hash, password)
                self.assertTrue(user.password_hash.startswith("$2"))
                self.assertTrue(bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8")))
        finally:
            db.close()
            engine.dispose()

    def test_seed_is_idempotent(self) -> None:
        engine, db = _store(seed=True)
        try:
            self.assertEqual(seed_users(db, rounds=4), 0)
            self.assertEqual(db.query(User).count(), 2)
        finally:
            db.close()
            engine.dispose()

    def test_seed_skips_only_missing_rows(self) -> None:
        engine, db = _store(seed=True)
        try:
            delete_by_id(db, 2)
            self.assertEqual(seed_users(db, rounds=4), 1)
            self.assertIsNotNone(find_by_username(db, "user1"))
        finally:
            db.close()
            engine.dispose()


class TestUserModelConstraints(StoreTestCase):
    def test_username_is_unique(self) -> None:
        self.db.add(User(id=10, username="admin", password_hash="x", role="user"))
        with self.assertRaises(IntegrityError):
            self.db.commit()
        self.db.rollback()

    def test_role_is_closed_set(self) -> None:
        self.db.add(User(id=11, username="root", password_hash="x", role="superuser"))
        with self.assertRaises(IntegrityError):
            self.db.commit()
        self.db.rollback()


if __name__ == "__main__":
    unittest.main()
