"""Password hashing, secret comparison and output escaping."""

import html
import secrets

import bcrypt

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for username validation on lookups.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def tokens_match(provided: str, expected: str) -> bool:
    """Constant-time comparison of two secrets."""
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def escape_html(value: str) -> str:
    """Escape &, <, >, " and ' so the value is inert inside HTML."""
    return html.escape(str(value), quote=True)
