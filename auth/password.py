"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor. bcrypt only reads the first
72 bytes of its input, so longer passwords are rejected outright.
"""

from __future__ import annotations

from functools import lru_cache

import bcrypt

from config.settings import config
from core.errors import ValidationError

MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode()) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with bcrypt (auto-salted, work factor from config)."""
    if password_too_long(password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds if rounds is None else rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    if password_too_long(password):
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_hash() -> str:
    """A throwaway hash at the configured work factor, checked when no user matches."""
    return hash_password("not-a-real-password")
