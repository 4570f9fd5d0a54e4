"""
Registration and credential checks.

No HTTP here; raises ``core.errors`` exceptions that route handlers let
propagate to the registered exception handlers.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import dummy_hash, hash_password, verify_password
from core.errors import AuthenticationError, ValidationError
from database.helpers import create_user, get_user_by_email
from database.models import User

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


async def register_user(
    session: AsyncSession,
    name: str,
    email: str,
    password: str,
) -> User:
    """Create a user; raises ``ConflictError`` if the email is taken."""
    name = name.strip()
    if not name:
        raise ValidationError("Name must not be blank")

    user = await create_user(
        session,
        name=name,
        email=email,
        password_hash=hash_password(password),
    )
    logger.info("Registered user %s", user.id)
    return user


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User:
    """
    Check ``email`` / ``password``.

    Unknown email and wrong password raise the same ``AuthenticationError``.
    """
    user = await get_user_by_email(session, email)
    if user is None:
        # same bcrypt cost as a real check
        verify_password(password, dummy_hash())
        logger.warning("Failed login attempt")
        raise AuthenticationError(_INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthenticationError(_INVALID_CREDENTIALS)

    logger.info("Login: %s", user.id)
    return user
