"""
Database helper functions — user lookup and persistence.

"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import ConflictError, NotFoundError
from database.models import User

logger = logging.getLogger(__name__)



def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError("User not found")


def normalize_email(email: str) -> str:
    return email.strip().lower()



async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    """Return the user with ``email`` or ``None``."""
    result = await session.execute(
        select(User).where(User.email == normalize_email(email))
    )
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str | uuid.UUID) -> User:
    """Return the user with ``user_id``; raises ``NotFoundError``."""
    user = await session.get(User, _to_uuid(user_id))
    if user is None:
        raise NotFoundError("User not found")
    return user


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """
    Insert a new user row; raises ``ConflictError`` if the email is taken.

    A concurrent insert that passes the lookup is caught by the unique index.
    """
    email = normalize_email(email)
    if await get_user_by_email(session, email) is not None:
        raise ConflictError("Email already registered")

    user = User(
        id=uuid.uuid4(),
        email=email,
        name=name,
        password_hash=password_hash,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise ConflictError("Email already registered")
    return user


async def update_user_name(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    name: str,
) -> User:
    user = await get_user_by_id(session, user_id)
    user.name = name
    user.updated_at = datetime.now(timezone.utc)
    await session.flush()
    return user
