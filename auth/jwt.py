"""
JWT creation and verification.

Tokens are HS256-signed JWTs carrying ``sub`` (user id), ``iat`` and ``exp``.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from config.settings import config
from core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def create_token(user_id: str, expires_in: int | None = None) -> str:
    """Create a signed token for ``user_id``, valid for ``jwt_expiry_seconds``."""
    now = datetime.now(timezone.utc)
    seconds = config.jwt_expiry_seconds if expires_in is None else expires_in
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=seconds),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_token(token: str) -> str:
    """
    Verify token and return the user id.

    Raises ``AuthenticationError`` on invalid or expired tokens.
    """
    try:
        payload = jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except JWTError as exc:
        logger.debug("JWT verification failed: %s", exc)
        raise AuthenticationError("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid or expired token")
    return user_id
