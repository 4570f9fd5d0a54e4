"""
REST API routes — user profile and health.

Route prefix: /api
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from core.errors import ValidationError
from database.helpers import get_user_by_id, update_user_name
from utils.schemas import ProfileUpdateResponse, UpdateProfileRequest, UserEnvelope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@router.get("/user/profile", response_model=UserEnvelope, tags=["user"])
async def get_profile(
    session: AsyncSession = Depends(db_session),
    auth_user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """Return the authenticated user's profile."""
    user = await get_user_by_id(session, auth_user_id)
    return {"user": user.to_dict()}


@router.put("/user/update-profile", response_model=ProfileUpdateResponse, tags=["user"])
async def update_profile(
    req: UpdateProfileRequest,
    session: AsyncSession = Depends(db_session),
    auth_user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """Update the authenticated user's display name."""
    name = req.name.strip()
    if not name:
        raise ValidationError("Name must not be blank")

    user = await update_user_name(session, auth_user_id, name)
    logger.info("Updated profile for %s", user.id)
    return {
        "message": "Profile updated successfully",
        "user": user.to_dict(),
    }
