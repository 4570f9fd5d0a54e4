"""
Auth API routes — register, login, logout.

Route prefix: /api/auth
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.jwt import create_token
from auth.service import authenticate_user, register_user
from config.settings import config
from utils.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    user = await register_user(session, req.name, req.email, req.password)
    return {
        "message": "User registered successfully",
        "user": user.to_dict(),
    }


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password; the token is also set as a cookie for page requests."""
    user = await authenticate_user(session, req.email, req.password)
    token = create_token(str(user.id))

    response.set_cookie(
        key=config.token_cookie_name,
        value=token,
        max_age=config.jwt_expiry_seconds,
        httponly=True,
        secure=config.cookie_secure,
        samesite="lax",
    )
    return {
        "message": "Login successful",
        "token": token,
        "user": user.to_dict(),
    }


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> Dict[str, Any]:
    """Clear the credential cookie. Issued tokens stay valid until they expire."""
    response.delete_cookie(key=config.token_cookie_name)
    return {"message": "Logged out"}
