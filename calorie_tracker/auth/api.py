# -*- coding: utf-8 -*-
"""Auth: API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from ..schemas import SuccessResponse
from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import SESSION_COOKIE_NAME, create_access_token, get_current_user, hash_password, verify_password
from .storage import create_user, delete_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(id=row["id"], email=row["email"], created_at=row["created_at"])


def _set_auth_cookie(resp: Response, token: str) -> None:
    max_age = int(settings.token_ttl_days) * 24 * 60 * 60
    resp.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=max_age,
        path="/",
    )


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(request: RegisterRequest, response: Response):
    if get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = create_user(email=request.email, password_hash=hash_password(request.password))
    logger.info("Registered user %s", user["id"])

    token = create_access_token(user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/logout", response_model=SuccessResponse, summary="Logout")
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return SuccessResponse()


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return _user_public(user)


@router.delete("/me", response_model=SuccessResponse, summary="Delete the current user and all their records")
def delete_me(response: Response, user: dict = Depends(get_current_user)):
    try:
        delete_user(user["id"])
    except Exception as exc:
        logger.exception("Failed to delete user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to delete account") from exc
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return SuccessResponse()
