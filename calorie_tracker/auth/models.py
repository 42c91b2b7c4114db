# -*- coding: utf-8 -*-
"""Auth: Pydantic models."""

from __future__ import annotations

from pydantic import Field

from ..schemas import CamelModel


class RegisterRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8, max_length=128)


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class UserPublic(CamelModel):
    id: str
    email: str
    created_at: str


class AuthResponse(CamelModel):
    user: UserPublic
    token: str
