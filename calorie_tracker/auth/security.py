# -*- coding: utf-8 -*-
"""Auth: password hashing, session tokens and the current-user dependency.

Tokens are HS256 JWTs signed with ``settings.jwt_secret``. A request is
authenticated by ``Authorization: Bearer <token>`` or, failing that, by the
``caltrack_session`` cookie set at login.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request

from ..config import settings
from .storage import get_user_by_id

SESSION_COOKIE_NAME = "caltrack_session"

PASSWORD_SCHEME = "pbkdf2_sha256"
PASSWORD_ITERATIONS = 200_000

_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64decode(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    """Return ``scheme$iterations$salt$key`` for storage in ``users.password_hash``."""
    salt = secrets.token_bytes(16)
    key = _derive(password, salt, PASSWORD_ITERATIONS)
    return "$".join([PASSWORD_SCHEME, str(PASSWORD_ITERATIONS), _b64encode(salt), _b64encode(key)])


def verify_password(password: str, password_hash: str) -> bool:
    parts = password_hash.split("$")
    if len(parts) != 4 or parts[0] != PASSWORD_SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt, expected = _b64decode(parts[2]), _b64decode(parts[3])
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)


def _sign(message: str) -> str:
    digest = hmac.new(settings.jwt_secret.encode("utf-8"), message.encode("ascii"), hashlib.sha256).digest()
    return _b64encode(digest)


def create_access_token(*, user_id: str, email: str) -> str:
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(days=int(settings.token_ttl_days))).timestamp()),
    }
    head = _b64encode(json.dumps(_TOKEN_HEADER, separators=(",", ":")).encode("utf-8"))
    body = _b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    return f"{head}.{body}.{_sign(f'{head}.{body}')}"


def decode_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry; any failure is a 401."""
    try:
        head, body, signature = token.split(".")
        # Bytes on both sides: header values may carry non-ASCII characters.
        expected = _sign(f"{head}.{body}").encode("ascii")
        if not hmac.compare_digest(expected, signature.encode("utf-8", "surrogateescape")):
            raise ValueError("bad signature")
        claims = json.loads(_b64decode(body))
        if not isinstance(claims, dict):
            raise ValueError("bad claims")
        expires = int(claims.get("exp") or 0)
    except (ValueError, TypeError, UnicodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    if expires and expires < int(datetime.now(timezone.utc).timestamp()):
        raise HTTPException(status_code=401, detail="Token expired")
    return claims


def get_token_from_request(request: Request) -> Optional[str]:
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer":
        return credentials.strip() or None
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def has_session_cookie(request: Request) -> bool:
    """Presence check for the UI route gate; the token is not verified here."""
    return bool(request.cookies.get(SESSION_COOKIE_NAME))


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = get_token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    user_id = str(decode_token(token).get("sub") or "")
    user = get_user_by_id(user_id) if user_id else None
    if not user:
        raise HTTPException(status_code=401, detail="Invalid token")

    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
