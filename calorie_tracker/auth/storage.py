# -*- coding: utf-8 -*-
"""Auth: DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import utc_now_iso


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(*, email: str, password_hash: str) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = utc_now_iso()
    email_norm = email.lower().strip()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO users (id, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
            (user_id, email_norm, password_hash, now),
        )
    return {"id": user_id, "email": email_norm, "password_hash": password_hash, "created_at": now}


def delete_user(user_id: str) -> bool:
    """Remove a user; food/water/activity/goal/favorite rows go with it (cascade)."""
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return cur.rowcount > 0
