# -*- coding: utf-8 -*-
"""Activity log: DB storage helpers."""

from __future__ import annotations

from datetime import date
from typing import Any, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import day_bounds_ms, ms_to_iso, now_ms, to_ms, utc_now_iso
from .models import ActivityEntry, ActivityLogRequest

DEFAULT_LIST_LIMIT = 50


def row_to_activity(row: Mapping[str, Any]) -> ActivityEntry:
    return ActivityEntry(
        id=row["id"],
        activity_type=row["activity_type"],
        duration_minutes=row["duration_minutes"],
        calories_burned=row["calories_burned"],
        notes=row["notes"],
        logged_at=ms_to_iso(row["logged_at"]),
        created_at=row["created_at"],
    )


def create_activity(user_id: str, request: ActivityLogRequest) -> str:
    activity_id = str(uuid4())
    logged_at = to_ms(request.logged_at) if request.logged_at else now_ms()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO activities (
                id, user_id, activity_type, duration_minutes, calories_burned, notes, logged_at, created_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                activity_id,
                user_id,
                request.activity_type.strip(),
                request.duration_minutes,
                request.calories_burned,
                request.notes or None,
                logged_at,
                utc_now_iso(),
            ),
        )
    return activity_id


def list_activities(
    user_id: str,
    *,
    day: Optional[date] = None,
    limit: Optional[int] = DEFAULT_LIST_LIMIT,
) -> List[ActivityEntry]:
    sql = "SELECT * FROM activities WHERE user_id = ?"
    params: List[Any] = [user_id]
    if day is not None:
        start_ms, end_ms = day_bounds_ms(day)
        sql += " AND logged_at >= ? AND logged_at <= ?"
        params.extend([start_ms, end_ms])
    sql += " ORDER BY logged_at DESC, created_at DESC LIMIT ?"
    params.append(limit if limit is not None else -1)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [row_to_activity(r) for r in rows]
