# -*- coding: utf-8 -*-
"""Water intake: DB storage helpers."""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import day_bounds_ms, ms_to_iso, now_ms, to_ms, utc_now_iso
from .models import WaterIntakeEntry, WaterLogRequest


def create_water_entry(user_id: str, request: WaterLogRequest) -> str:
    entry_id = str(uuid4())
    logged_at = to_ms(request.logged_at) if request.logged_at else now_ms()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO water_intake (id, user_id, amount_ml, logged_at, created_at) VALUES (?, ?, ?, ?, ?)",
            (entry_id, user_id, int(request.amount_ml), logged_at, utc_now_iso()),
        )
    return entry_id


def list_water_entries(user_id: str, *, day: Optional[date] = None) -> List[WaterIntakeEntry]:
    sql = "SELECT * FROM water_intake WHERE user_id = ?"
    params: List[Any] = [user_id]
    if day is not None:
        start_ms, end_ms = day_bounds_ms(day)
        sql += " AND logged_at >= ? AND logged_at <= ?"
        params.extend([start_ms, end_ms])
    sql += " ORDER BY logged_at DESC, created_at DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [
        WaterIntakeEntry(
            id=r["id"],
            amount_ml=r["amount_ml"],
            logged_at=ms_to_iso(r["logged_at"]),
            created_at=r["created_at"],
        )
        for r in rows
    ]


def total_water_ml(user_id: str, day: date) -> int:
    start_ms, end_ms = day_bounds_ms(day)
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            """
            SELECT COALESCE(SUM(amount_ml), 0) AS total
            FROM water_intake
            WHERE user_id = ? AND logged_at >= ? AND logged_at <= ?
            """,
            (user_id, start_ms, end_ms),
        ).fetchone()
    return int(row["total"] or 0)
