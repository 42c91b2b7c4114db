# -*- coding: utf-8 -*-
"""Goals: DB storage helpers (one goal row per user)."""

from __future__ import annotations

from typing import Any, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import utc_now_iso
from .models import ActivityLevel, Goal, GoalUpsertRequest


def row_to_goal(row: Mapping[str, Any]) -> Goal:
    return Goal(
        id=row["id"],
        daily_calories=row["daily_calories"],
        protein_grams=row["protein_grams"],
        carbs_grams=row["carbs_grams"],
        fat_grams=row["fat_grams"],
        weight_goal_kg=row["weight_goal_kg"],
        current_weight_kg=row["current_weight_kg"],
        activity_level=row["activity_level"] or ActivityLevel.sedentary,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def get_goal(user_id: str) -> Optional[Goal]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM goals WHERE user_id = ?", (user_id,)).fetchone()
    return row_to_goal(row) if row else None


def upsert_goal(user_id: str, request: GoalUpsertRequest) -> str:
    """Create the user's goal or replace its values; returns the (stable) goal id.

    A single INSERT .. ON CONFLICT statement, so two posts never leave two rows.
    Concurrent posts are last-write-wins.
    """
    now = utc_now_iso()
    level = request.activity_level or ActivityLevel.sedentary
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO goals (
                id, user_id, daily_calories, protein_grams, carbs_grams, fat_grams,
                weight_goal_kg, current_weight_kg, activity_level, created_at, updated_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                daily_calories = excluded.daily_calories,
                protein_grams = excluded.protein_grams,
                carbs_grams = excluded.carbs_grams,
                fat_grams = excluded.fat_grams,
                weight_goal_kg = excluded.weight_goal_kg,
                current_weight_kg = excluded.current_weight_kg,
                activity_level = excluded.activity_level,
                updated_at = excluded.updated_at
            """,
            (
                str(uuid4()),
                user_id,
                request.daily_calories,
                request.protein_grams,
                request.carbs_grams,
                request.fat_grams,
                request.weight_goal_kg,
                request.current_weight_kg,
                level.value,
                now,
                now,
            ),
        )
        row = conn.execute("SELECT id FROM goals WHERE user_id = ?", (user_id,)).fetchone()
    return row["id"]
