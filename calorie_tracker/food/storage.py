# -*- coding: utf-8 -*-
"""Food log: DB storage helpers."""

from __future__ import annotations

from datetime import date
from typing import Any, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import day_bounds_ms, ms_to_iso, now_ms, to_ms, utc_now_iso
from .models import FoodEntry, FoodLogRequest

DEFAULT_LIST_LIMIT = 100


def row_to_food_entry(row: Mapping[str, Any]) -> FoodEntry:
    return FoodEntry(
        id=row["id"],
        barcode=row["barcode"],
        product_name=row["product_name"],
        brand=row["brand"],
        serving_size=row["serving_size"],
        serving_size_grams=row["serving_size_grams"],
        calories=row["calories"],
        protein=row["protein"],
        carbs=row["carbs"],
        fat=row["fat"],
        saturated_fat=row["saturated_fat"],
        fiber=row["fiber"],
        sugar=row["sugar"],
        sodium=row["sodium"],
        salt=row["salt"],
        meal_type=row["meal_type"],
        logged_at=ms_to_iso(row["logged_at"]),
        created_at=row["created_at"],
    )


def create_food_entry(user_id: str, request: FoodLogRequest) -> str:
    entry_id = str(uuid4())
    logged_at = to_ms(request.logged_at) if request.logged_at else now_ms()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO food_entries (
                id, user_id, barcode, product_name, brand, serving_size, serving_size_grams,
                calories, protein, carbs, fat, saturated_fat, fiber, sugar, sodium, salt,
                meal_type, logged_at, created_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry_id,
                user_id,
                request.barcode or None,
                request.product_name,
                request.brand or None,
                request.serving_size or None,
                request.serving_size_grams,
                request.calories,
                request.protein,
                request.carbs,
                request.fat,
                request.saturated_fat,
                request.fiber,
                request.sugar,
                request.sodium,
                request.salt,
                request.meal_type.value if request.meal_type else None,
                logged_at,
                utc_now_iso(),
            ),
        )
    return entry_id


def list_food_entries(
    user_id: str,
    *,
    day: Optional[date] = None,
    limit: Optional[int] = DEFAULT_LIST_LIMIT,
) -> List[FoodEntry]:
    sql = "SELECT * FROM food_entries WHERE user_id = ?"
    params: List[Any] = [user_id]
    if day is not None:
        start_ms, end_ms = day_bounds_ms(day)
        sql += " AND logged_at >= ? AND logged_at <= ?"
        params.extend([start_ms, end_ms])
    sql += " ORDER BY logged_at DESC, created_at DESC LIMIT ?"
    # SQLite treats a negative LIMIT as "no limit".
    params.append(limit if limit is not None else -1)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [row_to_food_entry(r) for r in rows]
