# -*- coding: utf-8 -*-
"""Favorites: DB storage helpers."""

from __future__ import annotations

from typing import Any, List, Mapping
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..days import utc_now_iso
from .models import Favorite, FavoriteCreateRequest


def row_to_favorite(row: Mapping[str, Any]) -> Favorite:
    return Favorite(
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
        fiber=row["fiber"],
        sugar=row["sugar"],
        created_at=row["created_at"],
    )


def create_favorite(user_id: str, request: FavoriteCreateRequest) -> str:
    favorite_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO favorites (
                id, user_id, barcode, product_name, brand, serving_size, serving_size_grams,
                calories, protein, carbs, fat, fiber, sugar, created_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                favorite_id,
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
                request.fiber,
                request.sugar,
                utc_now_iso(),
            ),
        )
    return favorite_id


def list_favorites(user_id: str) -> List[Favorite]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM favorites WHERE user_id = ? ORDER BY created_at DESC",
            (user_id,),
        ).fetchall()
    return [row_to_favorite(r) for r in rows]


def delete_favorite(user_id: str, favorite_id: str) -> bool:
    """Delete by id within the owner's rows; unknown or foreign ids are a no-op."""
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM favorites WHERE id = ? AND user_id = ?",
            (favorite_id, user_id),
        )
        return cur.rowcount > 0
