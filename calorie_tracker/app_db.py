# -*- coding: utf-8 -*-
"""App database: SQLite helpers.

`logged_at` columns hold epoch milliseconds; `created_at`/`updated_at` hold
ISO-8601 UTC strings.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS food_entries (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                barcode TEXT,
                product_name TEXT NOT NULL,
                brand TEXT,
                serving_size TEXT,
                serving_size_grams REAL,
                calories REAL NOT NULL,
                protein REAL,
                carbs REAL,
                fat REAL,
                saturated_fat REAL,
                fiber REAL,
                sugar REAL,
                sodium REAL,
                salt REAL,
                meal_type TEXT CHECK (meal_type IN ('breakfast', 'lunch', 'dinner', 'snack')),
                logged_at INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_food_entries_user_logged ON food_entries(user_id, logged_at DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS water_intake (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                amount_ml INTEGER NOT NULL CHECK (amount_ml > 0),
                logged_at INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_water_intake_user_logged ON water_intake(user_id, logged_at DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS activities (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                activity_type TEXT NOT NULL,
                duration_minutes INTEGER NOT NULL,
                calories_burned REAL NOT NULL,
                notes TEXT,
                logged_at INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_activities_user_logged ON activities(user_id, logged_at DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS goals (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
                daily_calories INTEGER NOT NULL,
                protein_grams REAL,
                carbs_grams REAL,
                fat_grams REAL,
                weight_goal_kg REAL,
                current_weight_kg REAL,
                activity_level TEXT NOT NULL DEFAULT 'sedentary'
                    CHECK (activity_level IN ('sedentary', 'light', 'moderate', 'active', 'very_active')),
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS favorites (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                barcode TEXT,
                product_name TEXT NOT NULL,
                brand TEXT,
                serving_size TEXT,
                serving_size_grams REAL,
                calories REAL NOT NULL,
                protein REAL,
                carbs REAL,
                fat REAL,
                fiber REAL,
                sugar REAL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_favorites_user_created ON favorites(user_id, created_at DESC);"
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
