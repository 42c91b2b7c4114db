# -*- coding: utf-8 -*-
"""Static kcal-per-minute table used by clients to pre-fill caloriesBurned.

Writes are never validated against it.
"""

from __future__ import annotations

from typing import Dict, List

from .models import ActivityType

DEFAULT_CALORIES_PER_MINUTE = 5.0

ACTIVITY_TYPES: List[ActivityType] = [
    ActivityType(value="running", label="Running", calories_per_minute=10),
    ActivityType(value="walking", label="Walking", calories_per_minute=4),
    ActivityType(value="cycling", label="Cycling", calories_per_minute=8),
    ActivityType(value="swimming", label="Swimming", calories_per_minute=9),
    ActivityType(value="weightlifting", label="Weight Lifting", calories_per_minute=6),
    ActivityType(value="yoga", label="Yoga", calories_per_minute=3),
    ActivityType(value="hiit", label="HIIT", calories_per_minute=12),
    ActivityType(value="dancing", label="Dancing", calories_per_minute=7),
    ActivityType(value="sports", label="Sports", calories_per_minute=8),
    ActivityType(value="other", label="Other", calories_per_minute=DEFAULT_CALORIES_PER_MINUTE),
]

_RATES: Dict[str, float] = {t.value: t.calories_per_minute for t in ACTIVITY_TYPES}


def estimate_calories_burned(activity_type: str, duration_minutes: float) -> float:
    rate = _RATES.get((activity_type or "").strip().lower(), DEFAULT_CALORIES_PER_MINUTE)
    return round(rate * max(duration_minutes, 0))
