# -*- coding: utf-8 -*-
"""Daily summary aggregation over food, water and activity records."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..activity.models import ActivityEntry
from ..activity.storage import list_activities
from ..days import today
from ..food.models import FoodEntry
from ..food.storage import list_food_entries
from ..goals.models import Goal
from ..goals.storage import get_goal
from ..water.storage import total_water_ml
from .models import DailySummary, GoalProgress, NutritionTotals

logger = logging.getLogger(__name__)


def compute_totals(entries: Iterable[FoodEntry]) -> NutritionTotals:
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    fiber = 0.0
    for entry in entries:
        calories += entry.calories or 0.0
        protein += entry.protein or 0.0
        carbs += entry.carbs or 0.0
        fat += entry.fat or 0.0
        fiber += entry.fiber or 0.0
    return NutritionTotals(calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber)


def total_calories_burned(activities: Iterable[ActivityEntry]) -> float:
    burned = 0.0
    for activity in activities:
        if activity.calories_burned is None:
            # The column is NOT NULL; count it as zero rather than failing the summary.
            logger.warning("Activity %s has no calories_burned; counting it as 0", activity.id)
            continue
        burned += activity.calories_burned
    return burned


def get_daily_summary(user_id: str, day: Optional[date] = None) -> DailySummary:
    day = day or today()
    entries = list_food_entries(user_id, day=day, limit=None)
    activities = list_activities(user_id, day=day, limit=None)
    return DailySummary(
        date=day.isoformat(),
        entries=entries,
        totals=compute_totals(entries),
        goal=get_goal(user_id),
        water_total_ml=total_water_ml(user_id, day),
        activities=activities,
        total_calories_burned=total_calories_burned(activities),
    )


def goal_percentage(actual: Optional[float], target: Optional[float]) -> float:
    if not target or target <= 0:
        return 0.0
    return min(100.0, 100.0 * (actual or 0.0) / target)


def goal_progress(summary: DailySummary, goal: Optional[Goal] = None) -> GoalProgress:
    goal = goal if goal is not None else summary.goal
    if goal is None:
        return GoalProgress(date=summary.date)
    totals = summary.totals
    return GoalProgress(
        date=summary.date,
        calories=goal_percentage(totals.calories, goal.daily_calories),
        protein=goal_percentage(totals.protein, goal.protein_grams),
        carbs=goal_percentage(totals.carbs, goal.carbs_grams),
        fat=goal_percentage(totals.fat, goal.fat_grams),
    )
