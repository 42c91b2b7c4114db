# -*- coding: utf-8 -*-
"""Daily summary: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..activity.models import ActivityEntry
from ..food.models import FoodEntry
from ..goals.models import Goal
from ..schemas import CamelModel


class NutritionTotals(CamelModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


class DailySummary(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD")
    entries: List[FoodEntry] = Field(default_factory=list)
    totals: NutritionTotals = Field(default_factory=NutritionTotals)
    goal: Optional[Goal] = None
    water_total_ml: int = Field(0, alias="waterIntake")
    activities: List[ActivityEntry] = Field(default_factory=list)
    total_calories_burned: float = 0.0


class GoalProgress(CamelModel):
    """Percent of each goal reached, capped at 100; 0 when no target is set."""

    date: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
