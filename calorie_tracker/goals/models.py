# -*- coding: utf-8 -*-
"""Goals: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..schemas import CamelModel


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"


class GoalUpsertRequest(CamelModel):
    daily_calories: int = Field(..., gt=0)
    protein_grams: Optional[float] = Field(None, ge=0)
    carbs_grams: Optional[float] = Field(None, ge=0)
    fat_grams: Optional[float] = Field(None, ge=0)
    weight_goal_kg: Optional[float] = Field(None, gt=0)
    current_weight_kg: Optional[float] = Field(None, gt=0)
    activity_level: Optional[ActivityLevel] = Field(None, description="Defaults to sedentary")


class Goal(CamelModel):
    id: str
    daily_calories: int
    protein_grams: Optional[float] = None
    carbs_grams: Optional[float] = None
    fat_grams: Optional[float] = None
    weight_goal_kg: Optional[float] = None
    current_weight_kg: Optional[float] = None
    activity_level: ActivityLevel = ActivityLevel.sedentary
    created_at: str
    updated_at: str


class GoalResponse(CamelModel):
    goal: Optional[Goal] = None
