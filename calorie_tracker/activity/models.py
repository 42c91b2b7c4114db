# -*- coding: utf-8 -*-
"""Activity log: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..schemas import CamelModel


class ActivityLogRequest(CamelModel):
    activity_type: str = Field(..., min_length=1, max_length=128, description="Free text, e.g. 'running'")
    duration_minutes: int = Field(..., ge=1)
    calories_burned: float = Field(..., ge=0, description="Supplied by the client, estimated or manual")
    notes: Optional[str] = Field(None, max_length=2000)
    logged_at: Optional[datetime] = None


class ActivityEntry(CamelModel):
    id: str
    activity_type: str
    duration_minutes: int
    calories_burned: Optional[float] = None
    notes: Optional[str] = None
    logged_at: str
    created_at: str


class ActivitiesResponse(CamelModel):
    activities: List[ActivityEntry]


class ActivityType(CamelModel):
    value: str
    label: str
    calories_per_minute: float


class ActivityTypesResponse(CamelModel):
    types: List[ActivityType]


class CalorieEstimateResponse(CamelModel):
    activity_type: str
    duration_minutes: int
    calories_burned: float
