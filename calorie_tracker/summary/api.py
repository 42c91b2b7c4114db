# -*- coding: utf-8 -*-
"""Daily summary: API endpoints."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..deps import day_or_today
from .models import DailySummary, GoalProgress
from .storage import get_daily_summary, goal_progress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/summary", tags=["Summary"])


def _summary_or_500(user_id: str, day: date) -> DailySummary:
    try:
        return get_daily_summary(user_id, day)
    except Exception as exc:
        logger.exception("Failed to build summary for user %s on %s", user_id, day)
        raise HTTPException(status_code=500, detail="Failed to fetch summary") from exc


@router.get("", response_model=DailySummary, summary="Food, water and activity totals for one day")
def read_summary(day: date = Depends(day_or_today), user: dict = Depends(get_current_user)):
    return _summary_or_500(user["id"], day)


@router.get("/progress", response_model=GoalProgress, summary="Percent of each daily goal reached")
def read_progress(day: date = Depends(day_or_today), user: dict = Depends(get_current_user)):
    return goal_progress(_summary_or_500(user["id"], day))
