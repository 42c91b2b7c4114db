# -*- coding: utf-8 -*-
"""Activity log: API endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..deps import optional_day
from ..schemas import CreatedResponse
from .models import ActivitiesResponse, ActivityLogRequest, ActivityTypesResponse, CalorieEstimateResponse
from .rates import ACTIVITY_TYPES, estimate_calories_burned
from .storage import DEFAULT_LIST_LIMIT, create_activity, list_activities

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activity", tags=["Activity"])


@router.post("/log", response_model=CreatedResponse, summary="Log an activity")
def log_activity(request: ActivityLogRequest, user: dict = Depends(get_current_user)):
    try:
        activity_id = create_activity(user["id"], request)
    except Exception as exc:
        logger.exception("Failed to log activity for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to log activity") from exc
    return CreatedResponse(id=activity_id)


@router.get("/log", response_model=ActivitiesResponse, summary="List activities, newest first")
def get_activity_log(
    day: Optional[date] = Depends(optional_day),
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1),
    user: dict = Depends(get_current_user),
):
    try:
        activities = list_activities(user["id"], day=day, limit=limit)
    except Exception as exc:
        logger.exception("Failed to fetch activities for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch activities") from exc
    return ActivitiesResponse(activities=activities)


@router.get("/types", response_model=ActivityTypesResponse, summary="Activity types with kcal-per-minute rates")
def get_activity_types(user: dict = Depends(get_current_user)):  # noqa: ARG001
    return ActivityTypesResponse(types=ACTIVITY_TYPES)


@router.get("/estimate", response_model=CalorieEstimateResponse, summary="Estimate calories burned from the rate table")
def get_calorie_estimate(
    activity_type: str = Query(..., alias="activityType", min_length=1),
    duration_minutes: int = Query(..., alias="durationMinutes", ge=1),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    return CalorieEstimateResponse(
        activity_type=activity_type,
        duration_minutes=duration_minutes,
        calories_burned=estimate_calories_burned(activity_type, duration_minutes),
    )
