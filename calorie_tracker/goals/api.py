# -*- coding: utf-8 -*-
"""Goals: API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..schemas import CreatedResponse
from .models import GoalResponse, GoalUpsertRequest
from .storage import get_goal, upsert_goal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/goals", tags=["Goals"])


@router.get("", response_model=GoalResponse, summary="Get the current user's goal")
def read_goal(user: dict = Depends(get_current_user)):
    try:
        goal = get_goal(user["id"])
    except Exception as exc:
        logger.exception("Failed to fetch goal for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch goal") from exc
    return GoalResponse(goal=goal)


@router.post("", response_model=CreatedResponse, summary="Create or update the current user's goal")
def save_goal(request: GoalUpsertRequest, user: dict = Depends(get_current_user)):
    try:
        goal_id = upsert_goal(user["id"], request)
    except Exception as exc:
        logger.exception("Failed to save goal for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to save goal") from exc
    return CreatedResponse(id=goal_id)
