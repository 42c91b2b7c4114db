# -*- coding: utf-8 -*-
"""Water intake: API endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..deps import day_or_today, optional_day
from ..schemas import CreatedResponse
from .models import WaterEntriesResponse, WaterLogRequest, WaterTotalResponse
from .storage import create_water_entry, list_water_entries, total_water_ml

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/water", tags=["Water"])


@router.post("/log", response_model=CreatedResponse, summary="Log water intake")
def log_water(request: WaterLogRequest, user: dict = Depends(get_current_user)):
    try:
        entry_id = create_water_entry(user["id"], request)
    except Exception as exc:
        logger.exception("Failed to log water for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to log water intake") from exc
    return CreatedResponse(id=entry_id)


@router.get("/log", response_model=WaterTotalResponse, summary="Total water for a day")
def get_water_total(day: date = Depends(day_or_today), user: dict = Depends(get_current_user)):
    try:
        total = total_water_ml(user["id"], day)
    except Exception as exc:
        logger.exception("Failed to fetch water intake for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch water intake") from exc
    return WaterTotalResponse(total=total, date=day.isoformat())


@router.get("/entries", response_model=WaterEntriesResponse, summary="List water entries, newest first")
def get_water_entries(day: Optional[date] = Depends(optional_day), user: dict = Depends(get_current_user)):
    try:
        entries = list_water_entries(user["id"], day=day)
    except Exception as exc:
        logger.exception("Failed to fetch water entries for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch water entries") from exc
    return WaterEntriesResponse(entries=entries)
