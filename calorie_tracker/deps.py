# -*- coding: utf-8 -*-
"""Shared FastAPI query dependencies."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import HTTPException, Query

from .days import parse_day


def _day_or_400(value: Optional[str]) -> date:
    try:
        return parse_day(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value!r} (expected YYYY-MM-DD)") from exc


def optional_day(date_: Optional[str] = Query(None, alias="date", description="YYYY-MM-DD")) -> Optional[date]:
    """``?date=`` filter for list endpoints; absent means no day filter."""
    if not date_:
        return None
    return _day_or_400(date_)


def day_or_today(date_: Optional[str] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today")) -> date:
    return _day_or_400(date_)
