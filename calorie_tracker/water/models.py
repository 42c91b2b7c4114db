# -*- coding: utf-8 -*-
"""Water intake: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..schemas import CamelModel


class WaterLogRequest(CamelModel):
    amount_ml: int = Field(..., gt=0, description="Millilitres, must be positive")
    logged_at: Optional[datetime] = None


class WaterIntakeEntry(CamelModel):
    id: str
    amount_ml: int
    logged_at: str
    created_at: str


class WaterTotalResponse(CamelModel):
    total: int = Field(0, ge=0, description="Millilitres logged on the day")
    date: str = Field(..., description="YYYY-MM-DD")


class WaterEntriesResponse(CamelModel):
    entries: List[WaterIntakeEntry]
