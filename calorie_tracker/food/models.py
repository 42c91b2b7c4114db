# -*- coding: utf-8 -*-
"""Food log: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..schemas import CamelModel


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class FoodLogRequest(CamelModel):
    barcode: Optional[str] = Field(None, max_length=64)
    product_name: str = Field(..., min_length=1, max_length=512)
    brand: Optional[str] = Field(None, max_length=512)
    serving_size: Optional[str] = Field(None, max_length=128, description="Human-readable serving, e.g. '1 cup'")
    serving_size_grams: Optional[float] = Field(None, ge=0)
    calories: float = Field(..., ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    saturated_fat: Optional[float] = Field(None, ge=0)
    fiber: Optional[float] = Field(None, ge=0)
    sugar: Optional[float] = Field(None, ge=0)
    sodium: Optional[float] = Field(None, ge=0)
    salt: Optional[float] = Field(None, ge=0)
    meal_type: Optional[MealType] = None
    logged_at: Optional[datetime] = Field(None, description="When the food was eaten; defaults to now")


class BarcodeLogRequest(CamelModel):
    barcode: str = Field(..., min_length=1, max_length=64)
    meal_type: Optional[MealType] = None
    logged_at: Optional[datetime] = None


class FoodEntry(CamelModel):
    id: str
    barcode: Optional[str] = None
    product_name: str
    brand: Optional[str] = None
    serving_size: Optional[str] = None
    serving_size_grams: Optional[float] = None
    calories: float
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    saturated_fat: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None
    salt: Optional[float] = None
    meal_type: Optional[MealType] = None
    logged_at: str
    created_at: str


class FoodEntriesResponse(CamelModel):
    entries: List[FoodEntry]
