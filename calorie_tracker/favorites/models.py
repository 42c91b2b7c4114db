# -*- coding: utf-8 -*-
"""Favorites: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schemas import CamelModel


class FavoriteCreateRequest(CamelModel):
    barcode: Optional[str] = Field(None, max_length=64)
    product_name: str = Field(..., min_length=1, max_length=512)
    brand: Optional[str] = Field(None, max_length=512)
    serving_size: Optional[str] = Field(None, max_length=128)
    serving_size_grams: Optional[float] = Field(None, ge=0)
    calories: float = Field(..., ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    fiber: Optional[float] = Field(None, ge=0)
    sugar: Optional[float] = Field(None, ge=0)


class Favorite(CamelModel):
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
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    created_at: str


class FavoritesResponse(CamelModel):
    favorites: List[Favorite]
