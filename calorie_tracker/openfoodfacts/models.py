# -*- coding: utf-8 -*-
"""Open Food Facts: wire models and the normalized nutrient record."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..schemas import CamelModel

# Nutriment values arrive as numbers, strings (units, labels) or nothing at all,
# under loosely consistent keys. Only normalize_nutrients_100g reads them.
Nutriments = Dict[str, Any]


class OffProduct(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str = ""
    product_name: Optional[str] = None
    brands: Optional[str] = None
    nutriments: Optional[Nutriments] = None
    serving_size: Optional[str] = None
    image_url: Optional[str] = None


class OffProductResponse(BaseModel):
    code: str = ""
    status: int = Field(0, description="1 = product found, 0 = not found")
    status_verbose: Optional[str] = None
    product: Optional[OffProduct] = None


class NormalizedNutrients100g(CamelModel):
    """Per-100 g nutrients; ``None`` means unknown, never zero."""

    energy_kj: Optional[float] = None
    energy_kcal: Optional[float] = None
    fat: Optional[float] = None
    saturated_fat: Optional[float] = None
    carbs: Optional[float] = None
    sugars: Optional[float] = None
    fiber: Optional[float] = None
    protein: Optional[float] = None
    salt: Optional[float] = None
    sodium: Optional[float] = None


class ProductLookupResponse(CamelModel):
    product: OffProduct
    nutrients: NormalizedNutrients100g
