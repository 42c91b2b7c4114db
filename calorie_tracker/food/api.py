# -*- coding: utf-8 -*-
"""Food log: API endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..auth.security import get_current_user
from ..deps import optional_day
from ..openfoodfacts.api import get_off_client, lookup_or_http_error
from ..openfoodfacts.client import OpenFoodFactsClient
from ..openfoodfacts.models import NormalizedNutrients100g, OffProduct
from ..schemas import CreatedResponse
from .models import BarcodeLogRequest, FoodEntriesResponse, FoodLogRequest
from .storage import DEFAULT_LIST_LIMIT, create_food_entry, list_food_entries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/food", tags=["Food"])

SCANNED_SERVING_GRAMS = 100.0


def food_request_from_product(
    barcode: str,
    product: OffProduct,
    nutrients: NormalizedNutrients100g,
    request: BarcodeLogRequest,
) -> FoodLogRequest:
    """Scanned products are logged as one 100 g serving of the per-100 g values."""
    return FoodLogRequest(
        barcode=barcode,
        product_name=product.product_name or "Unknown product",
        brand=product.brands or None,
        serving_size="100g",
        serving_size_grams=SCANNED_SERVING_GRAMS,
        calories=nutrients.energy_kcal or 0,
        protein=nutrients.protein,
        carbs=nutrients.carbs,
        fat=nutrients.fat,
        saturated_fat=nutrients.saturated_fat,
        fiber=nutrients.fiber,
        sugar=nutrients.sugars,
        sodium=nutrients.sodium,
        salt=nutrients.salt,
        meal_type=request.meal_type,
        logged_at=request.logged_at,
    )


def _save_or_500(user_id: str, request: FoodLogRequest) -> str:
    try:
        return create_food_entry(user_id, request)
    except Exception as exc:
        logger.exception("Failed to log food entry for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to log food entry") from exc


@router.post("/log", response_model=CreatedResponse, summary="Log a food entry")
def log_food(request: FoodLogRequest, user: dict = Depends(get_current_user)):
    entry_id = _save_or_500(user["id"], request)
    return CreatedResponse(id=entry_id)


@router.post("/log/barcode", response_model=CreatedResponse, summary="Look up a barcode and log 100 g of it")
def log_food_by_barcode(
    request: BarcodeLogRequest,
    client: OpenFoodFactsClient = Depends(get_off_client),
    user: dict = Depends(get_current_user),
):
    barcode = request.barcode.strip()
    product, nutrients = lookup_or_http_error(client, barcode)
    try:
        food_request = food_request_from_product(barcode, product, nutrients, request)
    except ValidationError as exc:
        logger.warning("Product %s from Open Food Facts cannot be logged: %s", barcode, exc)
        raise HTTPException(status_code=502, detail=f"Unusable product data for barcode {barcode}") from exc
    entry_id = _save_or_500(user["id"], food_request)
    return CreatedResponse(id=entry_id)


@router.get("/log", response_model=FoodEntriesResponse, summary="List food entries, newest first")
def get_food_log(
    day: Optional[date] = Depends(optional_day),
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1),
    user: dict = Depends(get_current_user),
):
    try:
        entries = list_food_entries(user["id"], day=day, limit=limit)
    except Exception as exc:
        logger.exception("Failed to fetch food entries for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch food entries") from exc
    return FoodEntriesResponse(entries=entries)
