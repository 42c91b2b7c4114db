# -*- coding: utf-8 -*-
"""Favorites: API endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..schemas import CreatedResponse, SuccessResponse
from .models import FavoriteCreateRequest, FavoritesResponse
from .storage import create_favorite, delete_favorite, list_favorites

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/favorites", tags=["Favorites"])


@router.get("", response_model=FavoritesResponse, summary="List favorites, newest first")
def get_favorites(user: dict = Depends(get_current_user)):
    try:
        favorites = list_favorites(user["id"])
    except Exception as exc:
        logger.exception("Failed to fetch favorites for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to fetch favorites") from exc
    return FavoritesResponse(favorites=favorites)


@router.post("", response_model=CreatedResponse, summary="Save a favorite")
def add_favorite(request: FavoriteCreateRequest, user: dict = Depends(get_current_user)):
    try:
        favorite_id = create_favorite(user["id"], request)
    except Exception as exc:
        logger.exception("Failed to add favorite for user %s", user["id"])
        raise HTTPException(status_code=500, detail="Failed to add favorite") from exc
    return CreatedResponse(id=favorite_id)


@router.delete("", response_model=SuccessResponse, summary="Delete a favorite (idempotent)")
def remove_favorite(
    favorite_id: Optional[str] = Query(None, alias="id"),
    user: dict = Depends(get_current_user),
):
    if not favorite_id or not favorite_id.strip():
        raise HTTPException(status_code=400, detail="Favorite ID is required")
    try:
        deleted = delete_favorite(user["id"], favorite_id.strip())
    except Exception as exc:
        logger.exception("Failed to delete favorite %s for user %s", favorite_id, user["id"])
        raise HTTPException(status_code=500, detail="Failed to delete favorite") from exc
    if not deleted:
        logger.debug("Favorite %s not found for user %s; nothing deleted", favorite_id, user["id"])
    return SuccessResponse()
