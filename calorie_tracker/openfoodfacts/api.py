# -*- coding: utf-8 -*-
"""Open Food Facts: product lookup endpoint and client dependency."""

from __future__ import annotations

from typing import Iterator, Tuple

import httpx
from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..config import settings
from .client import LookupTransportError, OpenFoodFactsClient, ProductNotFoundError
from .models import NormalizedNutrients100g, OffProduct, ProductLookupResponse
from .nutrients import normalize_nutrients_100g

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_off_client() -> Iterator[OpenFoodFactsClient]:
    http_client = httpx.Client(timeout=settings.off_timeout, follow_redirects=True)
    client = OpenFoodFactsClient(settings.off_base_url, http_client=http_client)
    try:
        yield client
    finally:
        http_client.close()


def lookup_or_http_error(client: OpenFoodFactsClient, barcode: str) -> Tuple[OffProduct, NormalizedNutrients100g]:
    """Look a barcode up and normalize it, mapping lookup failures to 404/502."""
    try:
        response = client.get_product_by_barcode(barcode)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LookupTransportError as exc:
        if exc.status_code == 404:
            raise HTTPException(status_code=404, detail=f"Product not found for barcode {barcode}") from exc
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    product = response.product
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product not found for barcode {barcode}")
    return product, normalize_nutrients_100g(product.nutriments)


@router.get("/{barcode}", response_model=ProductLookupResponse, summary="Look up a product by barcode")
def get_product(
    barcode: str,
    client: OpenFoodFactsClient = Depends(get_off_client),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    product, nutrients = lookup_or_http_error(client, barcode)
    return ProductLookupResponse(product=product, nutrients=nutrients)
