# -*- coding: utf-8 -*-
"""Open Food Facts: barcode lookup client.

One GET per call, no retry and no cache. Callers own the instance (see
``get_off_client`` in ``api.py``); the timeout is whatever the wrapped
``httpx.Client`` carries.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .models import OffProductResponse

logger = logging.getLogger(__name__)

OFF_BASE_URL = "https://world.openfoodfacts.net/api/v2"

DEFAULT_FIELDS: tuple[str, ...] = (
    "code",
    "product_name",
    "brands",
    "nutriments",
    "serving_size",
    "image_url",
)


class NutritionLookupError(Exception):
    """Base class for lookup failures."""


class LookupTransportError(NutritionLookupError):
    def __init__(self, status_code: Optional[int], status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Open Food Facts request failed: {status_code} {status_text}")


class ProductNotFoundError(NutritionLookupError):
    def __init__(self, barcode: str) -> None:
        self.barcode = barcode
        super().__init__(f"Product not found for barcode {barcode}")


class OpenFoodFactsClient:
    def __init__(self, base_url: str = OFF_BASE_URL, http_client: Optional[httpx.Client] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(follow_redirects=True)

    def __enter__(self) -> "OpenFoodFactsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def product_url(self, barcode: str) -> str:
        return f"{self.base_url}/product/{quote(barcode, safe='')}"

    def get_product_by_barcode(
        self,
        barcode: str,
        fields: Sequence[str] = DEFAULT_FIELDS,
    ) -> OffProductResponse:
        url = self.product_url(barcode)
        try:
            resp = self._client.get(url, params={"fields": ",".join(fields)})
        except httpx.HTTPError as exc:
            logger.warning("Open Food Facts request for %s failed: %s", barcode, exc)
            raise LookupTransportError(None, str(exc)) from exc

        if not resp.is_success:
            raise LookupTransportError(resp.status_code, resp.reason_phrase)

        try:
            data = OffProductResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise LookupTransportError(resp.status_code, "Malformed response body") from exc

        if data.status != 1 or data.product is None:
            raise ProductNotFoundError(barcode)
        return data
