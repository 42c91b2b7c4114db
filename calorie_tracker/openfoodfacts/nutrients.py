# -*- coding: utf-8 -*-
"""Map Open Food Facts ``nutriments`` onto NormalizedNutrients100g."""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from .models import NormalizedNutrients100g

# target field -> Open Food Facts source key (all per 100 g)
NUTRIENT_SOURCE_KEYS: Dict[str, str] = {
    "energy_kj": "energy_100g",
    "energy_kcal": "energy-kcal_100g",
    "fat": "fat_100g",
    "saturated_fat": "saturated-fat_100g",
    "carbs": "carbohydrates_100g",
    "sugars": "sugars_100g",
    "fiber": "fiber_100g",
    "protein": "proteins_100g",
    "salt": "salt_100g",
    "sodium": "sodium_100g",
}


def _numeric(value: Any) -> Optional[float]:
    # bool is an int subclass; "12.5" stays unknown rather than being parsed.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def normalize_nutrients_100g(nutriments: Optional[Mapping[str, Any]]) -> NormalizedNutrients100g:
    if not isinstance(nutriments, Mapping):
        return NormalizedNutrients100g()
    values = {target: _numeric(nutriments.get(source)) for target, source in NUTRIENT_SOURCE_KEYS.items()}
    return NormalizedNutrients100g(**values)
