# -*- coding: utf-8 -*-
"""Open Food Facts integration: barcode lookup client and nutrient normalization."""
