# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import httpx

from tests.support import ApiTestCase


class TestProductLookupApi(ApiTestCase):
    def test_found_product_with_normalized_nutrients(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "code": "3017624010701",
                    "status": 1,
                    "product": {
                        "code": "3017624010701",
                        "product_name": "Nutella",
                        "brands": "Ferrero",
                        "nutriments": {
                            "energy_100g": 2252,
                            "energy-kcal_100g": 539,
                            "sugars_100g": 56.3,
                            "salt_100g": "0.107",
                        },
                    },
                },
            )

        self.use_off_handler(handler)
        headers = self.register()
        resp = self.client.get("/api/products/3017624010701", headers=headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["product"]["product_name"], "Nutella")
        self.assertEqual(body["product"]["nutriments"]["salt_100g"], "0.107")
        nutrients = body["nutrients"]
        self.assertEqual(nutrients["energyKj"], 2252)
        self.assertEqual(nutrients["energyKcal"], 539)
        self.assertEqual(nutrients["sugars"], 56.3)
        # Non-numeric values are unknown, not zero.
        self.assertIsNone(nutrients["salt"])
        self.assertIsNone(nutrients["protein"])
        self.assertEqual(seen[0].url.path, "/api/v2/product/3017624010701")

    def test_not_found(self) -> None:
        self.use_off_handler(lambda request: httpx.Response(200, json={"status": 0, "status_verbose": "product not found"}))
        headers = self.register()
        resp = self.client.get("/api/products/0000000000000", headers=headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Product not found for barcode 0000000000000"})

    def test_upstream_404_is_not_found(self) -> None:
        self.use_off_handler(lambda request: httpx.Response(404))
        headers = self.register()
        self.assertEqual(self.client.get("/api/products/1234", headers=headers).status_code, 404)

    def test_upstream_errors_are_502(self) -> None:
        headers = self.register()
        for response in (httpx.Response(500), httpx.Response(200, text="<html>oops</html>")):
            self.use_off_handler(lambda request, response=response: response)
            resp = self.client.get("/api/products/3017624010701", headers=headers)
            self.assertEqual(resp.status_code, 502)
            self.assertIn("error", resp.json())

    def test_success_envelope_without_product_is_not_found(self) -> None:
        from fastapi import HTTPException

        from calorie_tracker.openfoodfacts.api import lookup_or_http_error
        from calorie_tracker.openfoodfacts.models import OffProductResponse

        class _EmptyLookup:
            def get_product_by_barcode(self, barcode):
                return OffProductResponse(code=barcode, status=1, product=None)

        with self.assertRaises(HTTPException) as ctx:
            lookup_or_http_error(_EmptyLookup(), "42")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_network_failure_is_502(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.use_off_handler(handler)
        headers = self.register()
        resp = self.client.get("/api/products/3017624010701", headers=headers)
        self.assertEqual(resp.status_code, 502)


if __name__ == "__main__":
    unittest.main()
