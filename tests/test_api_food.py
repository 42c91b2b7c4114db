# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import httpx

from tests.support import ApiTestCase

BANANA = {
    "productName": "Banana",
    "servingSize": "1 medium",
    "servingSizeGrams": 118,
    "calories": 105,
    "protein": 1.3,
    "carbs": 27,
    "fat": 0.4,
    "fiber": 3.1,
    "mealType": "breakfast",
    "loggedAt": "2026-03-01T08:30:00Z",
}


class TestFoodApi(ApiTestCase):
    def test_log_and_list_for_day(self) -> None:
        headers = self.register()
        resp = self.client.post("/api/food/log", json=BANANA, headers=headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertTrue(body["success"])
        entry_id = body["id"]

        resp = self.client.get("/api/food/log", params={"date": "2026-03-01"}, headers=headers)
        entries = resp.json()["entries"]
        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry["id"], entry_id)
        self.assertEqual(entry["productName"], "Banana")
        self.assertEqual(entry["calories"], 105)
        self.assertEqual(entry["mealType"], "breakfast")
        self.assertEqual(entry["loggedAt"], "2026-03-01T08:30:00.000Z")
        self.assertIsNone(entry["saturatedFat"])

        resp = self.client.get("/api/food/log", params={"date": "2026-03-02"}, headers=headers)
        self.assertEqual(resp.json()["entries"], [])

    def test_unknown_macros_stay_null_and_zero_stays_zero(self) -> None:
        headers = self.register()
        self.client.post(
            "/api/food/log",
            json={"productName": "Water biscuit", "calories": 30, "protein": 0},
            headers=headers,
        )
        entry = self.client.get("/api/food/log", headers=headers).json()["entries"][0]
        self.assertEqual(entry["protein"], 0)
        self.assertIsNone(entry["carbs"])
        self.assertIsNone(entry["fat"])
        self.assertIsNone(entry["mealType"])

    def test_validation_errors_are_400(self) -> None:
        headers = self.register()
        for payload in (
            {"productName": "No calories"},
            {"productName": "Negative", "calories": -1},
            {"calories": 100},
            {"productName": "Bad meal", "calories": 10, "mealType": "brunch"},
        ):
            resp = self.client.post("/api/food/log", json=payload, headers=headers)
            self.assertEqual(resp.status_code, 400, payload)
            self.assertIn("error", resp.json())

    def test_invalid_date_filter(self) -> None:
        headers = self.register()
        resp = self.client.get("/api/food/log", params={"date": "03/01/2026"}, headers=headers)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Invalid date", resp.json()["error"])

    def test_newest_first_and_limit(self) -> None:
        headers = self.register()
        for hour in (7, 19, 12):
            self.client.post(
                "/api/food/log",
                json={"productName": f"meal-{hour}", "calories": hour, "loggedAt": f"2026-03-05T{hour:02d}:00:00Z"},
                headers=headers,
            )
        entries = self.client.get("/api/food/log", headers=headers).json()["entries"]
        self.assertEqual([e["productName"] for e in entries], ["meal-19", "meal-12", "meal-7"])

        entries = self.client.get("/api/food/log", params={"limit": 2}, headers=headers).json()["entries"]
        self.assertEqual([e["productName"] for e in entries], ["meal-19", "meal-12"])

        self.assertEqual(self.client.get("/api/food/log", params={"limit": 0}, headers=headers).status_code, 400)
        entries = self.client.get("/api/food/log", params={"limit": 5000}, headers=headers).json()["entries"]
        self.assertEqual(len(entries), 3)

    def test_entries_are_private_to_their_owner(self) -> None:
        alice = self.register()
        bob = self.register()
        self.client.post("/api/food/log", json={"productName": "Alice toast", "calories": 80}, headers=alice)
        self.assertEqual(self.client.get("/api/food/log", headers=bob).json()["entries"], [])


class TestBarcodeLogging(ApiTestCase):
    def test_scanned_product_is_logged_per_100g(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
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
                            "energy-kcal_100g": 539,
                            "fat_100g": 30.9,
                            "carbohydrates_100g": 57.5,
                            "proteins_100g": 6.3,
                        },
                    },
                },
            )

        self.use_off_handler(handler)
        headers = self.register()
        resp = self.client.post(
            "/api/food/log/barcode",
            json={"barcode": "3017624010701", "mealType": "snack", "loggedAt": "2026-03-10T16:00:00Z"},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)

        entry = self.client.get("/api/food/log", params={"date": "2026-03-10"}, headers=headers).json()["entries"][0]
        self.assertEqual(entry["barcode"], "3017624010701")
        self.assertEqual(entry["productName"], "Nutella")
        self.assertEqual(entry["brand"], "Ferrero")
        self.assertEqual(entry["servingSizeGrams"], 100)
        self.assertEqual(entry["calories"], 539)
        self.assertEqual(entry["fat"], 30.9)
        self.assertEqual(entry["carbs"], 57.5)
        self.assertEqual(entry["protein"], 6.3)
        self.assertIsNone(entry["fiber"])
        self.assertEqual(entry["mealType"], "snack")

    def test_product_without_name_or_energy(self) -> None:
        self.use_off_handler(
            lambda request: httpx.Response(200, json={"status": 1, "product": {"code": "123", "nutriments": {}}})
        )
        headers = self.register()
        resp = self.client.post("/api/food/log/barcode", json={"barcode": "123"}, headers=headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        entry = self.client.get("/api/food/log", headers=headers).json()["entries"][0]
        self.assertEqual(entry["productName"], "Unknown product")
        self.assertEqual(entry["calories"], 0)

    def test_unknown_barcode_logs_nothing(self) -> None:
        self.use_off_handler(lambda request: httpx.Response(200, json={"status": 0, "status_verbose": "product not found"}))
        headers = self.register()
        resp = self.client.post("/api/food/log/barcode", json={"barcode": "0000000000000"}, headers=headers)
        self.assertEqual(resp.status_code, 404)
        self.assertIn("0000000000000", resp.json()["error"])
        self.assertEqual(self.client.get("/api/food/log", headers=headers).json()["entries"], [])

    def test_upstream_failure_is_502(self) -> None:
        self.use_off_handler(lambda request: httpx.Response(503))
        headers = self.register()
        resp = self.client.post("/api/food/log/barcode", json={"barcode": "3017624010701"}, headers=headers)
        self.assertEqual(resp.status_code, 502)
        self.assertIn("error", resp.json())

    def test_unusable_product_data_is_502(self) -> None:
        headers = self.register()
        for product in (
            {"code": "111", "product_name": "x" * 600, "nutriments": {"energy-kcal_100g": 100}},
            {"code": "111", "product_name": "Odd", "nutriments": {"energy-kcal_100g": 100, "fat_100g": -3}},
        ):
            self.use_off_handler(lambda request, product=product: httpx.Response(200, json={"status": 1, "product": product}))
            resp = self.client.post("/api/food/log/barcode", json={"barcode": "111"}, headers=headers)
            self.assertEqual(resp.status_code, 502, product["product_name"][:10])
            self.assertEqual(resp.json(), {"error": "Unusable product data for barcode 111"})
        self.assertEqual(self.client.get("/api/food/log", headers=headers).json()["entries"], [])


if __name__ == "__main__":
    unittest.main()
