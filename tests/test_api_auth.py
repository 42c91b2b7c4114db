# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from tests.support import ApiTestCase


class TestAuthApi(ApiTestCase):
    def test_api_requires_authentication(self) -> None:
        unauth = TestClient(self.app)
        for method, path in (
            ("get", "/api/summary"),
            ("get", "/api/food/log"),
            ("post", "/api/water/log"),
            ("get", "/api/goals"),
            ("delete", "/api/favorites?id=x"),
            ("get", "/api/products/3017624010701"),
        ):
            resp = getattr(unauth, method)(path)
            self.assertEqual(resp.status_code, 401, path)
            self.assertEqual(resp.json(), {"error": "Unauthorized"})
        unauth.close()

    def test_invalid_token_is_rejected(self) -> None:
        resp = self.client.get("/api/goals", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(resp.status_code, 401)
        self.assertIn("error", resp.json())

    def test_non_ascii_token_is_rejected(self) -> None:
        for value in (b"Bearer a.b.\xe9", b"Bearer \xe9.\xe9.\xe9"):
            resp = self.client.get("/api/goals", headers={"Authorization": value})
            self.assertEqual(resp.status_code, 401, value)
            self.assertEqual(resp.json(), {"error": "Invalid token"})

    def test_health_is_public(self) -> None:
        resp = TestClient(self.app).get("/api/health")
        self.assertEqual(resp.json(), {"ok": True})

    def test_register_login_me(self) -> None:
        email = "Someone@Example.com"
        password = "password123"
        resp = self.client.post("/api/auth/register", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["email"], "someone@example.com")
        self.assertIn("createdAt", user)

        resp = self.client.post("/api/auth/register", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Email already registered"})

        resp = self.client.post("/api/auth/login", json={"email": email, "password": "wrong-password"})
        self.assertEqual(resp.status_code, 401)

        self.client.cookies.clear()
        resp = self.client.post("/api/auth/login", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200)

        # Session cookie alone authenticates.
        resp = self.client.get("/api/auth/me")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], user["id"])

        resp = self.client.post("/api/auth/logout")
        self.assertEqual(resp.json(), {"success": True})
        self.client.cookies.clear()
        self.assertEqual(self.client.get("/api/auth/me").status_code, 401)

    def test_short_password_is_a_validation_error(self) -> None:
        resp = self.client.post("/api/auth/register", json={"email": "short@example.com", "password": "123"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("password", resp.json()["error"])

    def test_protected_pages_redirect_to_signin(self) -> None:
        unauth = TestClient(self.app, follow_redirects=False)
        resp = unauth.get("/dashboard")
        self.assertEqual(resp.status_code, 307)
        self.assertEqual(resp.headers["location"], "/signin?redirect=%2Fdashboard")

        resp = unauth.get("/favorites/list")
        self.assertEqual(resp.headers["location"], "/signin?redirect=%2Ffavorites%2Flist")

        # Unprotected pages are not redirected.
        self.assertNotEqual(unauth.get("/signin").status_code, 307)
        unauth.close()

    def test_deleting_account_removes_its_records(self) -> None:
        headers = self.register()
        user_id = self.client.get("/api/auth/me", headers=headers).json()["id"]
        self.client.post("/api/food/log", json={"productName": "Apple", "calories": 52}, headers=headers)
        self.client.post("/api/goals", json={"dailyCalories": 1800}, headers=headers)

        resp = self.client.delete("/api/auth/me", headers=headers)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(self.client.get("/api/auth/me", headers=headers).status_code, 401)

        from calorie_tracker.app_db import db_conn
        from calorie_tracker.config import settings

        with db_conn(settings.app_db_path) as conn:
            food = conn.execute("SELECT COUNT(*) AS n FROM food_entries WHERE user_id = ?", (user_id,)).fetchone()["n"]
            goals = conn.execute("SELECT COUNT(*) AS n FROM goals WHERE user_id = ?", (user_id,)).fetchone()["n"]
        self.assertEqual(food, 0)
        self.assertEqual(goals, 0)


if __name__ == "__main__":
    unittest.main()
