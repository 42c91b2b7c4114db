# -*- coding: utf-8 -*-
"""Shared setup for API tests: isolated data root, fresh app, user helpers."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Dict, Optional
from uuid import uuid4

from fastapi.testclient import TestClient

_ENV_KEYS = ("CALTRACK_DATA_ROOT", "CALTRACK_DB_PATH", "CALTRACK_JWT_SECRET", "CALTRACK_TIMEZONE")


def reload_app(env: Dict[str, str]):
    os.environ.update(env)
    # Settings are read at import time; drop cached modules so the app sees the env above.
    for name in list(sys.modules.keys()):
        if name == "calorie_tracker" or name.startswith("calorie_tracker."):
            sys.modules.pop(name, None)

    from calorie_tracker.api import app  # noqa: WPS433 (import inside test for env control)

    return app


class ApiTestCase(unittest.TestCase):
    timezone = "UTC"

    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="caltrack-test-"))
        data_root = cls._tmp / "data"
        cls.app = reload_app(
            {
                "CALTRACK_DATA_ROOT": str(data_root),
                "CALTRACK_DB_PATH": str(data_root / "calorie_tracker.db"),
                "CALTRACK_JWT_SECRET": "test-secret",
                "CALTRACK_TIMEZONE": cls.timezone,
            }
        )
        cls.client = TestClient(cls.app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.app.dependency_overrides.clear()
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)
        for key in _ENV_KEYS:
            os.environ.pop(key, None)

    def register(self, email: Optional[str] = None, password: str = "password123") -> Dict[str, str]:
        """Register a fresh user and return bearer headers for it."""
        email = email or f"user-{uuid4().hex[:12]}@example.com"
        resp = self.client.post("/api/auth/register", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        # Keep requests explicit: no session cookie carried between users.
        self.client.cookies.clear()
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def use_off_handler(self, handler) -> None:
        """Route Open Food Facts lookups for this test through an ``httpx.MockTransport`` handler."""
        import httpx

        # Imported after reload_app so the override and the app share one module.
        from calorie_tracker.openfoodfacts.api import get_off_client
        from calorie_tracker.openfoodfacts.client import OpenFoodFactsClient

        def _override():
            with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
                yield OpenFoodFactsClient("https://off.test/api/v2", http_client=http_client)

        self.app.dependency_overrides[get_off_client] = _override
        self.addCleanup(self.app.dependency_overrides.pop, get_off_client, None)
