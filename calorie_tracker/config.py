from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


class Settings:
    """Centralized configuration for the calorie tracker backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("CALTRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("CALTRACK_DB_PATH") or (self.data_root / "calorie_tracker.db")
        ).expanduser()

        # In production you MUST set CALTRACK_JWT_SECRET. The dev secret only keeps local runs easy.
        self.jwt_secret: str = os.environ.get("CALTRACK_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("CALTRACK_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("CALTRACK_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}

        # IANA zone name used for day boundaries; empty means the server's local zone.
        self.timezone: Optional[str] = (os.environ.get("CALTRACK_TIMEZONE") or "").strip() or None

        self.off_base_url: str = os.environ.get(
            "CALTRACK_OFF_BASE_URL", "https://world.openfoodfacts.net/api/v2"
        )
        off_timeout = (os.environ.get("CALTRACK_OFF_TIMEOUT") or "").strip()
        self.off_timeout: Optional[float] = float(off_timeout) if off_timeout else None

        self.log_level: str = (os.environ.get("CALTRACK_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("CALTRACK_HOST", "127.0.0.1")
        self.port: int = int(os.environ.get("CALTRACK_PORT") or "8000")

        cors = os.environ.get("CALTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
