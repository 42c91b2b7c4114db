# -*- coding: utf-8 -*-
"""
Calorie tracker API

Food / water / activity logging, daily goals, favorites, daily summaries and
Open Food Facts barcode lookup. Every error leaves as ``{"error": "..."}``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .activity.api import router as activity_router
from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request, has_session_cookie
from .config import settings
from .favorites.api import router as favorites_router
from .food.api import router as food_router
from .goals.api import router as goals_router
from .openfoodfacts.api import router as products_router
from .summary.api import router as summary_router
from .water.api import router as water_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Calorie Tracker",
    description="Food, water and activity logging with daily nutrition summaries",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/auth/logout",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)

# UI pages that need a session; API routes are guarded separately.
PROTECTED_UI_PREFIXES = ("/dashboard", "/goals", "/activity", "/foods", "/favorites")
SIGNIN_PATH = "/signin"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = get_current_user_from_request(request)
            request.state.user = user
        except HTTPException as exc:
            return _error(exc.status_code, str(exc.detail))
    elif any(path.startswith(p) for p in PROTECTED_UI_PREFIXES) and not has_session_cookie(request):
        return RedirectResponse(f"{SIGNIN_PATH}?{urlencode({'redirect': path})}", status_code=307)
    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return _error(400, "; ".join(messages) or "Invalid request")


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


app.include_router(auth_router)
app.include_router(food_router)
app.include_router(water_router)
app.include_router(activity_router)
app.include_router(goals_router)
app.include_router(favorites_router)
app.include_router(summary_router)
app.include_router(products_router)


# Static frontend
frontend_dir = Path(__file__).resolve().parent.parent / "frontend"
if frontend_dir.exists():
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
