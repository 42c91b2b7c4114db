# -*- coding: utf-8 -*-
"""Calendar-day helpers shared by the record stores.

A day covers [00:00:00.000, 23:59:59.999] in the configured zone
(``settings.timezone``, else the server's local zone). Instants are stored as
epoch milliseconds.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from .config import settings


def service_tz() -> Optional[tzinfo]:
    # None means "server local", which datetime.astimezone() resolves.
    if settings.timezone:
        return ZoneInfo(settings.timezone)
    return None


def _localize(value: datetime) -> datetime:
    tz = service_tz()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz) if tz else value.astimezone()
    return value


def today() -> date:
    tz = service_tz()
    return datetime.now(tz).date() if tz else datetime.now().date()


def parse_day(value: Optional[str]) -> date:
    """Parse ``YYYY-MM-DD``; ``None``/empty means today. Raises ValueError."""
    if not value:
        return today()
    return date.fromisoformat(value.strip())


def day_bounds_ms(day: date) -> Tuple[int, int]:
    start = _localize(datetime.combine(day, time.min))
    next_start = _localize(datetime.combine(day + timedelta(days=1), time.min))
    return to_ms(start), to_ms(next_start) - 1


def to_ms(value: datetime) -> int:
    return int(round(_localize(value).timestamp() * 1000))


def now_ms() -> int:
    return int(round(datetime.now(timezone.utc).timestamp() * 1000))


def ms_to_iso(value_ms: int) -> str:
    instant = datetime.fromtimestamp(value_ms / 1000, tz=timezone.utc)
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")
