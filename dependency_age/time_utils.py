"""
Shared datetime helpers.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

ONE_DAY = timedelta(days=1)


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware UTC datetime."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp and normalize it to UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def days_since(released: datetime, now: Optional[datetime] = None) -> int:
    """Whole days between ``released`` and ``now``, partial days rounded up."""
    if now is None:
        now = utc_now()
    elapsed = abs(ensure_utc(now) - ensure_utc(released))
    days, remainder = divmod(elapsed, ONE_DAY)
    return days + 1 if remainder else days


def format_release_date(released: datetime, tz: Optional[tzinfo] = None) -> str:
    """Format as M/D/YYYY in the local timezone, or in ``tz`` when given."""
    local = ensure_utc(released).astimezone(tz)
    return f"{local.month}/{local.day}/{local.year}"
