"""Instant parsing and formatting helpers shared by the models and the API."""
from datetime import datetime, date, timezone

import pytz

from .constants import DATE_FMT


def parse_instant(value):
    """
    Parse a booking/join timestamp into a ``datetime`` or ``date``.
    Supports:
      - ``datetime`` / ``date`` objects (returned as-is)
      - epoch milliseconds (int/float), as stored by the browser cache
      - 'YYYY-MM-DD' (returned as a date)
      - 'YYYY-MM-DD HH:MM[:SS]' and 'YYYY-MM-DDTHH:MM:SS'
      - Above with 'Z' or offsets like '+00:00'
    On any parse error returns None, so a bad record simply matches no window.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None

    s_norm = s.replace("T", " ")
    if s_norm.endswith("Z"):
        s_norm = s_norm[:-1] + "+00:00"

    if ":" not in s_norm:
        try:
            return datetime.strptime(s_norm, DATE_FMT).date()
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(s_norm)
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"):
        try:
            return datetime.strptime(s_norm, fmt)
        except ValueError:
            pass
    return None


def to_zone(value, tz):
    """
    Place a parsed instant in `tz`.
    Naive datetimes are assumed to be UTC; plain dates are already calendar
    dates in the policy timezone and are returned unchanged.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz)
    return value


def now_in(tz) -> datetime:
    """Current instant in `tz` (wrapper for easier testing/mocking)."""
    return datetime.now(pytz.UTC).astimezone(tz)
