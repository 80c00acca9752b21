"""
Application configuration defaults.

`create_app` overlays these with any ``CARHUB_*`` environment variables
through Flask's ``from_prefixed_env`` (e.g. ``CARHUB_DATA_PATH``).
"""

from pathlib import Path

import pytz

from .exceptions import ConfigurationError

BASE_DIR = Path(__file__).resolve().parents[1]
ENV_PREFIX = "CARHUB"


class Config:
    SECRET_KEY = "dev-secret-change-me"
    DATA_PATH = str(BASE_DIR / "data.json")
    ANALYTICS_TIMEZONE = "UTC"
    LOG_LEVEL = "INFO"


def resolve_timezone(name: str):
    """Return a pytz timezone for `name`; raise ConfigurationError if unknown."""
    try:
        return pytz.timezone(name or "UTC")
    except pytz.UnknownTimeZoneError:
        raise ConfigurationError(f"Error: unknown timezone '{name}'")
