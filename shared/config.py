"""Environment settings for the payment query backend.

``APP_ENV`` selects dev/local (loads ``.env``) versus test/ci behavior,
``PAYMENTS_TIMEZONE`` sets the zone of the system clock and
``PAYMENTS_SEED_ENABLED`` controls the sample data of the in-memory repository.
"""

from __future__ import annotations

import os
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true"}
_DOTENV_ENVS = {"dev", "local"}
_UNSEEDED_ENVS = {"test", "ci"}
_DEFAULT_TIMEZONE = "UTC"


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def app_env() -> str:
    """Return the normalized application environment, ``dev`` when unset."""
    return (get_env("APP_ENV", "") or "").strip().lower() or "dev"


if app_env() in _DOTENV_ENVS:
    load_dotenv()


def payments_timezone() -> str:
    """Return the IANA zone name used by the system clock, defaulting to UTC."""
    raw_value = (get_env("PAYMENTS_TIMEZONE", "") or "").strip()
    if not raw_value:
        return _DEFAULT_TIMEZONE

    try:
        ZoneInfo(raw_value)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "payments_timezone_unknown value=%s; falling back to %s",
            raw_value,
            _DEFAULT_TIMEZONE,
        )
        return _DEFAULT_TIMEZONE

    return raw_value


def payments_seed_enabled() -> bool:
    """Return whether the in-memory repository is seeded with sample payments."""
    raw_value = (get_env("PAYMENTS_SEED_ENABLED", "") or "").strip().lower()
    if raw_value:
        return raw_value in _TRUE_VALUES

    return app_env() not in _UNSEEDED_ENVS
