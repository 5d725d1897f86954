"""Current-time providers injected into payment queries."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class DateTimeProvider(Protocol):
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""


def _require_aware(instant: datetime) -> datetime:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("FixedDateTimeProvider requires a timezone-aware datetime")
    return instant


class SystemDateTimeProvider:
    """Wall clock expressed in a fixed zone."""

    def __init__(self, tz: tzinfo | str = "UTC") -> None:
        self._tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedDateTimeProvider:
    """Clock frozen at one instant, for deterministic runs."""

    def __init__(self, instant: datetime) -> None:
        self._instant = _require_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = _require_aware(instant)
