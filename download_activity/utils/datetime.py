"""Timezone handling for activity timestamps.

Events carry aware datetimes in the domain layer. The ``activity`` table stores
naive values that are implicitly in the application timezone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from download_activity.config import get_settings

_FIXED_OFFSET = re.compile(r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


def _parse_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass
    match = _FIXED_OFFSET.match(name)
    if match is None:
        return timezone.utc
    sign, hours, minutes = match.groups()
    offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(-offset if sign == "-" else offset)


def get_app_timezone() -> tzinfo:
    """Return the zone named by ``DOWNLOAD_ACTIVITY_APP_TIMEZONE``, UTC by default."""

    name = (get_settings().app_timezone or "").strip()
    return _parse_timezone(name) if name else timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the application timezone."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as a naive datetime in the application timezone."""

    aware = ensure_app_timezone(value)
    return aware.replace(tzinfo=None) if aware is not None else None
