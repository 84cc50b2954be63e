"""Date helpers exposed to templates.

Formats use :meth:`datetime.strftime` directives. ``when`` may be a
``datetime``, a ``date`` or a number of seconds since the epoch; anything
else is passed through unchanged.
"""
from __future__ import annotations

import logging
import re
from datetime import date as _date, datetime, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

HTML_DATE_FORMAT = "%Y-%m-%d"

_DURATION_RE = re.compile(r"^([+-])?((?:\d+(?:\.\d*)?|\.\d+)(?:us|ms|s|m|h))+$")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(us|ms|s|m|h)")
_UNIT_SECONDS = {"us": 1e-6, "ms": 1e-3, "s": 1.0, "m": 60.0, "h": 3600.0}


def _as_datetime(when: Any) -> Optional[datetime]:
    if isinstance(when, datetime):
        return when
    if isinstance(when, _date):
        return datetime(when.year, when.month, when.day)
    if isinstance(when, (int, float)) and not isinstance(when, bool):
        try:
            return datetime.fromtimestamp(when, tz=timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError):
            return None
    return None


def _zone(name: Any) -> Optional[ZoneInfo]:
    try:
        return ZoneInfo(str(name))
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown time zone %r; using local time", name)
        return None


def parse_duration(text: Any) -> Optional[timedelta]:
    """Parse a duration such as ``1h30m``, ``-45s`` or ``1.5h``.

    Returns:
        The timedelta, or None when ``text`` is not a valid duration
    """
    raw = str(text).strip()
    if not _DURATION_RE.match(raw):
        return None
    sign = -1.0 if raw.startswith("-") else 1.0
    seconds = sum(float(amount) * _UNIT_SECONDS[unit] for amount, unit in _DURATION_PART_RE.findall(raw))
    return timedelta(seconds=sign * seconds)


def now() -> datetime:
    return datetime.now().astimezone()


def date(fmt: Any, when: Any) -> Any:
    moment = _as_datetime(when)
    if moment is None:
        return when
    return moment.strftime(str(fmt))


def dateinzone(fmt: Any, when: Any, zone: Any) -> Any:
    moment = _as_datetime(when)
    if moment is None:
        return when
    tz = _zone(zone)
    if tz is not None:
        moment = moment.astimezone(tz)
    return moment.strftime(str(fmt))


def htmldate(when: Any) -> Any:
    return date(HTML_DATE_FORMAT, when)


def htmldateinzone(when: Any, zone: Any) -> Any:
    return dateinzone(HTML_DATE_FORMAT, when, zone)


def datemodify(modifier: Any, when: Any) -> Any:
    """Shift ``when`` by a duration; invalid input returns ``when`` unchanged."""
    moment = _as_datetime(when)
    delta = parse_duration(modifier)
    if moment is None or delta is None:
        return when
    return moment + delta


# Only template-facing functions; the registry registers everything listed here.
__all__ = [
    "now",
    "date",
    "dateinzone",
    "htmldate",
    "htmldateinzone",
    "datemodify",
]
