from __future__ import annotations

"""RFC-822 and RFC-3339 date helpers.

All parsed values are timezone-aware UTC ``datetime`` objects.  Parsing is
tolerant: every ``parse_*`` function returns ``None`` for text it cannot
interpret instead of raising.
"""

import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

from dateutil.parser import isoparse

__all__ = [
    "parse_rfc822",
    "format_rfc822",
    "parse_rfc3339",
    "format_rfc3339",
    "normalize_datetime",
]

logger = logging.getLogger(__name__)

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Named and military zones rewritten to numeric offsets before parsing
_ZONE_OFFSETS = {
    "UT": "+0000",
    "GMT": "+0000",
    "Z": "+0000",
    "EST": "-0500",
    "EDT": "-0400",
    "CST": "-0600",
    "CDT": "-0500",
    "MST": "-0700",
    "MDT": "-0600",
    "PST": "-0800",
    "PDT": "-0700",
    "A": "-0100",
    "M": "-1200",
    "N": "+0100",
    "Y": "+1200",
}

_TRAILING_ZONE = re.compile(r"\s([A-Za-z]{1,3})\s*$")


def normalize_datetime(value: Optional[datetime], precision: str = "micro") -> Optional[datetime]:
    """Return *value* as an aware UTC datetime.

    Naive values are taken to be UTC.  With ``precision="seconds"``
    microseconds are dropped, matching what RFC-822 can represent.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    if precision == "seconds":
        value = value.replace(microsecond=0)
    return value


def parse_rfc822(text: Optional[str]) -> Optional[datetime]:
    """Parse an RFC-822 date such as ``Sun, 19 May 2002 15:21:36 GMT``.

    Falls back to :func:`parse_rfc3339` so producers that put ISO dates in
    RFC-822 fields still load.
    """
    if not text or not text.strip():
        return None
    candidate = text.strip()
    match = _TRAILING_ZONE.search(candidate)
    if match and match.group(1).upper() in _ZONE_OFFSETS:
        candidate = candidate[:match.start(1)] + _ZONE_OFFSETS[match.group(1).upper()]

    try:
        parsed = parsedate_to_datetime(candidate)
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is not None:
        return normalize_datetime(parsed)

    fallback = _parse_iso(text)
    if fallback is None:
        logger.debug("Skipping unparsable RFC-822 date %r", text)
    return fallback


def format_rfc822(value: datetime) -> str:
    """Format *value* in UTC, independent of the current locale."""
    value = normalize_datetime(value)
    return (
        f"{_DAY_NAMES[value.weekday()]}, {value.day:02d} "
        f"{_MONTH_NAMES[value.month - 1]} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} GMT"
    )


def parse_rfc3339(text: Optional[str]) -> Optional[datetime]:
    """Parse an RFC-3339 timestamp; values without a zone are taken as UTC.

    Falls back to RFC-822 parsing for producers that mix conventions.
    """
    if not text or not text.strip():
        return None
    parsed = _parse_iso(text)
    if parsed is not None:
        return parsed

    try:
        parsed = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is None:
        logger.debug("Skipping unparsable RFC-3339 date %r", text)
        return None
    return normalize_datetime(parsed)


def format_rfc3339(value: datetime) -> str:
    """Format *value* as ``YYYY-MM-DDTHH:MM:SS[.ffffff]Z`` in UTC."""
    value = normalize_datetime(value)
    stamp = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}T"
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        stamp += f".{value.microsecond:06d}".rstrip("0")
    return stamp + "Z"


def _parse_iso(text: str) -> Optional[datetime]:
    try:
        value = isoparse(text.strip())
    except (ValueError, OverflowError):
        return None
    return normalize_datetime(value)
