from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime


def parse_rfc1123(value: str) -> datetime:
    """
    Parse an RFC 1123 timestamp into tz-aware UTC datetime.

    Accepts strings like:
      - Wed, 21 Oct 2015 07:28:00 GMT
      - Wed, 1 Oct 2015 07:28:00 GMT
      - Wed, 21 Oct 2015 09:28:00 +0200
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("RFC1123 value must be a non-empty string")

    try:
        dt = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"not an RFC1123 timestamp: {value!r}") from exc

    # "-0000" means UTC with unknown local zone; email.utils returns it naive.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_rfc1123(dt: datetime) -> str:
    """Convert tz-aware datetime to RFC1123 text in GMT."""
    dt = normalize_dt(dt).astimezone(timezone.utc)
    return format_datetime(dt, usegmt=True)


def normalize_dt(dt: datetime) -> datetime:
    """Reject anything but a tz-aware datetime (record timestamps are absolute)."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt
