# utils/dates.py

"""
Timestamp helpers for generated documents.
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional

from dateutil import parser as date_parser


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-ish timestamp from the backend; None when missing or bad"""
    if not value:
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_iso_timestamp(value: datetime) -> str:
    """UTC ISO 8601 with milliseconds and a Z suffix"""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_rfc822(value: datetime) -> str:
    """RFC 822 date as used by RSS pubDate"""
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
