"""
Date and Time utilities

This module handles epoch/ISO8601 conversions and the local-time labels shown on the grid.
Centralizes all date parsing logic to maintain consistency across the application.
"""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from functools import lru_cache
import logging

logger = logging.getLogger(__name__)


class DateFormatError(ValueError):
    """Raised when date format is invalid"""
    pass


def _normalize_iso8601_string(date_str: str) -> str:
    """Normalize ISO8601 string by replacing 'Z' with '+00:00'

    Args:
        date_str: ISO8601 datetime string

    Returns:
        Normalized string with explicit timezone offset
    """
    return date_str.replace('Z', '+00:00') if date_str.endswith('Z') else date_str


def parse_iso8601_to_utc(date_str: str) -> datetime:
    """
    Parse ISO8601 date string and convert to UTC datetime

    This is the single source of truth for date parsing across the application.

    Args:
        date_str: ISO8601 datetime string (e.g., '2025-10-09T00:00:00Z' or '2025-10-09T00:00:00+01:00')

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        DateFormatError: If the date string format is invalid
    """
    try:
        normalized = _normalize_iso8601_string(date_str)
        dt = datetime.fromisoformat(normalized)
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, AttributeError, OverflowError) as e:
        raise DateFormatError(f"Invalid ISO8601 datetime format: '{date_str}'") from e


def iso8601_to_epoch(date_str: str) -> int:
    """Parse an ISO8601 string into integer epoch seconds"""
    return int(parse_iso8601_to_utc(date_str).timestamp())


# One day inside datetime's year 1..9999 range so any display offset stays representable
EPOCH_MIN = int(datetime(1, 1, 2, tzinfo=timezone.utc).timestamp())
EPOCH_MAX = int(datetime(9999, 12, 30, tzinfo=timezone.utc).timestamp())


def is_representable_epoch(epoch: int | float) -> bool:
    """True when epoch seconds can be converted to a datetime in any timezone"""
    return EPOCH_MIN <= epoch <= EPOCH_MAX


@lru_cache(maxsize=32)
def get_zone(tz_name: str) -> ZoneInfo | timezone:
    """
    Resolve a display timezone name

    Args:
        tz_name: IANA timezone name or 'UTC'

    Returns:
        tzinfo instance for the name

    Raises:
        ValueError: If the timezone is unknown
    """
    if tz_name == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone: {tz_name}") from exc


def epoch_to_local(epoch: int | float, tz_name: str) -> datetime:
    """Convert epoch seconds to an aware datetime in the display timezone"""
    return datetime.fromtimestamp(epoch, tz=get_zone(tz_name))


def epoch_to_iso(epoch: int | float, tz_name: str = "UTC") -> str:
    """Convert epoch seconds to an ISO8601 string in the display timezone"""
    return epoch_to_local(epoch, tz_name).isoformat()


def hour_label(epoch: int | float, tz_name: str) -> str:
    """Label for an hour tick, e.g. '7:00'; empty when the time cannot be represented"""
    try:
        return f"{epoch_to_local(epoch, tz_name).hour}:00"
    except (OverflowError, ValueError, OSError):
        logger.warning("Cannot label hour tick at epoch %s", epoch)
        return ""


def clock_label(epoch: int | float, tz_name: str) -> str | None:
    """Two-digit 'HH:MM' label for an event start, or None when the time cannot be represented"""
    try:
        return epoch_to_local(epoch, tz_name).strftime("%H:%M")
    except (OverflowError, ValueError, OSError):
        logger.warning("Cannot label event start at epoch %s", epoch)
        return None


def utc_now_epoch() -> int:
    """Current wall-clock time in epoch seconds"""
    return int(datetime.now(timezone.utc).timestamp())
