"""
Raw event coercion

Turns loosely-typed records from the upstream EPG feed into BroadcastEvent values.
A malformed field is degraded to a safe default and logged; it never rejects the batch.
"""
import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from app.services.layout_types import BroadcastEvent
from app.utils.timezone import DateFormatError, is_representable_epoch, iso8601_to_epoch

logger = logging.getLogger(__name__)

UNKNOWN_CHANNEL_ID = "unknown"

_CHANNEL_ID_KEYS = ("channelUuid", "channelId", "channel_id")
_CHANNEL_NUMBER_KEYS = ("channelNumber", "channel_number")
_CHANNEL_NAME_KEYS = ("channelName", "channel_name")
_DESCRIPTION_KEYS = ("description", "summary", "subtitle")


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def to_number(value: Any) -> float | None:
    """
    Coerce a value to a finite float.

    Args:
        value: int, float or numeric string

    Returns:
        The number, or None if the value is not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def to_epoch_seconds(value: Any) -> int | None:
    """
    Coerce a start/stop value to integer epoch seconds.

    Accepts numbers, numeric strings and ISO8601 strings. Times outside the
    range a datetime can represent (years 1 to 9999) are rejected.

    Returns:
        Epoch seconds, or None if the value cannot be interpreted
    """
    number = to_number(value)
    if number is not None:
        epoch = int(number)
    elif isinstance(value, str) and value.strip():
        try:
            epoch = iso8601_to_epoch(value.strip())
        except DateFormatError:
            return None
    else:
        return None
    return epoch if is_representable_epoch(epoch) else None


def _to_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def coerce_event(raw: Mapping[str, Any]) -> BroadcastEvent:
    """
    Build a BroadcastEvent from a raw feed record.

    Args:
        raw: Mapping with upstream field names (channelUuid, channelNumber, start, ...)

    Returns:
        BroadcastEvent with invalid fields replaced by safe defaults
    """
    name = _to_text(_first_present(raw, _CHANNEL_NAME_KEYS))
    channel_id = _first_present(raw, _CHANNEL_ID_KEYS)
    if channel_id is None:
        channel_id = name or UNKNOWN_CHANNEL_ID
        logger.warning("Event without channel id, grouping under '%s'", channel_id)

    raw_number = _first_present(raw, _CHANNEL_NUMBER_KEYS)
    number = to_number(raw_number)
    if raw_number is not None and number is None:
        logger.warning("Invalid channel number %r on channel %s", raw_number, channel_id)

    start = to_epoch_seconds(raw.get("start"))
    stop = to_epoch_seconds(raw.get("stop"))
    if start is None or stop is None:
        logger.warning(
            "Event '%s' on channel %s has invalid times (start=%r, stop=%r)",
            raw.get("title"),
            channel_id,
            raw.get("start"),
            raw.get("stop"),
        )

    description = _first_present(raw, _DESCRIPTION_KEYS)

    return BroadcastEvent(
        channel_id=_to_text(channel_id),
        channel_number=number,
        channel_name=name,
        start=start,
        stop=stop,
        title=_to_text(raw.get("title")),
        description=_to_text(description) if description is not None else None,
        genre=raw.get("genre"),
    )


def coerce_events(records: Iterable[Any]) -> list[BroadcastEvent]:
    """
    Coerce a raw event list, skipping records that are not mappings.

    Args:
        records: Iterable of raw feed records

    Returns:
        List of BroadcastEvent in input order
    """
    events: list[BroadcastEvent] = []
    skipped = 0

    for record in records:
        if isinstance(record, BroadcastEvent):
            events.append(record)
        elif isinstance(record, Mapping):
            events.append(coerce_event(record))
        else:
            skipped += 1

    if skipped:
        logger.warning("Skipped %s non-object event records", skipped)

    return events
