"""
Channel Grouper

Partitions events by channel id and establishes the display order of channel rows.
"""
import logging
import math
from collections.abc import Sequence

from app.services.layout_types import BroadcastEvent, Channel

logger = logging.getLogger(__name__)


def _channel_sort_key(channel: Channel) -> float:
    # Channels without a usable number go after all numbered ones
    return channel.number if channel.number is not None else math.inf


def group_by_channel(events: Sequence[BroadcastEvent]) -> list[Channel]:
    """
    Group events into channels sorted by channel number.

    The first event seen for a channel id seeds its number and name; later
    events with the same id are appended as-is, even if their metadata differs.
    Ties on number keep first-seen order.

    Args:
        events: Events in input order

    Returns:
        Channels sorted ascending by number, each holding its events in input order
    """
    by_channel: dict[str, Channel] = {}

    for event in events:
        channel = by_channel.get(event.channel_id)
        if channel is None:
            channel = Channel(
                channel_id=event.channel_id,
                number=event.channel_number,
                name=event.channel_name,
            )
            by_channel[event.channel_id] = channel
        channel.events.append(event)

    channels = sorted(by_channel.values(), key=_channel_sort_key)
    logger.debug("Grouped %s events into %s channels", len(events), len(channels))
    return channels
