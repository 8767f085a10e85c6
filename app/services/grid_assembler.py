"""
Grid Assembler

Composes grouping, time axis, geometry and genre colors into a single GridModel.
"""
import logging
import math
from collections.abc import Sequence

from app.services.channel_grouping import group_by_channel
from app.services.event_geometry import now_marker_left, resolve_geometry
from app.services.genre_colors import DEFAULT_GENRE_COLOR, resolve_genre_category
from app.services.layout_types import (
    EMPTY_DATA,
    BroadcastEvent,
    Channel,
    ChannelRow,
    EmptyData,
    EmptyDataError,
    EventCell,
    GridModel,
    LayoutConfig,
)
from app.services.time_axis import compute_ticks, compute_time_window
from app.utils.timezone import clock_label

logger = logging.getLogger(__name__)


def _build_row(channel: Channel, min_start: int, now: int, config: LayoutConfig) -> ChannelRow:
    cells = []
    for event in channel.events:
        category = resolve_genre_category(event.genre)
        cells.append(
            EventCell(
                event=event,
                geometry=resolve_geometry(event, min_start, now, config),
                color=category.color if category is not None else DEFAULT_GENRE_COLOR,
                genre_key=category.key if category is not None else None,
                start_label=(
                    clock_label(event.start, config.display_timezone)
                    if event.start is not None else None
                ),
            )
        )
    return ChannelRow(
        channel_id=channel.channel_id,
        number=channel.number,
        name=channel.name,
        cells=cells,
    )


def assemble(
    events: Sequence[BroadcastEvent],
    now: int,
    config: LayoutConfig | None = None
) -> GridModel | EmptyData:
    """
    Lay out a batch of events as a positioned grid.

    Args:
        events: Events of this render pass, in input order
        now: Current time in epoch seconds
        config: Layout parameters (defaults when omitted)

    Returns:
        GridModel, or EMPTY_DATA when no time window can be derived
    """
    config = config or LayoutConfig()

    try:
        window = compute_time_window(events, config.px_per_minute, config.max_window_hours)
    except EmptyDataError as exc:
        logger.info("Nothing to lay out: %s", exc)
        return EMPTY_DATA

    channels = group_by_channel(events)
    rows = [_build_row(channel, window.min_start, now, config) for channel in channels]

    return GridModel(
        min_start=window.min_start,
        max_end=window.max_end,
        grid_width=window.grid_width,
        now=now,
        now_left=now_marker_left(now, window.min_start, config.px_per_minute),
        ticks=compute_ticks(
            window,
            config.px_per_minute,
            config.display_timezone,
            max_ticks=math.ceil(config.max_window_hours) + 1,
        ),
        rows=rows,
    )
