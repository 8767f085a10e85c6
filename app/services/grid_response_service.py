"""
Grid Response Service

Converts layout results into API response models.
"""
import logging

from app.schemas import (
    ChannelRowResponse,
    EventCellResponse,
    GridBody,
    GridResponse,
    TickResponse,
)
from app.services.event_geometry import initial_scroll_left
from app.services.layout_types import ChannelRow, EmptyData, GridModel, LayoutConfig
from app.utils.timezone import epoch_to_iso, utc_now_epoch

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No EPG data"


def build_grid_response(
    result: GridModel | EmptyData | None,
    layout: LayoutConfig,
    viewport_width: float | None = None,
    scroll_margin: float = 0.02
) -> GridResponse:
    """
    Build the API response for a render result

    Args:
        result: Grid model, empty-data signal, or None when nothing was rendered yet
        layout: Layout parameters used for the render
        viewport_width: Visible width for the initial scroll offset (optional)
        scroll_margin: Fraction of the viewport kept left of the now marker

    Returns:
        GridResponse with status 'ok' or 'empty'
    """
    timestamp = epoch_to_iso(utc_now_epoch(), layout.display_timezone)

    if result is None or isinstance(result, EmptyData):
        return GridResponse(
            status="empty",
            timestamp=timestamp,
            timezone=layout.display_timezone,
            message=EMPTY_MESSAGE,
        )

    scroll_left = (
        initial_scroll_left(result.now_left, viewport_width, scroll_margin)
        if viewport_width else None
    )

    return GridResponse(
        status="ok",
        timestamp=timestamp,
        timezone=layout.display_timezone,
        grid=GridBody(
            min_start=result.min_start,
            max_end=result.max_end,
            grid_width=result.grid_width,
            now=result.now,
            now_left=result.now_left,
            initial_scroll_left=scroll_left,
            ticks=[
                TickResponse(left=tick.left, timestamp=tick.timestamp, label=tick.label)
                for tick in result.ticks
            ],
            channels=[_row_response(row) for row in result.rows],
        ),
    )


def _row_response(row: ChannelRow) -> ChannelRowResponse:
    """Convert a channel row and its cells"""
    return ChannelRowResponse(
        channel_id=row.channel_id,
        number=row.number,
        name=row.name,
        events=[
            EventCellResponse(
                title=cell.event.title,
                description=cell.event.description,
                start=cell.event.start,
                stop=cell.event.stop,
                start_label=cell.start_label,
                left=cell.geometry.left,
                width=cell.geometry.width,
                is_current=cell.geometry.is_current,
                color=cell.color,
                genre_key=cell.genre_key,
            )
            for cell in row.cells
        ],
    )
