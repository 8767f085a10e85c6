"""
Event Geometry Resolver

Computes horizontal placement of event cards and of the shared "now" marker.
Geometry is derived on every render and never stored on the event.
"""
from app.services.layout_types import BroadcastEvent, EventGeometry, LayoutConfig
from app.services.time_axis import seconds_to_px


def is_current(event: BroadcastEvent, now: int) -> bool:
    """True when the event is airing at `now` (start inclusive, stop exclusive)"""
    if event.start is None or event.stop is None:
        return False
    return event.start <= now < event.stop


def resolve_geometry(
    event: BroadcastEvent,
    min_start: int,
    now: int,
    config: LayoutConfig
) -> EventGeometry:
    """
    Resolve the horizontal geometry of one event.

    Width is the duration minus the card gap, clamped to the configured floor
    so zero, negative or malformed durations stay visible. A missing start
    pins the card to the left edge; a missing stop is treated as zero duration.

    Args:
        event: Event to place
        min_start: Start of the shared time window
        now: Current time in epoch seconds
        config: Layout parameters

    Returns:
        EventGeometry with left, width and is_current
    """
    if event.start is None:
        left = 0.0
        duration = 0
    else:
        left = seconds_to_px(event.start - min_start, config.px_per_minute)
        duration = (event.stop - event.start) if event.stop is not None else 0

    width = seconds_to_px(duration, config.px_per_minute) - config.card_gap

    return EventGeometry(
        left=left,
        width=max(width, config.min_event_width),
        is_current=is_current(event, now),
    )


def now_marker_left(now: int, min_start: int, px_per_minute: float) -> float:
    """Offset of the now marker; may fall outside the grid"""
    return seconds_to_px(now - min_start, px_per_minute)


def initial_scroll_left(now_left: float, viewport_width: float, margin_ratio: float = 0.02) -> float:
    """
    Scroll offset that brings the now marker into view.

    Leaves a small leading margin proportional to the viewport width.
    """
    return max(0.0, now_left - viewport_width * margin_ratio)
