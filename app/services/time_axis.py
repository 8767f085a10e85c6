"""
Time Axis Calculator

Derives the shared time window, total grid width and hour ticks from a batch of events.
"""
import logging
from collections.abc import Sequence
from statistics import median_low

from app.services.layout_types import BroadcastEvent, EmptyDataError, Tick, TimeWindow
from app.utils.timezone import hour_label

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600


def seconds_to_px(seconds: float, px_per_minute: float) -> float:
    """Convert a duration in seconds to pixels at the given scale"""
    return (seconds / 60) * px_per_minute


def _drop_outlying_bounds(
    starts: list[int],
    stops: list[int],
    limit_sec: float
) -> tuple[list[int], list[int]]:
    """Keep only times within limit_sec of the median start (median stop if no starts)"""
    anchor = median_low(starts or stops)
    kept_starts = [value for value in starts if abs(value - anchor) <= limit_sec]
    kept_stops = [value for value in stops if abs(value - anchor) <= limit_sec]

    dropped = len(starts) + len(stops) - len(kept_starts) - len(kept_stops)
    if dropped:
        logger.warning(
            "Ignoring %s event times more than %.0f hours away from the schedule",
            dropped,
            limit_sec / SECONDS_PER_HOUR,
        )
    return kept_starts, kept_stops


def compute_time_window(
    events: Sequence[BroadcastEvent],
    px_per_minute: float,
    max_window_hours: float | None = None
) -> TimeWindow:
    """
    Compute the global time window for a batch of events.

    Events missing both start and stop are ignored; an event with a single
    usable bound contributes that bound only. With max_window_hours set, times
    further than that from the median start are left out of the window and the
    window itself is cut to that length.

    Args:
        events: Events of the current render pass
        px_per_minute: Horizontal scale
        max_window_hours: Longest window to lay out (unbounded when None)

    Returns:
        TimeWindow spanning the earliest start to the latest stop

    Raises:
        EmptyDataError: If there are no events or none carries a usable time
    """
    if not events:
        raise EmptyDataError("No events to lay out")

    starts = [event.start for event in events if event.start is not None]
    stops = [event.stop for event in events if event.stop is not None]

    if not starts and not stops:
        raise EmptyDataError("No event carries a usable start or stop time")

    limit_sec = max_window_hours * SECONDS_PER_HOUR if max_window_hours is not None else None
    if limit_sec is not None:
        starts, stops = _drop_outlying_bounds(starts, stops, limit_sec)

    bounds = starts + stops
    min_start = min(starts) if starts else min(bounds)
    max_end = max(stops) if stops else max(bounds)

    # Malformed batches (every stop before every start) still get a non-negative window
    if max_end < min_start:
        max_end = max(bounds)
        min_start = min(bounds)

    if limit_sec is not None and max_end - min_start > limit_sec:
        logger.warning(
            "Time window %s..%s exceeds %.0f hours, cutting it short",
            min_start,
            max_end,
            limit_sec / SECONDS_PER_HOUR,
        )
        max_end = min_start + int(limit_sec)

    grid_width = seconds_to_px(max_end - min_start, px_per_minute)
    logger.debug("Time window %s..%s, grid width %.1fpx", min_start, max_end, grid_width)

    return TimeWindow(min_start=min_start, max_end=max_end, grid_width=grid_width)


def compute_ticks(
    window: TimeWindow,
    px_per_minute: float,
    tz_name: str = "UTC",
    max_ticks: int | None = None
) -> list[Tick]:
    """
    Build hour-boundary ticks covering the time window.

    Boundaries are aligned to whole epoch hours starting at the hour containing
    min_start; a first boundary that falls before min_start is dropped.

    Args:
        window: Time window of the render pass
        px_per_minute: Horizontal scale
        tz_name: Display timezone for the labels
        max_ticks: Stop after this many ticks (unbounded when None)

    Returns:
        Ticks in ascending time order
    """
    ticks: list[Tick] = []
    first = (window.min_start // SECONDS_PER_HOUR) * SECONDS_PER_HOUR

    for boundary in range(first, window.max_end, SECONDS_PER_HOUR):
        left = seconds_to_px(boundary - window.min_start, px_per_minute)
        if left < 0:
            continue
        if max_ticks is not None and len(ticks) >= max_ticks:
            logger.warning("Hour ticks capped at %s", max_ticks)
            break
        ticks.append(Tick(left=left, timestamp=boundary, label=hour_label(boundary, tz_name)))

    return ticks
