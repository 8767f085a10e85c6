"""
Render Coordination

Owns the host-side state of the grid: the latest delivered event batch, the last
rendered model and the last-render timestamp used for throttling.
The layout itself stays a pure function of (events, now, config).
"""
import logging
from collections.abc import Iterable
from time import perf_counter
from typing import Any

from app.config import settings
from app.services.grid_assembler import assemble
from app.services.layout_types import BroadcastEvent, EmptyData, GridModel, LayoutConfig
from app.utils.event_coercion import coerce_events
from app.utils.logging_helpers import log_ingest_summary, log_render_summary
from app.utils.timezone import utc_now_epoch


logger = logging.getLogger(__name__)


class RenderCoordinator:
    """
    Coordinates grid renders for the host adapter.

    New data always triggers a render. Repeated render requests within
    `min_interval_sec` of the last one, with no new data, return the previous
    result instead of recomputing it.
    """

    def __init__(self, layout: LayoutConfig, min_interval_sec: float = 0.0):
        """Initialize the coordinator with layout parameters and a throttle interval."""
        self.layout = layout
        self.min_interval_sec = min_interval_sec
        self._events: list[BroadcastEvent] = []
        self._result: GridModel | EmptyData | None = None
        self._last_render: float | None = None
        self._dirty = True

    @property
    def events(self) -> list[BroadcastEvent]:
        return list(self._events)

    @property
    def last_render(self) -> float | None:
        """Epoch seconds of the last completed render, if any"""
        return self._last_render

    @property
    def latest(self) -> GridModel | EmptyData | None:
        return self._result

    def ingest(self, records: Iterable[Any], now: int | None = None) -> GridModel | EmptyData:
        """
        Replace the current event batch and render it.

        Args:
            records: Raw feed records or BroadcastEvent values
            now: Current time override (epoch seconds)

        Returns:
            Freshly rendered grid or empty-data signal
        """
        records = list(records)
        self._events = coerce_events(records)
        self._dirty = True
        log_ingest_summary(logger, len(records), len(self._events))
        return self.render(now=now, force=True)

    def should_render(self, now: float, explicit: bool = False) -> bool:
        """
        True when a render request at `now` must recompute the grid.

        An explicit `now` that differs from the one the cached grid was laid
        out for always recomputes; the throttle only applies to wall-clock renders.
        """
        if self._dirty or self._result is None or self._last_render is None:
            return True
        if explicit and isinstance(self._result, GridModel) and self._result.now != now:
            return True
        return (now - self._last_render) >= self.min_interval_sec

    def render(self, now: int | None = None, force: bool = False) -> GridModel | EmptyData:
        """
        Render the current batch, subject to throttling.

        Args:
            now: Current time override (epoch seconds); wall clock when omitted
            force: Skip the throttle check

        Returns:
            Grid model or empty-data signal
        """
        current = utc_now_epoch() if now is None else now

        if not force and not self.should_render(current, explicit=now is not None):
            logger.debug("Render throttled, returning previous grid")
            return self._result

        started = perf_counter()
        self._result = assemble(self._events, current, self.layout)
        log_render_summary(logger, self._result, (perf_counter() - started) * 1000)

        self._last_render = current
        self._dirty = False
        return self._result


# Global singleton instance
_coordinator: RenderCoordinator | None = None


def get_render_coordinator() -> RenderCoordinator:
    """
    Get or create the global render coordinator singleton.

    Returns:
        The global RenderCoordinator instance
    """
    global _coordinator
    if _coordinator is None:
        _coordinator = RenderCoordinator(
            layout=settings.layout_config(),
            min_interval_sec=settings.render_min_interval_sec,
        )
    return _coordinator


def reset_render_coordinator() -> None:
    """
    Reset the render coordinator (mainly for testing).

    WARNING: Only use this in test environments!
    """
    global _coordinator
    _coordinator = None
