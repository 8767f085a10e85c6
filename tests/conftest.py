"""
Shared fixtures for the EPG grid tests.
"""
import pytest

from app.services.layout_types import BroadcastEvent, LayoutConfig
from app.services.render_coordinator import reset_render_coordinator


@pytest.fixture
def make_event():
    """Factory for BroadcastEvent with sensible defaults."""

    def _make(
        channel_id: str = "A",
        number: float | None = 1,
        start: int | None = 1000,
        stop: int | None = 1600,
        name: str | None = None,
        title: str = "Show",
        genre=None,
    ) -> BroadcastEvent:
        return BroadcastEvent(
            channel_id=channel_id,
            channel_number=number,
            channel_name=name if name is not None else f"Channel {channel_id}",
            start=start,
            stop=stop,
            title=title,
            genre=genre,
        )

    return _make


@pytest.fixture
def layout() -> LayoutConfig:
    """Layout matching the service defaults."""
    return LayoutConfig(px_per_minute=6, card_gap=4, min_event_width=5)


@pytest.fixture(autouse=True)
def fresh_coordinator():
    """Each test starts with an empty render coordinator."""
    reset_render_coordinator()
    yield
    reset_render_coordinator()
