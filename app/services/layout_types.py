"""
Shared dataclasses used across the EPG layout pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final


@dataclass(slots=True, frozen=True)
class BroadcastEvent:
    """A single scheduled broadcast as delivered by the upstream EPG feed."""
    channel_id: str
    channel_number: float | None
    channel_name: str
    start: int | None
    stop: int | None
    title: str
    description: str | None = None
    genre: Any = None


@dataclass(slots=True)
class Channel:
    """Events grouped under one channel id, in input order."""
    channel_id: str
    number: float | None
    name: str
    events: list[BroadcastEvent] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Pixel scale and clamping parameters for one render pass."""
    px_per_minute: float = 6.0
    card_gap: float = 4.0
    min_event_width: float = 5.0
    display_timezone: str = "UTC"
    max_window_hours: float = 336.0


@dataclass(slots=True, frozen=True)
class TimeWindow:
    min_start: int
    max_end: int
    grid_width: float


@dataclass(slots=True, frozen=True)
class Tick:
    left: float
    timestamp: int
    label: str


@dataclass(slots=True, frozen=True)
class EventGeometry:
    left: float
    width: float
    is_current: bool


@dataclass(slots=True, frozen=True)
class EventCell:
    """A positioned event ready for the rendering layer."""
    event: BroadcastEvent
    geometry: EventGeometry
    color: str
    genre_key: str | None
    start_label: str | None


@dataclass(slots=True, frozen=True)
class ChannelRow:
    channel_id: str
    number: float | None
    name: str
    cells: list[EventCell]


@dataclass(slots=True, frozen=True)
class GridModel:
    """Complete, markup-free description of one rendered grid."""
    min_start: int
    max_end: int
    grid_width: float
    now: int
    now_left: float
    ticks: list[Tick]
    rows: list[ChannelRow]

    @property
    def event_count(self) -> int:
        return sum(len(row.cells) for row in self.rows)


class EmptyData:
    """Signal returned instead of a grid when there is nothing to lay out."""

    _instance: EmptyData | None = None

    def __new__(cls) -> EmptyData:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY_DATA"

    def __bool__(self) -> bool:
        return False


EMPTY_DATA: Final = EmptyData()


class EmptyDataError(ValueError):
    """Raised when no time window can be derived from the events"""
    pass


__all__ = [
    "BroadcastEvent",
    "Channel",
    "ChannelRow",
    "EMPTY_DATA",
    "EmptyData",
    "EmptyDataError",
    "EventCell",
    "EventGeometry",
    "GridModel",
    "LayoutConfig",
    "Tick",
    "TimeWindow",
]
