from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from app.utils.timezone import EPOCH_MAX, EPOCH_MIN, get_zone


class EventBatch(BaseModel):
    """Raw EPG event list as delivered by the host's fetch"""
    epg: list[Any] = Field(default_factory=list, description="Raw event records (channelUuid, channelNumber, channelName, start, stop, title, genre, ...)")


class LayoutOverrides(BaseModel):
    """Optional per-request layout parameters; unset values fall back to settings"""
    px_per_minute: float | None = Field(None, gt=0, description="Horizontal scale in pixels per minute")
    card_gap: float | None = Field(None, ge=0, description="Gap subtracted from each event width")
    min_event_width: float | None = Field(None, ge=0, description="Minimum event card width in pixels")
    timezone: str | None = Field(None, description="Timezone for tick and start labels (e.g., 'UTC', 'Europe/Budapest')")
    viewport_width: float | None = Field(None, gt=0, description="Visible grid width, used to compute the initial scroll offset")

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate timezone string"""
        if v is None:
            return v
        try:
            get_zone(v)
            return v
        except ValueError:
            raise ValueError(f"Invalid timezone: {v}. Must be a valid IANA timezone (e.g., 'Europe/Budapest', 'America/New_York') or 'UTC'")


class GridRenderRequest(LayoutOverrides):
    """Stateless render request"""
    epg: list[Any] = Field(default_factory=list, description="Raw event records")
    now: int | None = Field(None, ge=EPOCH_MIN, le=EPOCH_MAX, description="Current time in epoch seconds; server clock when omitted")


class TickResponse(BaseModel):
    """Hour tick on the time axis"""
    left: float
    timestamp: int
    label: str


class EventCellResponse(BaseModel):
    """Positioned event card"""
    title: str
    description: str | None
    start: int | None
    stop: int | None
    start_label: str | None = Field(None, description="Local 'HH:MM' start time")
    left: float
    width: float
    is_current: bool
    color: str
    genre_key: str | None


class ChannelRowResponse(BaseModel):
    """One channel row of the grid"""
    channel_id: str
    number: float | None
    name: str
    events: list[EventCellResponse]


class GridBody(BaseModel):
    """Markup-free grid description"""
    min_start: int
    max_end: int
    grid_width: float
    now: int
    now_left: float
    initial_scroll_left: float | None = Field(None, description="Scroll offset bringing the now marker into view")
    ticks: list[TickResponse]
    channels: list[ChannelRowResponse]


class GridResponse(BaseModel):
    """Grid render response"""
    status: Literal["ok", "empty"]
    timestamp: str
    timezone: str = Field(..., description="Timezone used for all labels in the response")
    message: str | None = None
    grid: GridBody | None = None


class IngestResponse(BaseModel):
    """Result of delivering a new event batch"""
    received: int
    accepted: int
    channels: int
    render: GridResponse
