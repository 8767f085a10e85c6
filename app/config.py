import logging

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services.layout_types import LayoutConfig
from app.utils.timezone import get_zone


logger = logging.getLogger(__name__)


class CustomSettings(BaseSettings):
    """Application settings loaded from environment variables.

    Validates configuration at startup to catch misconfiguration early.
    """

    epg_px_per_minute: float = 6.0
    epg_card_gap: float = 4.0
    epg_min_event_width: float = 5.0
    epg_display_timezone: str = "UTC"
    epg_initial_scroll_margin: float = 0.02  # Fraction of viewport left of the now marker
    epg_max_window_hours: float = 336.0  # Longest time span laid out (14 days)

    render_interval_sec: int = 60  # Periodic re-render so "now" advances
    render_min_interval_sec: float = 5.0  # Throttle for repeated render requests
    render_misfire_grace_sec: int = 30

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("epg_px_per_minute", "epg_max_window_hours")
    @classmethod
    def validate_positive_floats(cls, value: float, info: ValidationInfo) -> float:
        """Ensure the time scale and window cap are positive."""
        if value <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return value

    @field_validator("epg_card_gap", "epg_min_event_width", "render_min_interval_sec")
    @classmethod
    def validate_non_negative_floats(cls, value: float, info: ValidationInfo) -> float:
        """Ensure pixel and throttle values are non-negative."""
        if value < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return value

    @field_validator("epg_display_timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Validate display timezone is a known IANA zone or 'UTC'."""
        get_zone(value)
        return value

    @field_validator("epg_initial_scroll_margin")
    @classmethod
    def validate_scroll_margin(cls, value: float) -> float:
        """Validate scroll margin ratio."""
        if not 0 <= value < 1:
            raise ValueError("epg_initial_scroll_margin must be in [0, 1)")
        return value

    @field_validator("render_interval_sec")
    @classmethod
    def validate_render_interval(cls, value: int) -> int:
        """Ensure the periodic render interval is positive."""
        if value <= 0:
            raise ValueError("render_interval_sec must be > 0")
        return value

    @field_validator("render_misfire_grace_sec")
    @classmethod
    def validate_misfire_grace(cls, value: int) -> int:
        """Validate scheduler misfire grace period (seconds)."""
        if value < 0:
            raise ValueError("render_misfire_grace_sec must be >= 0")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate logging level name."""
        normalized = value.upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    def layout_config(self, **overrides) -> LayoutConfig:
        """Build the layout parameters, applying any non-None overrides."""
        values = {
            "px_per_minute": self.epg_px_per_minute,
            "card_gap": self.epg_card_gap,
            "min_event_width": self.epg_min_event_width,
            "display_timezone": self.epg_display_timezone,
            "max_window_hours": self.epg_max_window_hours,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return LayoutConfig(**values)

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.info("Configuration loaded:")
        logger.info("  Pixels per minute: %s", self.epg_px_per_minute)
        logger.info("  Card gap: %spx", self.epg_card_gap)
        logger.info("  Min event width: %spx", self.epg_min_event_width)
        logger.info("  Display timezone: %s", self.epg_display_timezone)
        logger.info("  Initial scroll margin: %.2f", self.epg_initial_scroll_margin)
        logger.info("  Max window: %s hours", self.epg_max_window_hours)
        logger.info("  Render interval: %ss", self.render_interval_sec)
        logger.info("  Render throttle: %ss", self.render_min_interval_sec)
        logger.info("  Render misfire grace: %ss", self.render_misfire_grace_sec)


settings = CustomSettings()


def setup_logging() -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
