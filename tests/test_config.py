"""
Settings validation tests.
"""
import pytest
from pydantic import ValidationError

from app.config import CustomSettings


class TestSettingsValidation:
    """Tests for CustomSettings validators"""

    @pytest.mark.parametrize("field", ["epg_px_per_minute", "epg_max_window_hours"])
    def test_positive_fields_reject_zero(self, field):
        with pytest.raises(ValidationError, match=f"{field} must be > 0"):
            CustomSettings(**{field: 0})

    @pytest.mark.parametrize("field", ["epg_card_gap", "epg_min_event_width", "render_min_interval_sec"])
    def test_non_negative_fields_reject_negatives(self, field):
        with pytest.raises(ValidationError, match=f"{field} must be >= 0"):
            CustomSettings(**{field: -1})

    def test_layout_config_carries_window_cap(self):
        layout = CustomSettings(epg_max_window_hours=48).layout_config()

        assert layout.max_window_hours == 48
