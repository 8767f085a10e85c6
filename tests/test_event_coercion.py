"""
Raw event coercion tests.
"""
import pytest

from app.utils.event_coercion import (
    UNKNOWN_CHANNEL_ID,
    coerce_event,
    coerce_events,
    to_epoch_seconds,
    to_number,
)


RAW_EVENT = {
    "channelUuid": "abc-123",
    "channelNumber": 5,
    "channelName": "M1",
    "start": 1700000000,
    "stop": 1700003600,
    "title": "Híradó",
    "description": "Esti hírek",
    "genre": [32],
}


class TestCoerceEvent:
    """Tests for coerce_event"""

    def test_well_formed(self):
        event = coerce_event(RAW_EVENT)

        assert event.channel_id == "abc-123"
        assert event.channel_number == 5
        assert event.channel_name == "M1"
        assert event.start == 1700000000
        assert event.stop == 1700003600
        assert event.title == "Híradó"
        assert event.description == "Esti hírek"
        assert event.genre == [32]

    def test_string_times(self):
        event = coerce_event({**RAW_EVENT, "start": "1700000000", "stop": "2023-11-14T22:13:20Z"})

        assert event.start == 1700000000
        assert event.stop == 1700000000

    def test_invalid_times_degrade_to_none(self):
        event = coerce_event({**RAW_EVENT, "start": "soon", "stop": None})

        assert event.start is None
        assert event.stop is None

    def test_invalid_channel_number(self):
        event = coerce_event({**RAW_EVENT, "channelNumber": "n/a"})

        assert event.channel_number is None

    def test_channel_id_falls_back_to_name(self):
        raw = {k: v for k, v in RAW_EVENT.items() if k != "channelUuid"}

        assert coerce_event(raw).channel_id == "M1"

    def test_channel_id_alias(self):
        raw = {k: v for k, v in RAW_EVENT.items() if k != "channelUuid"}
        raw["channelId"] = "xyz"

        assert coerce_event(raw).channel_id == "xyz"

    def test_missing_everything(self):
        event = coerce_event({})

        assert event.channel_id == UNKNOWN_CHANNEL_ID
        assert event.title == ""
        assert event.description is None
        assert event.genre is None

    def test_description_fallback(self):
        raw = {k: v for k, v in RAW_EVENT.items() if k != "description"}
        raw["subtitle"] = "Part 2"

        assert coerce_event(raw).description == "Part 2"

    def test_non_string_title(self):
        assert coerce_event({**RAW_EVENT, "title": 1984}).title == "1984"


class TestCoerceEvents:
    """Tests for coerce_events"""

    def test_skips_non_mappings(self):
        events = coerce_events([RAW_EVENT, "garbage", 42, None, RAW_EVENT])

        assert len(events) == 2

    def test_keeps_order(self):
        events = coerce_events([{**RAW_EVENT, "title": "1"}, {**RAW_EVENT, "title": "2"}])

        assert [e.title for e in events] == ["1", "2"]


class TestNumberCoercion:
    """Tests for to_number and to_epoch_seconds"""

    @pytest.mark.parametrize("value,expected", [(3, 3.0), ("4.5", 4.5), (" 7 ", 7.0)])
    def test_numbers(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, True, "abc", "", float("nan"), float("inf"), [1]])
    def test_not_numbers(self, value):
        assert to_number(value) is None

    def test_float_epoch_truncates(self):
        assert to_epoch_seconds(1700000000.9) == 1700000000

    def test_iso_with_offset(self):
        assert to_epoch_seconds("2023-11-14T23:13:20+01:00") == 1700000000

    @pytest.mark.parametrize("value", [None, "", "not a date", {}])
    def test_invalid_epochs(self, value):
        assert to_epoch_seconds(value) is None

    @pytest.mark.parametrize(
        "value",
        ["1e15", 10**15, -10**15, 1e300, 10**400, "99999-01-01T00:00:00Z", "0001-01-01T00:00:00+01:00"],
    )
    def test_unrepresentable_epochs(self, value):
        """Times a datetime cannot hold are rejected instead of accepted as valid."""
        assert to_epoch_seconds(value) is None

    def test_far_but_representable_epoch(self):
        assert to_epoch_seconds("9999-01-01T00:00:00Z") == 253370764800

    def test_out_of_range_times_degrade_event(self):
        event = coerce_event({**RAW_EVENT, "start": "1e15", "stop": "1e15"})

        assert event.start is None
        assert event.stop is None
