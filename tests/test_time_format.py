"""Tests for race clock formatting and parsing."""

import pytest

from hyrox_analyzer.utils.time_format import format_time, parse_time


class TestFormatTime:
    """Tests for format_time."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (59, "0:59"),
        (270, "4:30"),
        (3599, "59:59"),
        (3600, "1:00:00"),
        (3723, "1:02:03"),
    ])
    def test_formats_minutes_and_hours(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_negative_values_keep_sign(self):
        """Signed gaps are rendered with a leading minus."""
        assert format_time(-45) == "-0:45"

    def test_fractional_seconds_are_truncated(self):
        assert format_time(270.9) == "4:30"


class TestParseTime:
    """Tests for parse_time."""

    @pytest.mark.parametrize("value,expected", [
        ("4:30", 270),
        ("04:30", 270),
        ("1:02:03", 3723),
        ("90", 90),
        (" 4:30 ", 270),
        ("4:30.7", 270),
    ])
    def test_parses_clock_strings(self, value, expected):
        assert parse_time(value) == expected

    def test_passes_through_non_negative_ints(self):
        assert parse_time(270) == 270
        assert parse_time(0) == 0

    def test_truncates_floats(self):
        assert parse_time(12.9) == 12

    @pytest.mark.parametrize("value", [
        "",
        "   ",
        "abc",
        "4:3x",
        "1:2:3:4",
        "-4:30",
        None,
        [],
        True,
        -5,
        -1.5,
    ])
    def test_unparseable_input_returns_zero(self, value):
        """Zero means missing, never a fast split."""
        assert parse_time(value) == 0

    def test_round_trips_formatted_values(self):
        for seconds in (0, 1, 59, 60, 270, 3599, 3600, 3723, 7265):
            assert parse_time(format_time(seconds)) == seconds
