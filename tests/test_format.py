"""Pattern, humanized and ISO 8601 rendering tests."""

import pytest

from pyduration import Duration, DurationParts, InvalidPatternError
from pyduration._format import format_number, format_pattern, has_seconds_token


class TestFormatPattern:
    @pytest.mark.parametrize(
        "value, pattern, expected",
        [
            ("1d 10H 15m 30s", "dd hh:mm:ss", "01 10:15:30"),
            ("5h 30m", "HH:mm", "05:30"),
            ("2h 15m 45s", "h:m:s", "2:15:45"),
            ("1d 6h", "H:mm:ss", "30:00:00"),
            ("45m 30s", "h:mm:ss", "0:45:30"),
            ("90m", "HH:mm", "01:30"),
            ("3600s", "hh:mm:ss", "01:00:00"),
            ("2d 5h 30m", "d h:mm", "2 5:30"),
            ("1d 12h", "dd hh", "01 12"),
            ("59m 59s", "mm:ss", "59:59"),
            ("2h 0m 1s", "h:mm:ss", "2:00:01"),
            ("48h", "d hh:mm", "2 00:00"),
            ("1d 1h 1m 1s", "d h:mm:ss", "1 1:01:01"),
            ("23h 59m 59s", "HH:mm:ss", "23:59:59"),
            ("1d 0h 0m 1s", "dd hh:mm:ss", "01 00:00:01"),
            ("72h 0m", "dd hh:mm", "03 00:00"),
            ("47h 59m 59s", "HH:mm:ss", "47:59:59"),
            ("0d 5h 30m", "dd hh:mm", "00 05:30"),
            ("1h 30m 45s", "h:mm:SS", "1:30:45"),
            ("36h 0m 0s", "HH:mm:ss", "36:00:00"),
            ("1s", "SS", "01"),
        ],
    )
    def test_patterns(self, value, pattern, expected):
        assert Duration(value).format(pattern) == expected

    def test_lowercase_seconds_keep_fraction(self):
        assert Duration.from_seconds(90.5).format("hh:mm:s") == "00:01:30.5"

    def test_padded_seconds_keep_fraction(self):
        assert Duration(5.25).format("ss") == "05.25"

    def test_uppercase_seconds_truncate(self):
        assert Duration(30.9).format("SS") == "30"

    def test_literal_text_passes_through(self):
        assert Duration("2h 5m").format("[hh] -> mm!") == "[02] -> 05!"

    def test_uppercase_hours_use_day_length(self, workday_duration):
        assert workday_duration.format("HH:mm") == "26:00"

    def test_omitted_seconds_do_not_round_minutes(self):
        assert Duration("1m 59s").format("hh:mm") == "00:01"

    def test_days_grow_past_two_digits(self):
        parts = DurationParts(days=123)
        assert format_pattern(parts, "dd", 24) == "123"

    @pytest.mark.parametrize("pattern", [42, b"hh:mm"])
    def test_non_string_pattern_raises(self, pattern):
        with pytest.raises(InvalidPatternError):
            Duration("1h").format(pattern)


class TestDefaultPattern:
    def test_str_uses_default(self):
        assert str(Duration("2h 15m")) == "02:15:00"

    def test_custom_default(self):
        duration = Duration.from_minutes(90, 24, "H:mm")
        assert duration.pattern == "H:mm"
        assert duration.format() == "1:30"

    def test_pattern_without_seconds_drops_them(self):
        duration = Duration("01:01:15", pattern="hh:mm")
        assert duration.seconds == 0.0
        assert str(duration) == "01:01"
        assert duration.to_seconds() == 3660.0

    def test_explicit_pattern_overrides_default(self):
        assert Duration("1h", pattern="hh:mm").format("mm:ss") == "00:00"

    @pytest.mark.parametrize(
        "pattern, expected",
        [("hh:mm:ss", True), ("h:mm:SS", True), ("hh:mm", False), ("dd hh", False)],
    )
    def test_has_seconds_token(self, pattern, expected):
        assert has_seconds_token(pattern) is expected


class TestHumanize:
    def test_hours_and_minutes(self):
        assert Duration("1h 42m").humanize() == "1h 42m"

    def test_zero(self, zero):
        assert zero.humanize() == "0s"

    def test_all_units(self):
        assert Duration("1d 2h 3m 4s").humanize() == "1d 2h 3m 4s"

    def test_skips_zero_units(self):
        assert Duration("1d 30s").humanize() == "1d 30s"

    def test_fractional_seconds(self):
        assert Duration("4.5s").humanize() == "4.5s"


class TestIso8601Formatting:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1d 2h 3m 4s", "P1DT2H3M4S"),
            ("P2W", "P14D"),
            ("P1W", "P7D"),
            ("PT5H", "PT5H"),
            ("PT45M", "PT45M"),
            ("PT1H45S", "PT1H45S"),
            ("P3DT12H", "P3DT12H"),
            ("P1DT30S", "P1DT30S"),
            ("P7DT23H59M59S", "P7DT23H59M59S"),
            ("P365D", "P365D"),
            ("45.5s", "PT45.5S"),
            (0, "PT0S"),
        ],
    )
    def test_output(self, value, expected):
        assert Duration(value).to_iso8601() == expected

    @pytest.mark.parametrize(
        "value",
        [
            "PT1H30M45S",
            "P5D",
            "P3DT12H",
            "PT2H",
            "PT30M",
            "PT45S",
            "P1DT1H1M1S",
            "P10DT5H30M15S",
            "1d 2.5h 3m 4.25s",
            90061,
            1e-7,
        ],
    )
    @pytest.mark.parametrize("hours_per_day", [24, 8, 1])
    def test_roundtrip(self, value, hours_per_day):
        duration = Duration(value, hours_per_day=hours_per_day)
        iso = duration.to_iso8601()
        assert Duration(iso).to_seconds() == duration.to_seconds()
        assert Duration(iso, hours_per_day=hours_per_day).to_seconds() == duration.to_seconds()

    def test_days_emitted_as_calendar_days(self, workday_duration):
        assert workday_duration.to_iso8601() == "P1DT2H"

    def test_short_day_roundtrip(self):
        duration = Duration.from_hours(16, hours_per_day=8)
        assert duration.to_iso8601() == "PT16H"
        assert Duration(duration.to_iso8601(), hours_per_day=8) == duration


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (30.0, "30"),
            (30.5, "30.5"),
            (0.25, "0.25"),
            (1.000001, "1.000001"),
            (1e-7, "0.0000001"),
        ],
    )
    def test_values(self, value, expected):
        assert format_number(value) == expected
