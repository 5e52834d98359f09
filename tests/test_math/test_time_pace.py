"""Tests for tenths-of-a-second formatting and pace arithmetic."""

from fractions import Fraction

import pytest

from row_report.exceptions import ReportError, UndefinedPaceError
from row_report.math.time_pace import (
    PACE_PLACEHOLDER,
    calculate_pace,
    format_pace,
    format_time,
)


class TestFormatTime:
    def test_zero(self) -> None:
        assert format_time(0) == "00:00.0"

    def test_minutes_and_tenths(self) -> None:
        assert format_time(615) == "01:01.5"

    def test_workout_total(self) -> None:
        assert format_time(21671) == "36:07.1"

    def test_exact_hour_gets_hours_field(self) -> None:
        assert format_time(36000) == "01:00:00.0"

    def test_past_the_hour(self) -> None:
        assert format_time(36071) == "01:00:07.1"

    def test_just_under_the_hour_has_no_hours_field(self) -> None:
        assert format_time(35999) == "59:59.9"

    @pytest.mark.parametrize("tenths", [0, 9, 599, 6000, 12345, 35999])
    def test_below_one_hour_never_has_hours(self, tenths: int) -> None:
        assert format_time(tenths).count(":") == 1

    def test_fraction_is_truncated_not_rounded(self) -> None:
        assert format_time(Fraction(13619, 10)) == "02:16.1"
        assert format_time(Fraction(13544375, 10000)) == "02:15.4"

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            format_time(-1)


class TestCalculatePace:
    def test_thousand_meters_in_two_hundred_seconds(self) -> None:
        assert calculate_pace(1000, 2000) == 1000
        assert format_time(calculate_pace(1000, 2000)) == "01:40.0"

    def test_exact_fraction(self) -> None:
        assert calculate_pace(8000, 21671) == Fraction(21671 * 500, 8000)

    def test_pace_of_500m_is_the_time(self) -> None:
        assert calculate_pace(500, 1234) == 1234

    def test_zero_distance_raises(self) -> None:
        with pytest.raises(UndefinedPaceError) as excinfo:
            calculate_pace(0, 900)
        assert excinfo.value.distance == 0
        assert excinfo.value.time == 900

    def test_undefined_pace_is_report_and_value_error(self) -> None:
        with pytest.raises(ReportError):
            calculate_pace(0, 900)
        with pytest.raises(ValueError):
            calculate_pace(-5, 900)


class TestFormatPace:
    def test_split_pace(self) -> None:
        assert format_pace(1600, 4357) == "02:16.1"

    def test_summary_pace(self) -> None:
        assert format_pace(8000, 21671) == "02:15.4"

    def test_zero_distance_uses_placeholder(self) -> None:
        assert format_pace(0, 900) == PACE_PLACEHOLDER
