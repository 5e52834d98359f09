"""Tests for logbook_client.result_mapper: pure dict-to-model mapping."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from logbook_client.exceptions import LogbookDataError
from logbook_client.result_mapper import map_result
from row_report.models.enums import IntervalKind
from row_report.normalizer import normalize


class TestMapResult:
    def test_splits_payload(self, logbook_splits_payload) -> None:
        raw = map_result(logbook_splits_payload)
        assert raw.id == 12345
        assert raw.distance == 8000
        assert raw.time == 21671
        assert raw.stroke_rate == 19
        assert raw.date == datetime(2025, 9, 17, 7, 30)
        assert raw.workout_type == "FixedDistanceSplits"
        assert raw.avg_heart_rate == 143
        assert raw.workout.intervals is None
        assert len(raw.workout.splits) == 5
        first = raw.workout.splits[0]
        assert (first.time, first.distance, first.stroke_rate, first.avg_heart_rate) == (
            4357,
            1600,
            18,
            104,
        )

    def test_mapped_result_normalizes(self, logbook_splits_payload) -> None:
        rows = normalize(map_result(logbook_splits_payload))
        assert len(rows) == 6
        assert rows[0].time == "36:07.1"

    def test_unwrapped_intervals_payload(self, logbook_intervals_payload) -> None:
        raw = map_result(logbook_intervals_payload)
        assert raw.workout.splits is None
        assert [i.kind for i in raw.workout.intervals] == [IntervalKind.DISTANCE] * 2
        assert raw.workout.intervals[0].rest_time == 900

    def test_iso_date_with_z(self, logbook_intervals_payload) -> None:
        raw = map_result(logbook_intervals_payload)
        assert raw.date == datetime(2025, 9, 18, 18, 0, tzinfo=timezone.utc)

    def test_zero_heart_rate_is_unrecorded(self, logbook_intervals_payload) -> None:
        assert map_result(logbook_intervals_payload).avg_heart_rate is None

    def test_minimal_payload(self) -> None:
        raw = map_result({"distance": 5000, "time": 12000}, result_id=7)
        assert raw.id == 7
        assert raw.stroke_rate == 0
        assert raw.date is None
        assert raw.workout.splits is None
        assert raw.workout.intervals is None

    def test_null_breakdown_lists(self) -> None:
        raw = map_result(
            {"id": 1, "distance": 5000, "time": 12000,
             "workout": {"splits": None, "intervals": None}}
        )
        assert len(normalize(raw)) == 1

    def test_rest_interval_type(self) -> None:
        raw = map_result(
            {"id": 1, "distance": 1000, "time": 4000,
             "workout": {"intervals": [
                 {"type": "distance", "time": 3000, "distance": 1000},
                 {"type": "rest", "time": 1000},
             ]}}
        )
        assert raw.workout.intervals[1].is_rest
        assert raw.workout.intervals[1].distance == 0

    def test_calorie_interval_type(self) -> None:
        raw = map_result(
            {"id": 1, "distance": 300, "time": 900,
             "workout": {"intervals": [{"type": "calorie", "time": 900, "distance": 300}]}}
        )
        assert raw.workout.intervals[0].kind == IntervalKind.CALORIE


class TestMapResultErrors:
    def test_missing_time(self) -> None:
        with pytest.raises(LogbookDataError, match="'time'"):
            map_result({"id": 1, "distance": 5000})

    def test_missing_distance(self) -> None:
        with pytest.raises(LogbookDataError, match="'distance'"):
            map_result({"id": 1, "time": 5000})

    def test_non_numeric_field(self) -> None:
        with pytest.raises(LogbookDataError, match="must be a number"):
            map_result({"id": 1, "distance": "far", "time": 5000})

    def test_boolean_is_not_a_number(self) -> None:
        with pytest.raises(LogbookDataError):
            map_result({"id": 1, "distance": True, "time": 5000})

    def test_negative_time(self) -> None:
        with pytest.raises(LogbookDataError, match="non-negative"):
            map_result({"id": 1, "distance": 5000, "time": -1})

    def test_splits_not_a_list(self) -> None:
        with pytest.raises(LogbookDataError, match="must be a list"):
            map_result({"id": 1, "distance": 5000, "time": 1, "workout": {"splits": {}}})

    def test_split_not_an_object(self) -> None:
        with pytest.raises(LogbookDataError, match="split #0"):
            map_result({"id": 1, "distance": 5000, "time": 1, "workout": {"splits": [3]}})

    def test_unknown_interval_type(self) -> None:
        with pytest.raises(LogbookDataError, match="Unknown interval type"):
            map_result(
                {"id": 1, "distance": 5000, "time": 1,
                 "workout": {"intervals": [{"type": "sprint", "time": 1}]}}
            )

    def test_bad_date(self) -> None:
        with pytest.raises(LogbookDataError, match="Unparseable"):
            map_result({"id": 1, "distance": 5000, "time": 1, "date": "last tuesday"})

    def test_non_object_payload(self) -> None:
        with pytest.raises(LogbookDataError, match="not an object"):
            map_result([{"time": 1, "distance": 2}])

    def test_scalar_payload(self) -> None:
        with pytest.raises(LogbookDataError, match="not an object"):
            map_result("8000m")

    def test_null_envelope_uses_top_level_fields(self) -> None:
        with pytest.raises(LogbookDataError):
            map_result({"data": None, "distance": None})
