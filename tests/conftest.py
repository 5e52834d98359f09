"""Shared test fixtures: rowing results covering each breakdown shape, HTTP stand-ins."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from row_report.models.enums import IntervalKind
from row_report.models.result import Interval, RawResult, Split, WorkoutBreakdown


@pytest.fixture
def splits_result() -> RawResult:
    """8000 m in 36:07.1, five 1600 m splits."""
    return RawResult(
        id=12345,
        distance=8000,
        time=21671,
        stroke_rate=19,
        date=datetime(2025, 9, 17),
        workout=WorkoutBreakdown(
            splits=(
                Split(time=4357, distance=1600, stroke_rate=18, avg_heart_rate=104),
                Split(time=4334, distance=1600, stroke_rate=19, avg_heart_rate=149),
                Split(time=4313, distance=1600, stroke_rate=19, avg_heart_rate=150),
                Split(time=4354, distance=1600, stroke_rate=19, avg_heart_rate=150),
                Split(time=4312, distance=1600, stroke_rate=20, avg_heart_rate=163),
            )
        ),
    )


@pytest.fixture
def intervals_result() -> RawResult:
    """3 x 1000 m distance intervals."""
    return RawResult(
        id=54321,
        distance=3000,
        time=9005,
        stroke_rate=22,
        date=datetime(2025, 9, 18),
        workout=WorkoutBreakdown(
            intervals=(
                Interval(IntervalKind.DISTANCE, time=3002, distance=1000, stroke_rate=24),
                Interval(IntervalKind.DISTANCE, time=2988, distance=1000, stroke_rate=23),
                Interval(IntervalKind.DISTANCE, time=3015, distance=1000, stroke_rate=22),
            )
        ),
    )


@pytest.fixture
def rest_result() -> RawResult:
    """2 x 1000 m with a logged rest piece between them."""
    return RawResult(
        id=24680,
        distance=2000,
        time=6000,
        stroke_rate=26,
        date=datetime(2025, 9, 21),
        workout=WorkoutBreakdown(
            intervals=(
                Interval(IntervalKind.DISTANCE, time=3000, distance=1000, stroke_rate=26),
                Interval(IntervalKind.REST, time=900, distance=0),
                Interval(IntervalKind.DISTANCE, time=3000, distance=1000, stroke_rate=26),
            )
        ),
    )


@pytest.fixture
def simple_result() -> RawResult:
    """5000 m, no splits or intervals."""
    return RawResult(
        id=99999,
        distance=5000,
        time=12000,
        stroke_rate=20,
        date=datetime(2025, 9, 19),
    )


@pytest.fixture
def many_intervals_result() -> RawResult:
    """20 x 500 m."""
    return RawResult(
        id=77777,
        distance=10000,
        time=24000,
        stroke_rate=24,
        date=datetime(2025, 9, 20),
        workout=WorkoutBreakdown(
            intervals=tuple(
                Interval(IntervalKind.DISTANCE, time=1200 + i, distance=500, stroke_rate=25)
                for i in range(20)
            )
        ),
    )


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""

    def _make(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
        resp = MagicMock()
        resp.status_code = status_code
        resp.ok = 200 <= status_code < 400
        resp.text = text
        if isinstance(json_data, Exception):
            resp.json.side_effect = json_data
        else:
            resp.json.return_value = json_data
        return resp

    return _make
