"""Workout result models: the read-only input of the report pipeline.

Times are integer tenths of a second throughout; distances are whole
meters (the logbook's "units").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from row_report.models.enums import IntervalKind, SegmentKind


def _check_non_negative(owner: str, **values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{owner}.{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Split:
    """A checkpoint within one continuous piece."""

    time: int
    distance: int
    stroke_rate: int = 0
    avg_heart_rate: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative("Split", time=self.time, distance=self.distance)

    @property
    def segment_kind(self) -> SegmentKind:
        return SegmentKind.SPLIT


@dataclass(frozen=True)
class Interval:
    """A work or rest segment of a structured workout.

    REST intervals carry zero (or near-zero) stroke rate and heart rate
    and usually no distance, but still occupy a table row.
    """

    kind: IntervalKind
    time: int
    distance: int
    stroke_rate: int = 0
    avg_heart_rate: int | None = None
    rest_time: int = 0  # tenths, rest taken after this interval

    def __post_init__(self) -> None:
        _check_non_negative(
            "Interval", time=self.time, distance=self.distance, rest_time=self.rest_time
        )

    @property
    def segment_kind(self) -> SegmentKind:
        return SegmentKind.INTERVAL

    @property
    def is_rest(self) -> bool:
        return self.kind is IntervalKind.REST


@dataclass(frozen=True)
class Summary:
    """Workout totals viewed as a table segment (always row 0)."""

    time: int
    distance: int
    stroke_rate: int = 0
    avg_heart_rate: int | None = None

    @property
    def segment_kind(self) -> SegmentKind:
        return SegmentKind.SUMMARY


Segment = Union[Summary, Split, Interval]


@dataclass(frozen=True)
class WorkoutBreakdown:
    """Optional per-segment detail. Either list may be None or empty."""

    splits: Optional[tuple[Split, ...]] = None
    intervals: Optional[tuple[Interval, ...]] = None


@dataclass(frozen=True)
class RawResult:
    """One logged workout as returned by the logbook API."""

    id: int
    distance: int
    time: int
    stroke_rate: int = 0
    date: Optional[datetime] = None
    workout: WorkoutBreakdown = field(default_factory=WorkoutBreakdown)
    workout_type: str | None = None
    avg_heart_rate: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative("RawResult", time=self.time, distance=self.distance)

    @property
    def summary(self) -> Summary:
        return Summary(
            time=self.time,
            distance=self.distance,
            stroke_rate=self.stroke_rate,
            avg_heart_rate=self.avg_heart_rate,
        )
