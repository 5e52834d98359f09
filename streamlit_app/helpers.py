"""Utility helpers bridging the Streamlit gallery and the report pipeline.

Sample workouts, table frames and a couple of summary numbers. Nothing
here touches the network.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

import numpy as np
import pandas as pd

from row_report.layout.engine import canvas_height
from row_report.layout.styles import ReportStyle
from row_report.math.time_pace import calculate_pace, format_time
from row_report.models.display import DisplayRow
from row_report.models.enums import IntervalKind, SegmentKind
from row_report.models.result import Interval, RawResult, Split, WorkoutBreakdown
from row_report.normalizer import segments

# ---------------------------------------------------------------------------
# Sample workouts
# ---------------------------------------------------------------------------


def steady_8k() -> RawResult:
    """8000 m steady state with five 1600 m splits."""
    split_times = (4357, 4334, 4313, 4354, 4312)
    split_rates = (18, 19, 19, 19, 20)
    split_hr = (104, 149, 150, 150, 163)
    return RawResult(
        id=12345,
        distance=8000,
        time=21671,
        stroke_rate=19,
        date=datetime(2025, 9, 17, 7, 30),
        workout=WorkoutBreakdown(
            splits=tuple(
                Split(time=t, distance=1600, stroke_rate=r, avg_heart_rate=hr)
                for t, r, hr in zip(split_times, split_rates, split_hr)
            )
        ),
        workout_type="FixedDistanceSplits",
        avg_heart_rate=143,
    )


def three_by_1k() -> RawResult:
    """3 x 1000 m distance intervals."""
    pieces = ((3002, 24), (2988, 23), (3015, 22))
    return RawResult(
        id=54321,
        distance=3000,
        time=9005,
        stroke_rate=23,
        date=datetime(2025, 9, 18, 18, 0),
        workout=WorkoutBreakdown(
            intervals=tuple(
                Interval(kind=IntervalKind.DISTANCE, time=t, distance=1000, stroke_rate=r)
                for t, r in pieces
            )
        ),
        workout_type="FixedDistanceInterval",
    )


def four_by_1k_with_rest() -> RawResult:
    """4 x 1000 m with logged rest pieces between work intervals."""
    work = (3010, 2995, 2990, 2970)
    intervals: list[Interval] = []
    for i, t in enumerate(work):
        intervals.append(
            Interval(kind=IntervalKind.DISTANCE, time=t, distance=1000, stroke_rate=26)
        )
        if i < len(work) - 1:
            intervals.append(Interval(kind=IntervalKind.REST, time=900, distance=0))
    return RawResult(
        id=24680,
        distance=4000,
        time=sum(work),
        stroke_rate=26,
        date=datetime(2025, 9, 21, 9, 15),
        workout=WorkoutBreakdown(intervals=tuple(intervals)),
        workout_type="FixedDistanceInterval",
    )


def simple_5k() -> RawResult:
    """5000 m with no breakdown recorded."""
    return RawResult(
        id=99999,
        distance=5000,
        time=12000,
        stroke_rate=20,
        date=datetime(2025, 9, 19, 6, 45),
        workout_type="JustRow",
    )


def twenty_by_500() -> RawResult:
    """20 x 500 m, the tallest sample."""
    times = (
        1205, 1192, 1189, 1218, 1201, 1223, 1197, 1212, 1185, 1199,
        1208, 1194, 1216, 1187, 1203, 1221, 1190, 1210, 1196, 1183,
    )
    return RawResult(
        id=77777,
        distance=10000,
        time=sum(times),
        stroke_rate=25,
        date=datetime(2025, 9, 20, 17, 0),
        workout=WorkoutBreakdown(
            intervals=tuple(
                Interval(kind=IntervalKind.DISTANCE, time=t, distance=500, stroke_rate=25)
                for t in times
            )
        ),
        workout_type="FixedDistanceInterval",
    )


SAMPLE_RESULTS: dict[str, Callable[[], RawResult]] = {
    "8000m steady (splits)": steady_8k,
    "3 x 1000m (intervals)": three_by_1k,
    "4 x 1000m with rest": four_by_1k_with_rest,
    "5000m (no breakdown)": simple_5k,
    "20 x 500m": twenty_by_500,
}

# ---------------------------------------------------------------------------
# Tables and summary numbers
# ---------------------------------------------------------------------------

KIND_LABELS = {
    SegmentKind.SUMMARY: "Summary",
    SegmentKind.SPLIT: "Split",
    SegmentKind.INTERVAL: "Interval",
}


def rows_frame(rows: list[DisplayRow]) -> pd.DataFrame:
    """Table of display rows as shown on the image, plus a kind column."""
    return pd.DataFrame(
        {
            "Kind": [KIND_LABELS[r.kind] for r in rows],
            "Time": [r.time for r in rows],
            "Meters": [r.distance for r in rows],
            "Pace /500m": [r.pace for r in rows],
            "SPM": [r.stroke_rate for r in rows],
        }
    )


def pace_spread(raw: RawResult) -> Optional[float]:
    """Standard deviation of breakdown paces, in tenths of a second.

    Rows without distance are skipped. None when fewer than two rows
    have a pace.
    """
    paces = [
        float(calculate_pace(s.distance, s.time))
        for s in segments(raw)[1:]
        if s.distance > 0
    ]
    if len(paces) < 2:
        return None
    return float(np.std(np.array(paces, dtype=np.float64), ddof=0))


def format_spread(spread: Optional[float]) -> str:
    """e.g. 23.4 -> '±2.3s'."""
    if spread is None:
        return "--"
    return f"±{spread / 10:.1f}s"


def canvas_size(style: ReportStyle, rows: list[DisplayRow]) -> str:
    """'W x H px' for the report of *rows* in *style*."""
    return f"{style.width} x {canvas_height(style, len(rows))} px"


def summary_time(raw: RawResult) -> str:
    return format_time(raw.time)
