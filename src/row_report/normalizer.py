"""Row normalizer: turns a RawResult into the ordered table rows.

Row 0 is always the workout summary. It is followed by the splits if
any were recorded, otherwise by the intervals; the two breakdowns are
never mixed. Each row's pace is local to that row's own distance/time.
"""

from __future__ import annotations

import logging

from row_report.math.time_pace import format_pace, format_time
from row_report.models.display import DisplayRow
from row_report.models.result import RawResult, Segment

logger = logging.getLogger(__name__)


def segments(raw: RawResult) -> list[Segment]:
    """Return ``[summary, *breakdown]`` in display order."""
    result: list[Segment] = [raw.summary]
    splits = raw.workout.splits
    intervals = raw.workout.intervals

    if splits:
        if intervals:
            logger.debug(
                "Result %d has both splits and intervals, using splits", raw.id
            )
        result.extend(splits)
    elif intervals:
        result.extend(intervals)
    return result


def to_display_row(segment: Segment) -> DisplayRow:
    """Format one segment into table cells.

    Zero-distance segments (rest intervals, time-only pieces with no
    meters) keep their row; the pace cell shows the placeholder.
    """
    return DisplayRow(
        time=format_time(segment.time),
        distance=str(segment.distance),
        pace=format_pace(segment.distance, segment.time),
        stroke_rate=str(segment.stroke_rate) if segment.stroke_rate else "0",
        kind=segment.segment_kind,
    )


def normalize(raw: RawResult) -> list[DisplayRow]:
    """Convert *raw* into the full list of display rows."""
    return [to_display_row(s) for s in segments(raw)]
