"""Data models for the rowing report pipeline."""

from row_report.models.display import ROW_FIELDS, DisplayRow
from row_report.models.drawing import (
    Box,
    DashedHLine,
    DrawOp,
    FillRect,
    FontSpec,
    HLine,
    LayoutPlan,
    Scanlines,
    StrokeRect,
    Text,
)
from row_report.models.enums import Align, IntervalKind, Region, SegmentKind
from row_report.models.result import (
    Interval,
    RawResult,
    Segment,
    Split,
    Summary,
    WorkoutBreakdown,
)

__all__ = [
    "Align",
    "Box",
    "DashedHLine",
    "DisplayRow",
    "DrawOp",
    "FillRect",
    "FontSpec",
    "HLine",
    "Interval",
    "IntervalKind",
    "LayoutPlan",
    "ROW_FIELDS",
    "RawResult",
    "Region",
    "Scanlines",
    "Segment",
    "SegmentKind",
    "Split",
    "StrokeRect",
    "Summary",
    "Text",
    "WorkoutBreakdown",
]
