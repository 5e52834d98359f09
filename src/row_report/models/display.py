"""Normalized table row consumed by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass

from row_report.models.enums import SegmentKind

# Field names a ColumnSpec may refer to, in table order.
ROW_FIELDS: tuple[str, ...] = ("time", "distance", "pace", "stroke_rate")


@dataclass(frozen=True)
class DisplayRow:
    """Pre-formatted cell strings for one table row."""

    time: str
    distance: str
    pace: str
    stroke_rate: str
    kind: SegmentKind = SegmentKind.SUMMARY

    def cell(self, field_name: str) -> str:
        """Return the formatted value of one of :data:`ROW_FIELDS`."""
        if field_name not in ROW_FIELDS:
            raise KeyError(f"Unknown row field: {field_name!r}")
        return getattr(self, field_name)
