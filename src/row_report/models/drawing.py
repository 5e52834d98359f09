"""Draw operations and the layout plan handed to the renderer.

Coordinates are integer pixels, origin top-left. Text ``y`` is the
baseline, matching how the table rows are positioned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from row_report.models.enums import Align, Region


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width


@dataclass(frozen=True)
class FontSpec:
    """Font request: a family key resolved by the renderer's FontBook."""

    size: int
    bold: bool = False
    family: str = "mono"  # "mono" or "sans"


@dataclass(frozen=True)
class FillRect:
    box: Box
    color: str
    region: Region
    alpha: float = 1.0


@dataclass(frozen=True)
class StrokeRect:
    box: Box
    color: str
    region: Region
    width: int = 1
    glow: int = 0  # blur radius of a coloured halo, 0 = none


@dataclass(frozen=True)
class HLine:
    x0: int
    x1: int
    y: int
    color: str
    region: Region
    width: int = 1


@dataclass(frozen=True)
class DashedHLine:
    """Horizontal run of ``dash``-wide pixels every ``dash + gap`` px."""

    x0: int
    x1: int
    y: int
    color: str
    region: Region
    dash: int = 4
    gap: int = 4


@dataclass(frozen=True)
class Scanlines:
    """One-pixel horizontal lines across ``box`` every ``spacing`` px."""

    box: Box
    color: str
    region: Region
    spacing: int = 4
    alpha: float = 0.3


@dataclass(frozen=True)
class Text:
    x: int
    y: int
    text: str
    font: FontSpec
    color: str
    region: Region
    align: Align = Align.LEFT
    glow: int = 0


DrawOp = Union[FillRect, StrokeRect, HLine, DashedHLine, Scanlines, Text]


@dataclass(frozen=True)
class LayoutPlan:
    """Concrete surface size plus the ordered draw operations.

    ``rows_top`` is the bottom of the header band; row ``i`` occupies
    ``[rows_top + i * row_height, rows_top + (i + 1) * row_height)`` and
    ``footer_top`` is the first pixel below the last row.
    """

    width: int
    height: int
    rows_top: int
    row_height: int
    row_count: int
    elements: tuple[DrawOp, ...]

    @property
    def footer_top(self) -> int:
        return self.rows_top + self.row_count * self.row_height

    def in_region(self, region: Region) -> tuple[DrawOp, ...]:
        """Return the elements tagged with *region*, in draw order."""
        return tuple(op for op in self.elements if op.region is region)
