"""Layout engine: places the title block, header band, rows and chrome.

The canvas height depends only on the row count::

    height = style.base_height + len(rows) * style.row_height

so the table never clips a row and never leaves trailing space. Row ``i``
starts at ``style.rows_top + i * style.row_height``; everything in the
FOOTER region is placed relative to the bottom of the last row.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from row_report.models.display import DisplayRow
from row_report.models.drawing import (
    Box,
    DashedHLine,
    DrawOp,
    FillRect,
    HLine,
    LayoutPlan,
    Scanlines,
    StrokeRect,
    Text,
)
from row_report.models.enums import Region
from row_report.models.result import RawResult
from row_report.math.time_pace import format_time
from row_report.layout.styles import ReportStyle

MISSING_VALUE = "--"


def canvas_height(style: ReportStyle, row_count: int) -> int:
    """Exact surface height for *row_count* data rows."""
    if row_count < 0:
        raise ValueError(f"row_count must be non-negative, got {row_count}")
    return style.base_height + row_count * style.row_height


def row_top(style: ReportStyle, index: int) -> int:
    """Top pixel of data row *index* (0-based)."""
    return style.rows_top + index * style.row_height


def build_title_context(
    raw: RawResult, style: ReportStyle, username: Optional[str] = None
) -> dict[str, str]:
    """Values available to a style's title templates.

    Built only from *raw* and *username*; a result without a date shows
    ``--`` rather than today's date so repeated renders stay identical.
    An unnamed rower shows ``--`` too.
    """
    date: Optional[datetime] = raw.date
    return {
        "date": date.strftime(style.date_format) if date else MISSING_VALUE,
        "distance": str(raw.distance),
        "time": format_time(raw.time),
        "username": username or MISSING_VALUE,
    }


def plan_report(
    rows: Sequence[DisplayRow],
    style: ReportStyle,
    title_context: Optional[dict[str, str]] = None,
) -> LayoutPlan:
    """Compute the surface size and ordered draw operations for *rows*.

    Args:
        rows: Normalized rows; row 0 is the workout summary. May be empty.
        style: Cosmetic configuration.
        title_context: Values for the title templates (see
            :func:`build_title_context`). Missing keys render as ``--``.

    Returns:
        A LayoutPlan whose elements are in paint order.
    """
    height = canvas_height(style, len(rows))
    footer_top = row_top(style, len(rows))
    context = _TitleContext(title_context or {})

    elements: list[DrawOp] = []
    elements.extend(_background(style, height))
    elements.extend(_frames(style, height))
    elements.extend(_title(style, context))
    elements.extend(_header(style))
    for index, row in enumerate(rows):
        elements.extend(_row(style, row, index, is_last=index == len(rows) - 1))
    elements.extend(_footer(style, footer_top))

    return LayoutPlan(
        width=style.width,
        height=height,
        rows_top=style.rows_top,
        row_height=style.row_height,
        row_count=len(rows),
        elements=tuple(elements),
    )


class _TitleContext(dict):
    """Template mapping that renders unknown keys as the missing marker."""

    def __missing__(self, key: str) -> str:
        return MISSING_VALUE


# ---------------------------------------------------------------------------
# Element builders, one per region, top to bottom
# ---------------------------------------------------------------------------


def _background(style: ReportStyle, height: int) -> list[DrawOp]:
    canvas = Box(0, 0, style.width, height)
    ops: list[DrawOp] = [FillRect(canvas, style.background, Region.BACKGROUND)]
    if style.scanlines is not None:
        ops.append(
            Scanlines(
                canvas,
                style.scanlines.color,
                Region.BACKGROUND,
                spacing=style.scanlines.spacing,
                alpha=style.scanlines.alpha,
            )
        )
    return ops


def _frames(style: ReportStyle, height: int) -> list[DrawOp]:
    return [
        StrokeRect(
            Box(f.inset, f.inset, style.width - 2 * f.inset, height - 2 * f.inset),
            f.color,
            Region.FRAME,
            width=f.width,
            glow=f.glow,
        )
        for f in style.frames
    ]


def _title(style: ReportStyle, context: _TitleContext) -> list[DrawOp]:
    ops: list[DrawOp] = [
        Text(
            line.x,
            line.y,
            line.template.format_map(context),
            line.font,
            line.color,
            Region.TITLE,
            glow=line.glow,
        )
        for line in style.title_lines
    ]
    ops.extend(FillRect(bar, style.title_bar_color, Region.TITLE) for bar in style.title_bars)
    if style.title_divider is not None:
        x0, x1, y = style.title_divider
        ops.append(
            HLine(x0, x1, y, style.title_divider_color, Region.TITLE,
                  width=style.title_divider_width)
        )
    return ops


def _header(style: ReportStyle) -> list[DrawOp]:
    box = style.header_box
    ops: list[DrawOp] = [
        FillRect(box, style.header_fill, Region.HEADER, alpha=style.header_fill_alpha)
    ]
    if style.header_border is not None:
        ops.append(
            StrokeRect(box, style.header_border, Region.HEADER,
                       width=style.header_border_width, glow=style.header_glow)
        )
    baseline = box.y + style.header_baseline
    ops.extend(
        Text(col.x, baseline, col.label, style.header_font, style.header_color,
             Region.HEADER, align=col.align, glow=style.header_text_glow)
        for col in style.columns
    )
    return ops


def _row(style: ReportStyle, row: DisplayRow, index: int, is_last: bool) -> list[DrawOp]:
    theme = style.rows
    band = Box(style.table_x, row_top(style, index), style.table_width, style.row_height)
    ops: list[DrawOp] = []

    if index == 0:
        color = theme.summary_color
        glow = theme.summary_glow
        if theme.summary_band_fill is not None:
            ops.append(FillRect(band, theme.summary_band_fill, Region.ROWS,
                                alpha=theme.summary_band_alpha))
        if theme.summary_band_border is not None:
            ops.append(StrokeRect(band, theme.summary_band_border, Region.ROWS,
                                  width=theme.summary_band_border_width, glow=glow))
    else:
        odd = index % 2 == 1
        color = theme.odd_color if odd else theme.even_color
        glow = theme.text_glow
        band_fill = theme.odd_band_fill if odd else theme.even_band_fill
        if band_fill is not None:
            ops.append(FillRect(band, band_fill, Region.ROWS, alpha=theme.band_alpha))

    baseline = band.y + style.row_baseline
    ops.extend(
        Text(col.x, baseline, row.cell(col.field), style.row_font, color,
             Region.ROWS, align=col.align, glow=glow)
        for col in style.columns
    )

    if not is_last:
        y = band.bottom - 1
        if theme.separator_dashed:
            ops.append(DashedHLine(band.x, band.right, y, theme.separator_color, Region.ROWS))
        else:
            ops.append(HLine(band.x, band.right, y, theme.separator_color, Region.ROWS))
    return ops


def _footer(style: ReportStyle, footer_top: int) -> list[DrawOp]:
    ops: list[DrawOp] = [
        FillRect(Box(m.x, footer_top + m.dy, m.width, m.height), m.color, Region.FOOTER)
        for m in style.footer_marks
    ]
    caption = style.footer_caption
    if caption is not None:
        ops.append(
            Text(caption.x, footer_top + caption.dy, caption.text, caption.font,
                 caption.color, Region.FOOTER, glow=caption.glow)
        )
    return ops
