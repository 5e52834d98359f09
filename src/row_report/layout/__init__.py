"""Layout engine and report styles."""

from row_report.layout.engine import (
    build_title_context,
    canvas_height,
    plan_report,
    row_top,
)
from row_report.layout.styles import DEFAULT_STYLE, STYLES, ReportStyle, get_style

__all__ = [
    "DEFAULT_STYLE",
    "ReportStyle",
    "STYLES",
    "build_title_context",
    "canvas_height",
    "get_style",
    "plan_report",
    "row_top",
]
