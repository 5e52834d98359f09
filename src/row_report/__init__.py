"""Rowing workout report pipeline.

raw result -> display rows -> layout plan -> PNG bytes. Every call builds
its own plan and surface; nothing is shared between calls.
"""

from __future__ import annotations

from typing import Optional, Union

from row_report.exceptions import (
    RenderError,
    ReportError,
    UndefinedPaceError,
    UnknownStyleError,
)
from row_report.layout.engine import build_title_context, plan_report
from row_report.layout.styles import DEFAULT_STYLE, STYLES, ReportStyle, get_style
from row_report.models.drawing import LayoutPlan
from row_report.models.result import RawResult
from row_report.normalizer import normalize
from row_report.renderer import FontBook, render_plan


def _resolve_style(style: Union[str, ReportStyle]) -> ReportStyle:
    return get_style(style) if isinstance(style, str) else style


def build_report_plan(
    raw: RawResult,
    style: Union[str, ReportStyle] = DEFAULT_STYLE,
    username: Optional[str] = None,
) -> LayoutPlan:
    """Normalize *raw* and lay it out, without rendering."""
    resolved = _resolve_style(style)
    rows = normalize(raw)
    return plan_report(rows, resolved, build_title_context(raw, resolved, username))


def render_workout_report(
    raw: RawResult,
    style: Union[str, ReportStyle] = DEFAULT_STYLE,
    username: Optional[str] = None,
    fonts: Optional[FontBook] = None,
) -> bytes:
    """Render the workout report for *raw* as PNG bytes."""
    return render_plan(build_report_plan(raw, style, username), fonts)


__all__ = [
    "DEFAULT_STYLE",
    "FontBook",
    "RenderError",
    "ReportError",
    "ReportStyle",
    "STYLES",
    "UndefinedPaceError",
    "UnknownStyleError",
    "build_report_plan",
    "get_style",
    "render_workout_report",
]
