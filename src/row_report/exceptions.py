"""Exceptions raised by the report pipeline."""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for all row_report errors."""


class UndefinedPaceError(ReportError, ValueError):
    """Pace was requested for a segment with no distance."""

    def __init__(self, distance: int, time: int) -> None:
        super().__init__(f"Pace is undefined for distance={distance}, time={time}")
        self.distance = distance
        self.time = time


class UnknownStyleError(ReportError, KeyError):
    """No report style is registered under the requested name."""


class RenderError(ReportError):
    """Drawing or PNG encoding failed; no image was produced."""
