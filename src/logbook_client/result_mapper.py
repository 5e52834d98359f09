"""Pure functions mapping logbook API result dicts to RawResult.

No I/O. Takes the JSON returned by ``GET /api/users/me/results/{id}``
(or the ``data`` object of a webhook delivery) and returns report models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from logbook_client.exceptions import LogbookDataError
from row_report.models.enums import IntervalKind
from row_report.models.result import Interval, RawResult, Split, WorkoutBreakdown

_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def map_result(payload: dict[str, Any], result_id: Optional[int] = None) -> RawResult:
    """Map a logbook result payload to a RawResult.

    The payload may be wrapped in a ``data`` envelope. ``time`` and
    ``distance`` are required; everything else falls back to a neutral
    default.

    Raises:
        LogbookDataError: If required fields are missing or malformed.
    """
    if not isinstance(payload, dict):
        raise LogbookDataError(f"Result payload is not an object: {payload!r}")
    data = payload["data"] if isinstance(payload.get("data"), dict) else payload

    try:
        workout = data.get("workout")
        if not isinstance(workout, dict):
            workout = {}
        return RawResult(
            id=_to_int(data.get("id"), "id", default=result_id or 0),
            distance=_to_int(data.get("distance"), "distance"),
            time=_to_int(data.get("time"), "time"),
            stroke_rate=_to_int(data.get("stroke_rate"), "stroke_rate", default=0),
            date=_parse_date(data.get("date")),
            workout=WorkoutBreakdown(
                splits=_map_splits(workout.get("splits")),
                intervals=_map_intervals(workout.get("intervals")),
            ),
            workout_type=data.get("workout_type"),
            avg_heart_rate=_extract_heart_rate(data.get("heart_rate")),
        )
    except ValueError as exc:
        # negative values rejected by the models
        raise LogbookDataError(str(exc)) from exc


# ---------------------------------------------------------------------------
# Internal extractors
# ---------------------------------------------------------------------------


def _map_splits(raw: Any) -> Optional[tuple[Split, ...]]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise LogbookDataError(f"workout.splits must be a list, got {type(raw).__name__}")
    return tuple(
        Split(
            time=_to_int(entry.get("time"), "split.time"),
            distance=_to_int(entry.get("distance"), "split.distance"),
            stroke_rate=_to_int(entry.get("stroke_rate"), "split.stroke_rate", default=0),
            avg_heart_rate=_extract_heart_rate(entry.get("heart_rate")),
        )
        for entry in _objects(raw, "split")
    )


def _map_intervals(raw: Any) -> Optional[tuple[Interval, ...]]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise LogbookDataError(f"workout.intervals must be a list, got {type(raw).__name__}")
    return tuple(
        Interval(
            kind=_interval_kind(entry.get("type")),
            time=_to_int(entry.get("time"), "interval.time"),
            distance=_to_int(entry.get("distance"), "interval.distance", default=0),
            stroke_rate=_to_int(entry.get("stroke_rate"), "interval.stroke_rate", default=0),
            avg_heart_rate=_extract_heart_rate(entry.get("heart_rate")),
            rest_time=_to_int(entry.get("rest_time"), "interval.rest_time", default=0),
        )
        for entry in _objects(raw, "interval")
    )


def _objects(entries: list, label: str) -> list[dict[str, Any]]:
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise LogbookDataError(f"{label} #{i} is not an object: {entry!r}")
    return entries


def _interval_kind(value: Any) -> IntervalKind:
    try:
        return IntervalKind(str(value).lower())
    except ValueError:
        raise LogbookDataError(f"Unknown interval type: {value!r}") from None


def _extract_heart_rate(data: Any) -> Optional[int]:
    """Average heart rate from a ``heart_rate`` object; 0 means not recorded."""
    if not isinstance(data, dict):
        return None
    avg = data.get("average")
    try:
        value = int(avg) if avg is not None else None
    except (TypeError, ValueError):
        return None
    return value or None


def _to_int(value: Any, name: str, default: Optional[int] = None) -> int:
    if value is None:
        if default is None:
            raise LogbookDataError(f"Result is missing required field '{name}'")
        return default
    if isinstance(value, bool):
        raise LogbookDataError(f"Field '{name}' must be a number, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise LogbookDataError(f"Field '{name}' must be a number, got {value!r}") from None


def _parse_date(value: Any) -> Optional[datetime]:
    """Parse ISO-8601 (with ``Z``) or the logbook's ``YYYY-MM-DD HH:MM:SS``."""
    if not value:
        return None
    if not isinstance(value, str):
        raise LogbookDataError(f"Field 'date' must be a string, got {value!r}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise LogbookDataError(f"Unparseable result date: {value!r}")
