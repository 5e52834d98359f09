"""Enumerations shared by the report pipeline."""

from enum import Enum, IntEnum, auto


class SegmentKind(IntEnum):
    """Which part of a workout a table row was built from."""

    SUMMARY = auto()
    SPLIT = auto()
    INTERVAL = auto()


class IntervalKind(Enum):
    """Interval types as reported by the logbook API (``interval.type``)."""

    DISTANCE = "distance"
    TIME = "time"
    CALORIE = "calorie"
    REST = "rest"


class Align(Enum):
    """Horizontal text anchoring relative to a column's x offset."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Region(IntEnum):
    """Vertical band of the report an element belongs to.

    Ordered top to bottom, except BACKGROUND and FRAME which span the
    whole canvas.
    """

    BACKGROUND = auto()
    FRAME = auto()
    TITLE = auto()
    HEADER = auto()
    ROWS = auto()
    FOOTER = auto()
