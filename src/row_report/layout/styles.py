"""Report styles: cosmetic configurations of the single layout engine.

A style fixes the canvas width, palette, fonts, column positions and the
height of the chrome above and below the table. Only the row count
varies between reports of one style.

``forest`` is the production style; the others are alternate themes.
"""

from __future__ import annotations

from dataclasses import dataclass

from row_report.exceptions import UnknownStyleError
from row_report.models.drawing import Box, FontSpec
from row_report.models.enums import Align


@dataclass(frozen=True)
class ColumnSpec:
    """One table column. Header label and data cells share x and alignment."""

    label: str
    field: str  # a DisplayRow field name
    x: int
    align: Align = Align.RIGHT


@dataclass(frozen=True)
class TitleLine:
    """A line of the title block; ``template`` is formatted with the title context."""

    template: str
    x: int
    y: int
    font: FontSpec
    color: str
    glow: int = 0


@dataclass(frozen=True)
class FrameRect:
    """Border drawn ``inset`` px inside the canvas edge."""

    inset: int
    color: str
    width: int = 1
    glow: int = 0


@dataclass(frozen=True)
class FooterMark:
    """Small decorative block, ``dy`` px below the last row."""

    x: int
    dy: int
    width: int
    height: int
    color: str


@dataclass(frozen=True)
class FooterCaption:
    text: str
    x: int
    dy: int
    font: FontSpec
    color: str
    glow: int = 0


@dataclass(frozen=True)
class RowTheme:
    """Colours of the data rows.

    Row 0 (the summary) uses the ``summary_*`` values; later rows
    alternate between the ``odd_*`` and ``even_*`` values by index.
    A ``None`` band fill means no band is drawn.
    """

    summary_color: str
    odd_color: str
    even_color: str
    separator_color: str
    summary_band_fill: str | None = None
    summary_band_alpha: float = 1.0
    summary_band_border: str | None = None
    summary_band_border_width: int = 2
    summary_glow: int = 0
    odd_band_fill: str | None = None
    even_band_fill: str | None = None
    band_alpha: float = 1.0
    separator_dashed: bool = False
    text_glow: int = 0


@dataclass(frozen=True)
class ScanlineSpec:
    color: str
    spacing: int = 4
    alpha: float = 0.3


@dataclass(frozen=True)
class ReportStyle:
    """Complete cosmetic configuration for one report theme.

    Vertical geometry: the header band ends at ``rows_top``
    (``header_box.bottom + header_gap``); rows follow at ``row_height``
    intervals; ``footer_height`` px of chrome close the canvas.
    """

    name: str
    width: int
    background: str
    title_lines: tuple[TitleLine, ...]
    header_box: Box
    header_fill: str
    header_border: str | None
    header_font: FontSpec
    header_color: str
    header_baseline: int  # label baseline, px below header_box.y
    columns: tuple[ColumnSpec, ...]
    row_font: FontSpec
    row_height: int
    row_baseline: int  # cell baseline, px below the row top
    rows: RowTheme
    footer_height: int
    date_format: str = "%Y-%m-%d"
    header_gap: int = 0
    header_fill_alpha: float = 1.0
    header_border_width: int = 2
    header_glow: int = 0
    header_text_glow: int = 0
    frames: tuple[FrameRect, ...] = ()
    scanlines: ScanlineSpec | None = None
    title_bars: tuple[Box, ...] = ()
    title_bar_color: str = "#000000"
    title_divider: tuple[int, int, int] | None = None  # (x0, x1, y)
    title_divider_color: str = "#000000"
    title_divider_width: int = 1
    footer_marks: tuple[FooterMark, ...] = ()
    footer_caption: FooterCaption | None = None

    @property
    def rows_top(self) -> int:
        return self.header_box.bottom + self.header_gap

    @property
    def base_height(self) -> int:
        """Canvas height of a report with no data rows."""
        return self.rows_top + self.footer_height

    @property
    def table_x(self) -> int:
        return self.header_box.x

    @property
    def table_width(self) -> int:
        return self.header_box.width


# ---------------------------------------------------------------------------
# Built-in styles
# ---------------------------------------------------------------------------


def _forest() -> ReportStyle:
    base200 = "#111827"
    base300 = "#0F172A"
    content = "#F9FAFB"
    primary = "#22C55E"
    secondary = "#14B8A6"
    accent = "#06B6D4"
    neutral = "#374151"
    return ReportStyle(
        name="forest",
        width=550,
        background=base300,
        scanlines=ScanlineSpec(color=neutral, spacing=4, alpha=0.3),
        frames=(
            FrameRect(inset=20, color=primary, width=4, glow=6),
            FrameRect(inset=40, color=secondary, width=2, glow=4),
        ),
        title_lines=(
            TitleLine(">>> {date} <<<", x=60, y=80,
                      font=FontSpec(20, bold=True), color=accent, glow=3),
        ),
        title_bars=(Box(60, 90, 200, 2), Box(60, 95, 150, 2), Box(60, 100, 100, 2)),
        title_bar_color=secondary,
        header_box=Box(60, 120, 430, 40),
        header_fill=base200,
        header_border=accent,
        header_glow=3,
        header_font=FontSpec(16, bold=True),
        header_color=content,
        header_baseline=25,
        header_text_glow=2,
        header_gap=10,
        columns=(
            ColumnSpec("TIME", "time", 160, Align.RIGHT),
            ColumnSpec("METERS", "distance", 260, Align.RIGHT),
            ColumnSpec("PACE/500M", "pace", 400, Align.RIGHT),
            ColumnSpec("S/MIN", "stroke_rate", 480, Align.RIGHT),
        ),
        row_font=FontSpec(14),
        row_height=28,
        row_baseline=19,
        rows=RowTheme(
            summary_color=primary,
            odd_color=secondary,
            even_color=accent,
            separator_color=neutral,
            summary_band_fill=base200,
            summary_band_border=secondary,
            summary_glow=2,
            separator_dashed=True,
            text_glow=1,
        ),
        footer_height=100,
        footer_marks=(
            FooterMark(60, 20, 4, 15, primary),
            FooterMark(70, 25, 4, 10, primary),
            FooterMark(80, 30, 4, 8, primary),
            FooterMark(470, 20, 4, 15, secondary),
            FooterMark(460, 25, 4, 10, secondary),
            FooterMark(450, 30, 4, 8, secondary),
        ),
    )


def _cyberpunk() -> ReportStyle:
    neon_cyan = "#00ffff"
    neon_magenta = "#ff00ff"
    neon_yellow = "#ffff00"
    dark_cyan = "#0d4d4d"
    bright_green = "#00ff41"
    return ReportStyle(
        name="cyberpunk",
        width=800,
        background="#1a0d26",
        scanlines=ScanlineSpec(color=dark_cyan, spacing=4, alpha=0.3),
        frames=(
            FrameRect(inset=20, color=neon_cyan, width=4, glow=6),
            FrameRect(inset=40, color=neon_magenta, width=2, glow=4),
        ),
        title_lines=(
            TitleLine(">>> TRAINING_DATA.EXE <<<", x=60, y=80,
                      font=FontSpec(24, bold=True), color=neon_yellow, glow=3),
            TitleLine("{distance}M_DISTANCE", x=60, y=130,
                      font=FontSpec(32, bold=True), color=neon_cyan, glow=3),
            TitleLine("DATE: {date}  USER: {username}", x=60, y=160,
                      font=FontSpec(20), color=neon_cyan, glow=2),
        ),
        date_format="%Y.%m.%d",
        title_bars=(Box(60, 170, 200, 2), Box(60, 175, 150, 2), Box(60, 180, 100, 2)),
        title_bar_color=neon_magenta,
        header_box=Box(60, 200, 680, 40),
        header_fill=dark_cyan,
        header_border=bright_green,
        header_glow=3,
        header_font=FontSpec(18, bold=True),
        header_color=neon_yellow,
        header_baseline=25,
        header_text_glow=2,
        header_gap=10,
        columns=(
            ColumnSpec("TIME_SPLIT", "time", 80, Align.LEFT),
            ColumnSpec("METERS", "distance", 220, Align.LEFT),
            ColumnSpec("PACE/500M", "pace", 360, Align.LEFT),
            ColumnSpec("S/MIN", "stroke_rate", 520, Align.LEFT),
        ),
        row_font=FontSpec(16),
        row_height=35,
        row_baseline=22,
        rows=RowTheme(
            summary_color=neon_cyan,
            odd_color=neon_yellow,
            even_color=bright_green,
            separator_color=neon_magenta,
            summary_band_fill=dark_cyan,
            summary_band_border=neon_magenta,
            summary_glow=2,
            separator_dashed=True,
            text_glow=1,
        ),
        footer_height=130,
        footer_marks=(
            FooterMark(60, 30, 4, 20, neon_cyan),
            FooterMark(70, 35, 4, 15, neon_cyan),
            FooterMark(80, 40, 4, 10, neon_cyan),
            FooterMark(720, 30, 4, 20, neon_magenta),
            FooterMark(710, 35, 4, 15, neon_magenta),
            FooterMark(700, 40, 4, 10, neon_magenta),
        ),
        footer_caption=FooterCaption(
            "SYSTEM_STATUS: ACTIVE | DATA_STREAM: LIVE",
            x=60, dy=75, font=FontSpec(14), color="#ff6600", glow=2,
        ),
    )


def _ocean() -> ReportStyle:
    deep_navy = "#1e3a8a"
    ocean_blue = "#3b82f6"
    foam = "#f8fafc"
    white = "#ffffff"
    secondary = "#cbd5e1"
    accent = "#06b6d4"
    return ReportStyle(
        name="ocean",
        width=800,
        background=deep_navy,
        frames=(FrameRect(inset=40, color=foam, width=3, glow=4),),
        title_lines=(
            TitleLine("{distance}m", x=60, y=100,
                      font=FontSpec(40, bold=True, family="sans"), color=white, glow=3),
            TitleLine("{date}", x=60, y=130,
                      font=FontSpec(18, family="sans"), color=secondary),
        ),
        date_format="%B %d, %Y",
        title_divider=(60, 300, 150),
        title_divider_color=accent,
        title_divider_width=3,
        header_box=Box(60, 170, 680, 50),
        header_fill=ocean_blue,
        header_fill_alpha=0.5,
        header_border=accent,
        header_glow=3,
        header_font=FontSpec(14, bold=True, family="sans"),
        header_color=white,
        header_baseline=30,
        header_text_glow=1,
        columns=(
            ColumnSpec("TIME", "time", 80, Align.LEFT),
            ColumnSpec("DISTANCE", "distance", 200, Align.LEFT),
            ColumnSpec("PACE /500M", "pace", 340, Align.LEFT),
            ColumnSpec("STROKE", "stroke_rate", 480, Align.LEFT),
        ),
        row_font=FontSpec(16, family="sans"),
        row_height=40,
        row_baseline=26,
        rows=RowTheme(
            summary_color=accent,
            odd_color=white,
            even_color=foam,
            separator_color="#64748b",
            summary_band_fill=accent,
            summary_band_alpha=0.25,
            summary_band_border=accent,
            summary_glow=4,
            odd_band_fill="#0f172a",
            band_alpha=0.25,
        ),
        footer_height=120,
        footer_marks=(
            FooterMark(68, 54, 4, 4, accent),
            FooterMark(76, 54, 4, 4, accent),
            FooterMark(84, 54, 4, 4, accent),
        ),
        footer_caption=FooterCaption(
            "Rowing Performance • On the Water",
            x=110, dy=60, font=FontSpec(12, family="sans"), color=secondary, glow=1,
        ),
    )


def _modern() -> ReportStyle:
    background = "#f8f9fa"
    primary = "#212529"
    secondary = "#6c757d"
    accent = "#007bff"
    border = "#dee2e6"
    return ReportStyle(
        name="modern",
        width=800,
        background=background,
        frames=(FrameRect(inset=40, color=border, width=1),),
        title_lines=(
            TitleLine("{distance}m", x=60, y=100,
                      font=FontSpec(32, family="sans"), color=primary),
            TitleLine("{date} · {time}", x=60, y=130,
                      font=FontSpec(18, family="sans"), color=secondary),
        ),
        date_format="%B %d, %Y",
        title_divider=(60, 740, 150),
        title_divider_color=border,
        header_box=Box(60, 170, 680, 50),
        header_fill=background,
        header_border=border,
        header_border_width=1,
        header_font=FontSpec(14, family="sans"),
        header_color=secondary,
        header_baseline=30,
        columns=(
            ColumnSpec("Time", "time", 80, Align.LEFT),
            ColumnSpec("Distance", "distance", 200, Align.LEFT),
            ColumnSpec("Split /500m", "pace", 340, Align.LEFT),
            ColumnSpec("Rate", "stroke_rate", 480, Align.LEFT),
        ),
        row_font=FontSpec(16, family="sans"),
        row_height=40,
        row_baseline=26,
        rows=RowTheme(
            summary_color=accent,
            odd_color=primary,
            even_color=primary,
            separator_color=border,
            summary_band_fill=accent,
            summary_band_alpha=0.04,
            summary_band_border=accent,
            even_band_fill="#eef1f4",
        ),
        footer_height=120,
        footer_caption=FooterCaption(
            "Workout Summary • Data updated in real-time",
            x=60, dy=60, font=FontSpec(12, family="sans"), color=secondary,
        ),
    )


STYLES: dict[str, ReportStyle] = {
    style.name: style for style in (_forest(), _cyberpunk(), _ocean(), _modern())
}

DEFAULT_STYLE = "forest"


def get_style(name: str) -> ReportStyle:
    """Look up a built-in style by name.

    Raises:
        UnknownStyleError: If no style is registered under *name*.
    """
    try:
        return STYLES[name]
    except KeyError:
        raise UnknownStyleError(
            f"Unknown report style {name!r}; available: {', '.join(sorted(STYLES))}"
        ) from None
