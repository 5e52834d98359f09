"""Report renderer: executes a LayoutPlan with Pillow and returns PNG bytes.

Each call creates, paints and encodes its own surface. Translucent fills,
scanlines and glows are painted on a scratch layer and alpha-composited,
so the output depends only on the plan (and the fonts available).
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Optional

from PIL import Image, ImageColor, ImageDraw, ImageFilter, ImageFont

from row_report.exceptions import RenderError
from row_report.models.drawing import (
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
from row_report.models.enums import Align

logger = logging.getLogger(__name__)

# Candidate TrueType files per (family, bold), tried in order.
_FONT_FILES: dict[tuple[str, bool], tuple[str, ...]] = {
    ("mono", False): ("DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "Menlo.ttc", "consola.ttf"),
    ("mono", True): ("DejaVuSansMono-Bold.ttf", "LiberationMono-Bold.ttf", "Menlo.ttc", "consolab.ttf"),
    ("sans", False): ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Helvetica.ttc", "arial.ttf"),
    ("sans", True): ("DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf", "Helvetica.ttc", "arialbd.ttf"),
}

_ANCHORS: dict[Align, str] = {
    Align.LEFT: "ls",
    Align.RIGHT: "rs",
    Align.CENTER: "ms",
}

RGBA = tuple[int, int, int, int]


class FontBook:
    """Resolves FontSpecs to Pillow fonts, caching per instance."""

    def __init__(self, font_files: Optional[dict[tuple[str, bool], tuple[str, ...]]] = None) -> None:
        self._files = font_files or _FONT_FILES
        self._cache: dict[FontSpec, ImageFont.FreeTypeFont] = {}

    def get(self, spec: FontSpec) -> ImageFont.FreeTypeFont:
        font = self._cache.get(spec)
        if font is None:
            font = self._load(spec)
            self._cache[spec] = font
        return font

    def _load(self, spec: FontSpec) -> ImageFont.FreeTypeFont:
        for name in self._files.get((spec.family, spec.bold), ()):
            try:
                return ImageFont.truetype(name, spec.size)
            except OSError:
                continue
        logger.warning(
            "No TrueType font for %s%s, using Pillow default",
            spec.family,
            " bold" if spec.bold else "",
        )
        return ImageFont.load_default(size=spec.size)


def render_plan(plan: LayoutPlan, fonts: Optional[FontBook] = None) -> bytes:
    """Paint *plan* onto a fresh surface and return it PNG-encoded.

    Raises:
        RenderError: If any draw operation or the encoder fails.
    """
    fonts = fonts or FontBook()
    try:
        surface = Image.new("RGBA", (plan.width, plan.height), (0, 0, 0, 255))
        for op in plan.elements:
            _paint(surface, op, fonts)
        buf = io.BytesIO()
        surface.convert("RGB").save(buf, format="PNG")
    except (OSError, ValueError, TypeError) as exc:
        raise RenderError(f"Failed to render report: {exc}") from exc
    logger.debug("Rendered %dx%d report, %d elements", plan.width, plan.height, len(plan.elements))
    return buf.getvalue()


# ---------------------------------------------------------------------------
# Painting
# ---------------------------------------------------------------------------


def _paint(surface: Image.Image, op: DrawOp, fonts: FontBook) -> None:
    painter = _PAINTERS.get(type(op))
    if painter is None:
        raise TypeError(f"Unsupported draw operation: {type(op).__name__}")

    glow = getattr(op, "glow", 0)
    alpha = getattr(op, "alpha", 1.0)

    if glow > 0:
        layer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
        painter(ImageDraw.Draw(layer), op, fonts, 255)
        surface.alpha_composite(layer.filter(ImageFilter.GaussianBlur(glow)))

    if alpha < 1.0:
        layer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
        painter(ImageDraw.Draw(layer), op, fonts, round(alpha * 255))
        surface.alpha_composite(layer)
    else:
        painter(ImageDraw.Draw(surface), op, fonts, 255)


def _rgba(color: str, opacity: int) -> RGBA:
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, opacity)


def _paint_fill(draw: ImageDraw.ImageDraw, op: FillRect, fonts: FontBook, opacity: int) -> None:
    box = op.box
    if box.width <= 0 or box.height <= 0:
        return
    draw.rectangle((box.x, box.y, box.right - 1, box.bottom - 1), fill=_rgba(op.color, opacity))


def _paint_stroke(draw: ImageDraw.ImageDraw, op: StrokeRect, fonts: FontBook, opacity: int) -> None:
    box = op.box
    draw.rectangle(
        (box.x, box.y, box.right - 1, box.bottom - 1),
        outline=_rgba(op.color, opacity),
        width=op.width,
    )


def _paint_line(draw: ImageDraw.ImageDraw, op: HLine, fonts: FontBook, opacity: int) -> None:
    draw.line(((op.x0, op.y), (op.x1, op.y)), fill=_rgba(op.color, opacity), width=op.width)


def _paint_dashed(draw: ImageDraw.ImageDraw, op: DashedHLine, fonts: FontBook, opacity: int) -> None:
    fill = _rgba(op.color, opacity)
    for x in range(op.x0, op.x1, op.dash + op.gap):
        draw.rectangle((x, op.y, min(x + op.dash, op.x1) - 1, op.y), fill=fill)


def _paint_scanlines(draw: ImageDraw.ImageDraw, op: Scanlines, fonts: FontBook, opacity: int) -> None:
    fill = _rgba(op.color, opacity)
    box = op.box
    for y in range(box.y, box.bottom, op.spacing):
        draw.line(((box.x, y), (box.right - 1, y)), fill=fill)


def _paint_text(draw: ImageDraw.ImageDraw, op: Text, fonts: FontBook, opacity: int) -> None:
    draw.text(
        (op.x, op.y),
        op.text,
        font=fonts.get(op.font),
        fill=_rgba(op.color, opacity),
        anchor=_ANCHORS[op.align],
    )


_PAINTERS: dict[type, Callable[..., None]] = {
    FillRect: _paint_fill,
    StrokeRect: _paint_stroke,
    HLine: _paint_line,
    DashedHLine: _paint_dashed,
    Scanlines: _paint_scanlines,
    Text: _paint_text,
}
