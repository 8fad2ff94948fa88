"""Rasterize generated text onto a bitmap laid out on the character-cell grid."""

from __future__ import annotations

from PIL import Image, ImageDraw

from .fonts import Font
from .types import CharacterCell

Colour = tuple[int, int, int] | str


def render_text(
    text: str,
    font: Font,
    cell: CharacterCell,
    background: Colour,
    foreground: Colour,
) -> Image.Image:
    """Draw text onto a new RGB canvas, one glyph per character cell.

    Glyph ``(cx, cy)`` is drawn at ``(cx * cell.width, cy * cell.height)``, so the
    grid holds for proportional fonts too and the canvas size depends only on the
    line count and the longest line. A final line terminator does not add a row.
    Empty text yields a 1x1 background-only canvas.

    Args:
        text: Newline-separated lines to draw
        font: Font to draw with
        cell: Pixel size of one glyph cell
        background: Fill colour of the canvas
        foreground: Colour of the text
    """
    lines = text.splitlines()
    columns = max((len(line) for line in lines), default=0)
    if columns == 0:
        return Image.new("RGB", (1, 1), background)

    canvas = Image.new("RGB", (columns * cell.width, len(lines) * cell.height), background)
    draw = ImageDraw.Draw(canvas)
    for cy, line in enumerate(lines):
        for cx, glyph in enumerate(line):
            if not glyph.isspace():
                draw.text((cx * cell.width, cy * cell.height), glyph, font=font, fill=foreground)
    return canvas
