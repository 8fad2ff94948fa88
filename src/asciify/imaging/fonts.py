"""Monospace font loading and character-cell metrics."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from .types import CharacterCell

Font: TypeAlias = ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font(path: str | Path | None = None, size: int = 12, index: int = 0) -> Font:
    """Load a TrueType/OpenType font, or Pillow's built-in font when no path is given.

    Raises:
        OSError: If the font file cannot be read
    """
    if path is None:
        logger.warning("No font path configured, using Pillow's proportional built-in font at size {}.", size)
        return ImageFont.load_default(size=size)

    font = ImageFont.truetype(str(path), size=size, index=index)
    logger.debug("Loaded font {} (size {}, index {}).", path, size, index)
    return font


def monospace_cell_size(font: Font) -> CharacterCell:
    """Measure the pixel size of one character cell in a monospace font.

    A two-by-two block of glyphs is measured against a single glyph; the
    difference is one advance horizontally and one line step vertically, with
    any layout padding cancelled out.
    """
    draw = ImageDraw.Draw(Image.new("L", (1, 1)))
    double = draw.multiline_textbbox((0, 0), "MM\nMM", font=font)
    single = draw.textbbox((0, 0), "M", font=font)
    return CharacterCell(
        width=round(double[2] - single[2]),
        height=round(double[3] - single[3]),
    )
