from __future__ import annotations

from pathlib import Path

from PIL import Image

from .block_mapper import generate_string
from .codec import load_pixel_buffer
from .fonts import Font, monospace_cell_size
from .luminance import extract_luminance
from .text_raster import Colour, render_text
from .types import CharacterCell, ImageDimensions, LuminanceField, PixelBuffer


class ImageToAscii:
    """Converts one source image into greyscale-ramp text and back into a bitmap.

    Brightness is extracted once at construction; the pixel buffer itself is
    not kept. Every render call is a pure function of the stored field.
    """

    def __init__(self, buffer: PixelBuffer) -> None:
        """Extract the luminance field from a decoded pixel buffer.

        Raises:
            UnsupportedFormatError: If the buffer's depth is not 8, 24 or 32
        """
        self._luminance = extract_luminance(buffer)
        self._dimensions = ImageDimensions(buffer.width, buffer.height)

    @classmethod
    def from_file(cls, path: str | Path) -> "ImageToAscii":
        """Decode an image file and build a converter for it."""
        return cls(load_pixel_buffer(path))

    @property
    def dimensions(self) -> ImageDimensions:
        return self._dimensions

    @property
    def luminance(self) -> LuminanceField:
        return self._luminance

    def generate_string(self, cell: CharacterCell) -> str:
        """Render the image as text, one glyph per ``cell``-sized pixel block."""
        return generate_string(self._luminance, self._dimensions, cell)

    def generate_string_for_font(self, font: Font) -> str:
        """Render the image as text using the cell size measured from ``font``."""
        return self.generate_string(monospace_cell_size(font))

    def generate_image(
        self,
        font: Font,
        background: Colour = "white",
        foreground: Colour = "black",
        cell: CharacterCell | None = None,
    ) -> Image.Image:
        """Render the image as text and rasterize it with ``font`` on the cell grid.

        Args:
            font: Font used for both cell metrics and drawing
            background: Canvas colour
            foreground: Text colour
            cell: Explicit cell size; measured from ``font`` when omitted
        """
        if cell is None:
            cell = monospace_cell_size(font)
        return render_text(self.generate_string(cell), font, cell, background, foreground)
