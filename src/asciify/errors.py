"""Exception types raised by asciify."""

from __future__ import annotations


class AsciifyError(Exception):
    """Base class for all asciify errors."""


class UnsupportedFormatError(AsciifyError, ValueError):
    """The pixel buffer's bit depth is not 8, 24 or 32."""

    def __init__(self, depth: int) -> None:
        super().__init__(f"Only 8, 24 and 32 bpp images are supported (got {depth} bpp).")
        self.depth = depth


class InvalidCellSizeError(AsciifyError, ValueError):
    """A character cell has a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Character cell size must be positive (got {width}x{height}).")
        self.width = width
        self.height = height


class EmptyBlockError(AsciifyError, ValueError):
    """A block selected for averaging contains no pixels."""


class ImageCodecError(AsciifyError, OSError):
    """OpenCV could not decode or encode an image file."""
