"""asciify - render raster images as monospace greyscale-ramp text and back into bitmaps."""

from .config import AsciifyConfig
from .errors import (
    AsciifyError,
    EmptyBlockError,
    ImageCodecError,
    InvalidCellSizeError,
    UnsupportedFormatError,
)
from .imaging import CharacterCell, ImageToAscii, PixelBuffer

__version__ = "0.1.0"
__all__ = [
    "AsciifyConfig",
    "AsciifyError",
    "CharacterCell",
    "EmptyBlockError",
    "ImageCodecError",
    "ImageToAscii",
    "InvalidCellSizeError",
    "PixelBuffer",
    "UnsupportedFormatError",
]
