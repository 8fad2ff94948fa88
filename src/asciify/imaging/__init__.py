"""Image to text conversion: luminance extraction, block averaging and greyscale-ramp mapping."""

from .block_mapper import generate_string, ramp_index
from .converter import ImageToAscii
from .luminance import PIXEL_FORMATS, PixelFormat, extract_luminance
from .types import GREYSCALE_RAMP, CharacterCell, ImageDimensions, LuminanceField, PixelBuffer

__all__ = [
    "GREYSCALE_RAMP",
    "PIXEL_FORMATS",
    "CharacterCell",
    "ImageDimensions",
    "ImageToAscii",
    "LuminanceField",
    "PixelBuffer",
    "PixelFormat",
    "extract_luminance",
    "generate_string",
    "ramp_index",
]
