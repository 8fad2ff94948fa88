"""Luminance extraction from raw 8, 24 and 32 bpp pixel buffers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

import numpy as np
from numpy.typing import NDArray

from ..errors import UnsupportedFormatError
from .types import LuminanceField, PixelBuffer


@dataclass(frozen=True, slots=True)
class PixelFormat:
    """A supported bit depth and the way its components turn into brightness.

    Attributes:
        depth: Bits per pixel
        components: Bytes per pixel, also the byte-index to pixel-index divisor
        brightness: Maps an (H, W, components) uint8 array to (H, W) brightness in [0, 1]
    """

    depth: int
    components: int
    brightness: Callable[[NDArray[np.uint8]], NDArray[np.float32]]


def _lightness_bgr(pixels: NDArray[np.uint8]) -> NDArray[np.float32]:
    # HSL lightness; channel order does not matter for max/min, alpha (4th byte) is ignored
    colour = pixels[..., :3]
    high = colour.max(axis=-1).astype(np.float32)
    low = colour.min(axis=-1).astype(np.float32)
    return (high + low) / np.float32(510.0)


def _lightness_grey(pixels: NDArray[np.uint8]) -> NDArray[np.float32]:
    # (c, c, c) collapses to c / 255
    return pixels[..., 0].astype(np.float32) / np.float32(255.0)


DEPTH_8: Final = PixelFormat(depth=8, components=1, brightness=_lightness_grey)
DEPTH_24: Final = PixelFormat(depth=24, components=3, brightness=_lightness_bgr)
DEPTH_32: Final = PixelFormat(depth=32, components=4, brightness=_lightness_bgr)

PIXEL_FORMATS: Final[Mapping[int, PixelFormat]] = MappingProxyType(
    {fmt.depth: fmt for fmt in (DEPTH_8, DEPTH_24, DEPTH_32)}
)


def pixel_format_for(depth: int) -> PixelFormat:
    """Look up the pixel format for a bit depth.

    Raises:
        UnsupportedFormatError: If the depth is not 8, 24 or 32
    """
    try:
        return PIXEL_FORMATS[depth]
    except KeyError:
        raise UnsupportedFormatError(depth) from None


def extract_luminance(buffer: PixelBuffer) -> LuminanceField:
    """Convert a decoded pixel buffer into a flat, read-only brightness field.

    Each row of ``buffer.data`` is ``buffer.stride`` bytes long; only its first
    ``width * components`` bytes hold pixels, the rest is padding and is skipped.
    8 bpp pixels map one byte to one pixel.

    Args:
        buffer: Decoded image with depth 8 (grey), 24 (B, G, R) or 32 (B, G, R, A)

    Returns:
        float32 array of ``width * height`` values in [0, 1], index ``y * width + x``

    Raises:
        UnsupportedFormatError: If the depth is not 8, 24 or 32
        ValueError: If the stride or data length cannot hold the stated image
    """
    fmt = pixel_format_for(buffer.depth)
    if buffer.width <= 0 or buffer.height <= 0:
        raise ValueError(f"Image dimensions must be positive (got {buffer.width}x{buffer.height}).")

    row_bytes = buffer.width * fmt.components
    if buffer.stride < row_bytes:
        raise ValueError(f"Stride {buffer.stride} is shorter than a {row_bytes}-byte row.")

    needed = buffer.stride * buffer.height
    if len(buffer.data) < needed:
        raise ValueError(f"Pixel data holds {len(buffer.data)} bytes, expected at least {needed}.")

    rows = np.frombuffer(buffer.data, dtype=np.uint8, count=needed).reshape(buffer.height, buffer.stride)
    pixels = rows[:, :row_bytes].reshape(buffer.height, buffer.width, fmt.components)

    field = np.ascontiguousarray(fmt.brightness(pixels), dtype=np.float32).reshape(-1)
    field.flags.writeable = False
    return field
