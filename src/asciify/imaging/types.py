from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

import numpy as np
from numpy.typing import NDArray

# Ten glyphs from darkest to lightest
GREYSCALE_RAMP: Final[str] = "@%#*+=-:. "

# Flat, read-only, row-major brightness values in [0, 1]
LuminanceField: TypeAlias = NDArray[np.float32]


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Raw decoded image data as handed over by the codec."""

    width: int
    height: int
    depth: int
    stride: int
    data: bytes


@dataclass(frozen=True, slots=True)
class ImageDimensions:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive (got {self.width}x{self.height}).")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class CharacterCell:
    """Pixel size of one rendered glyph cell."""

    width: int
    height: int
