"""Block-averaging mapper from a luminance field to greyscale-ramp text."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ..errors import EmptyBlockError, InvalidCellSizeError
from .types import GREYSCALE_RAMP, CharacterCell, ImageDimensions, LuminanceField


def ramp_index(brightness: float, ramp_length: int = len(GREYSCALE_RAMP)) -> int:
    """Map a brightness in [0, 1] to a ramp index (0 is darkest).

    ``floor(brightness * ramp_length)``, clamped so that 1.0 lands on the last glyph.
    """
    index = math.floor(brightness * ramp_length)
    return min(max(index, 0), ramp_length - 1)


def block_average(
    plane: NDArray[np.float32],
    left: int,
    top: int,
    width: int,
    height: int,
) -> float:
    """Mean brightness of a block, clipped to the image.

    Args:
        plane: 2-D (H, W) view of the luminance field
        left: Leftmost pixel column of the block
        top: Topmost pixel row of the block
        width: Block width in pixels
        height: Block height in pixels

    Raises:
        EmptyBlockError: If the clipped block contains no pixels
    """
    rows, cols = plane.shape
    block = plane[max(top, 0) : min(top + height, rows), max(left, 0) : min(left + width, cols)]
    count = block.size
    if count == 0:
        raise EmptyBlockError(f"Block at ({left}, {top}) of size {width}x{height} contains no pixels.")
    return float(block.sum(dtype=np.float64)) / count


def generate_string(
    field: LuminanceField,
    dimensions: ImageDimensions,
    cell: CharacterCell,
) -> str:
    """Render a luminance field as text, one ramp glyph per character cell.

    The grid is ``width // cell.width`` columns by ``height // cell.height`` rows;
    pixels left over on the right and bottom edges are dropped.

    Args:
        field: Flat row-major brightness values
        dimensions: Size of the image the field was extracted from
        cell: Pixel size of one glyph cell

    Returns:
        One line per grid row, each terminated by a newline

    Raises:
        InvalidCellSizeError: If either cell dimension is not positive
        ValueError: If the field length does not match ``dimensions``
    """
    if cell.width <= 0 or cell.height <= 0:
        raise InvalidCellSizeError(cell.width, cell.height)
    if field.size != dimensions.pixel_count:
        raise ValueError(f"Luminance field holds {field.size} values, expected {dimensions.pixel_count}.")

    plane = field.reshape(dimensions.height, dimensions.width)
    columns = dimensions.width // cell.width
    rows = dimensions.height // cell.height

    lines = []
    for cy in range(rows):
        top = cy * cell.height
        line = "".join(
            GREYSCALE_RAMP[ramp_index(block_average(plane, cx * cell.width, top, cell.width, cell.height))]
            for cx in range(columns)
        )
        lines.append(line + "\n")

    return "".join(lines)
