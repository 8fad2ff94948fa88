"""OpenCV-backed image decoding and encoding."""

from __future__ import annotations

from pathlib import Path

import cv2
from loguru import logger
import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..errors import ImageCodecError
from .types import PixelBuffer


def pixel_buffer_from_array(image: NDArray[np.generic]) -> PixelBuffer:
    """Wrap an OpenCV image (grey HW, BGR HWC or BGRA HWC) as a pixel buffer.

    The depth is reported as found (channels * bits per channel), so 16-bit or
    two-channel images come through unchanged and are rejected by the extractor.
    """
    if image.ndim not in (2, 3) or image.size == 0:
        raise ImageCodecError(f"Expected a non-empty 2-D or 3-D image array, got shape {image.shape}.")

    height, width = image.shape[:2]
    channels = 1 if image.ndim == 2 else image.shape[2]
    data = np.ascontiguousarray(image)
    return PixelBuffer(
        width=width,
        height=height,
        depth=channels * data.dtype.itemsize * 8,
        stride=width * channels * data.dtype.itemsize,
        data=data.tobytes(),
    )


def load_pixel_buffer(path: str | Path) -> PixelBuffer:
    """Decode an image file into a pixel buffer, keeping its native channel layout.

    Raises:
        ImageCodecError: If OpenCV cannot read the file
    """
    path = Path(path)
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageCodecError(f"Unable to decode image '{path}'.")

    buffer = pixel_buffer_from_array(image)
    logger.debug("Decoded {} ({}x{}, {} bpp).", path, buffer.width, buffer.height, buffer.depth)
    return buffer


def save_image(path: str | Path, image: Image.Image) -> None:
    """Encode a rendered image to disk, the format chosen by the file extension.

    Raises:
        ImageCodecError: If OpenCV cannot encode or write the file
    """
    path = Path(path)
    rgb = np.asarray(image.convert("RGB"))
    bgr = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
    try:
        written = cv2.imwrite(str(path), bgr)
    except cv2.error as ex:
        raise ImageCodecError(f"Unable to encode image '{path}': {ex}") from ex
    if not written:
        raise ImageCodecError(f"Unable to encode image '{path}'.")
    logger.debug("Encoded {} ({}x{}).", path, image.width, image.height)
