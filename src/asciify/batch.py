"""Batch conversion of configured images into rendered text images."""

from __future__ import annotations

from loguru import logger

from .config import AsciifyConfig, ConversionJob, FontConfig
from .imaging.codec import save_image
from .imaging.converter import ImageToAscii
from .imaging.fonts import Font, load_font, monospace_cell_size
from .imaging.types import CharacterCell


def load_configured_font(config: FontConfig) -> Font:
    return load_font(config.path, size=config.size, index=config.index)


def run_job(job: ConversionJob, font: Font) -> str:
    """Convert one image and write its outputs.

    Returns:
        The generated text

    Raises:
        AsciifyError: If decoding, conversion or encoding fails
        OSError: If the text output cannot be written
    """
    logger.info("Converting {} -> {}", job.input, job.output)
    converter = ImageToAscii.from_file(job.input)

    cell = CharacterCell(job.cell.width, job.cell.height) if job.cell is not None else monospace_cell_size(font)
    text = converter.generate_string(cell)
    logger.debug(
        "{}x{} image, {}x{} cell, {} rows of text.",
        converter.dimensions.width,
        converter.dimensions.height,
        cell.width,
        cell.height,
        text.count("\n"),
    )

    image = converter.generate_image(font, job.background, job.foreground, cell)
    job.output.parent.mkdir(parents=True, exist_ok=True)
    save_image(job.output, image)

    if job.text_output is not None:
        job.text_output.parent.mkdir(parents=True, exist_ok=True)
        job.text_output.write_text(text, encoding="utf-8")
        logger.info("Wrote text to {}", job.text_output)

    logger.success("Wrote {} ({}x{}).", job.output, image.width, image.height)
    return text


def run_batch(config: AsciifyConfig) -> list[str]:
    """Run every configured job in order, stopping at the first failure."""
    if not config.jobs:
        logger.warning("No conversion jobs configured.")
        return []

    font = load_configured_font(config.font)
    return [run_job(job, font) for job in config.jobs]
