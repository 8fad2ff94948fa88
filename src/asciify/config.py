"""
asciify configuration - pydantic models loaded from YAML.

A configuration names the font to render with and a list of conversion jobs,
each reading one source image and writing one rendered image (and optionally
the generated text).
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator
import yaml

Channel = Annotated[int, Field(ge=0, le=255)]
RGB = tuple[Channel, Channel, Channel]


class FontConfig(BaseModel):
    """Font used for cell metrics and for drawing the output image."""

    path: Path | None = Field(default=None, description="TrueType/OpenType font file. Pillow's built-in font when omitted.")
    size: int = Field(default=12, gt=0, description="Font size in pixels.")
    index: int = Field(default=0, ge=0, description="Face index inside a font collection (.ttc).")


class CellConfig(BaseModel):
    """Explicit character cell size, overriding the size measured from the font."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)


class ConversionJob(BaseModel):
    input: Path = Field(description="Source image file.")
    output: Path = Field(description="Rendered image file; the extension selects the format.")
    text_output: Path | None = Field(default=None, description="Optional file receiving the generated text.")
    cell: CellConfig | None = None
    background: RGB = Field(default=(255, 255, 255), description="Canvas colour, name or RGB triple.")
    foreground: RGB = Field(default=(0, 0, 0), description="Text colour, name or RGB triple.")

    @field_validator("background", "foreground", mode="before")
    @classmethod
    def _parse_colour(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return ImageColor.getrgb(value)[:3]
            except ValueError as ex:
                raise ValueError(f"Unknown colour {value!r}") from ex
        return value

    def resolve_paths(self, base: Path) -> "ConversionJob":
        """Return a copy with relative file paths anchored at ``base``."""
        updates: dict[str, Path] = {"input": base / self.input, "output": base / self.output}
        if self.text_output is not None:
            updates["text_output"] = base / self.text_output
        return self.model_copy(update=updates)


class AsciifyConfig(BaseModel):
    font: FontConfig = FontConfig()
    jobs: list[ConversionJob] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path, key_to_config: tuple[str, ...] = ("Asciify",)) -> "AsciifyConfig":
        """
        Load an AsciifyConfig from a YAML configuration file.

        Relative paths in the file (jobs and font) are resolved against the
        directory containing it.

        Parameters:
            path: Path to the YAML configuration file
            key_to_config: Tuple of keys to navigate nested configuration

        Returns:
            AsciifyConfig: Configuration object with validated settings

        Raises:
            OSError: If the file cannot be read
            yaml.YAMLError: If the YAML content is invalid
            pydantic.ValidationError: If the configuration is invalid
        """
        path = Path(path)

        # Try different encodings
        for encoding in ["utf-8", "utf-8-sig"]:
            try:
                data = yaml.safe_load(path.read_text(encoding=encoding))
                break
            except UnicodeDecodeError:
                if encoding == "utf-8-sig":
                    raise

        # Navigate through nested keys
        config = data
        for key in key_to_config:
            config = config[key]

        return cls.model_validate(config).resolve_paths(path.parent)

    def resolve_paths(self, base: Path) -> "AsciifyConfig":
        font = self.font
        if font.path is not None:
            font = font.model_copy(update={"path": base / font.path})
        return self.model_copy(update={"font": font, "jobs": [job.resolve_paths(base) for job in self.jobs]})
