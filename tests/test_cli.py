from collections.abc import Iterator
from pathlib import Path
import sys

import cv2
from loguru import logger
import numpy as np
import pytest

from asciify.cli import main


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.stderr)


def _config(tmp_path: Path, jobs: str) -> Path:
    path = tmp_path / "asciify_config.yaml"
    path.write_text(f"Asciify:\n  font: {{size: 12}}\n  jobs:\n{jobs}", encoding="utf-8")
    return path


def test_main_converts_configured_images(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    image = np.zeros((2, 2), dtype=np.uint8)
    image[1, :] = 255
    cv2.imwrite(str(tmp_path / "input.png"), image)
    config = _config(
        tmp_path,
        "    - {input: input.png, output: out/output.png, text_output: out/output.txt, cell: {width: 1, height: 1}}\n",
    )

    assert main(["--config", str(config), "--print"]) == 0

    assert (tmp_path / "out" / "output.png").exists()
    assert (tmp_path / "out" / "output.txt").read_text(encoding="utf-8") == "@@\n  \n"
    captured = capsys.readouterr()
    assert captured.out == "@@\n  \n"
    assert "Converted 1 image(s)" in captured.err


def test_main_missing_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_main_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = _config(tmp_path, "    - {input: a.png}\n")

    assert main(["--config", str(config)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_main_reports_conversion_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cv2.imwrite(str(tmp_path / "deep.png"), np.zeros((2, 2), dtype=np.uint16))
    config = _config(tmp_path, "    - {input: deep.png, output: out.png}\n")

    assert main(["--config", str(config)]) == 1
    assert "Only 8, 24 and 32 bpp images are supported" in capsys.readouterr().err
    assert not (tmp_path / "out.png").exists()


def test_main_logs_unexpected_errors(tmp_path: Path, mocker, capsys: pytest.CaptureFixture[str]) -> None:
    mocker.patch("asciify.cli.run_batch", side_effect=RuntimeError("boom"))
    config = _config(tmp_path, "    []\n")

    assert main(["--config", str(config)]) == 1
    assert "An unexpected error occurred: boom" in capsys.readouterr().err
