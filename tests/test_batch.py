from pathlib import Path

import cv2
import numpy as np
import pytest

from asciify.batch import run_batch, run_job
from asciify.config import AsciifyConfig, CellConfig, ConversionJob
from asciify.errors import ImageCodecError, UnsupportedFormatError
from asciify.imaging.fonts import load_font


def _write_image(path: Path, image: np.ndarray) -> Path:
    cv2.imwrite(str(path), image)
    return path


def test_run_job_writes_image_and_text(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    image = np.zeros((4, 4), dtype=np.uint8)
    image[2:, :] = 255
    job = ConversionJob(
        input=_write_image(tmp_path / "in.png", image),
        output=tmp_path / "out" / "in.png",
        text_output=tmp_path / "out" / "in.txt",
        cell=CellConfig(width=2, height=2),
    )

    text = run_job(job, load_font(size=12))

    assert text == "@@\n  \n"
    assert job.text_output.read_text(encoding="utf-8") == text
    rendered = cv2.imread(str(job.output))
    assert rendered is not None
    assert rendered.shape[:2] == (4, 4)
    assert "Converting" in caplog.text


def test_run_job_uses_font_metrics_without_cell(tmp_path: Path) -> None:
    job = ConversionJob(
        input=_write_image(tmp_path / "in.bmp", np.full((64, 64, 3), 255, dtype=np.uint8)),
        output=tmp_path / "out.png",
    )

    text = run_job(job, load_font(size=8))

    assert text
    assert set(text) == {" ", "\n"}


def test_run_batch_without_jobs_warns(caplog: pytest.LogCaptureFixture) -> None:
    assert run_batch(AsciifyConfig()) == []
    assert "No conversion jobs configured." in caplog.text


def test_run_batch_halts_on_first_failure(tmp_path: Path) -> None:
    deep = _write_image(tmp_path / "deep.png", np.zeros((4, 4), dtype=np.uint16))
    good = _write_image(tmp_path / "good.png", np.zeros((4, 4), dtype=np.uint8))
    config = AsciifyConfig(
        jobs=[
            ConversionJob(input=deep, output=tmp_path / "deep_out.png", cell=CellConfig(width=2, height=2)),
            ConversionJob(input=good, output=tmp_path / "good_out.png", cell=CellConfig(width=2, height=2)),
        ]
    )

    with pytest.raises(UnsupportedFormatError):
        run_batch(config)

    assert not (tmp_path / "deep_out.png").exists()
    assert not (tmp_path / "good_out.png").exists()


def test_run_job_missing_input_raises(tmp_path: Path) -> None:
    job = ConversionJob(input=tmp_path / "missing.png", output=tmp_path / "out.png")

    with pytest.raises(ImageCodecError):
        run_job(job, load_font(size=12))
