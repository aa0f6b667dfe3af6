import io

import numpy as np
import pytest
from PIL import Image

from oslabtools.contrast_cli import main


@pytest.fixture
def source_image(tmp_path):
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(9, 5, 3), dtype=np.uint8)
    path = tmp_path / "in.png"
    Image.fromarray(pixels).save(path)
    return path, pixels


def _load(path):
    with Image.open(path) as image:
        return np.array(image.convert("RGB"))


def test_arguments_identity_factor_keeps_pixels(source_image, tmp_path):
    src, pixels = source_image
    dst = tmp_path / "out.png"
    assert main(["3", "1.0", str(src), str(dst)]) == 0
    assert np.array_equal(_load(dst), pixels)


def test_answers_read_from_stdin(source_image, tmp_path, monkeypatch, capsys):
    src, pixels = source_image
    dst = tmp_path / "out.png"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"2 1\n{src}\n{dst}\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the number of threads: " in out
    assert "Enter the output image path: " in out
    assert np.array_equal(_load(dst), pixels)


def test_partial_arguments_prompt_for_rest(source_image, tmp_path, monkeypatch, capsys):
    src, pixels = source_image
    dst = tmp_path / "out.png"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{dst}\n"))
    assert main(["1", "1.0", str(src)]) == 0
    out = capsys.readouterr().out
    assert "Enter the number of threads: " not in out
    assert "Enter the output image path: " in out
    assert _load(dst).shape == pixels.shape


def test_higher_factor_spreads_values(source_image, tmp_path):
    src, pixels = source_image
    dst = tmp_path / "out.png"
    assert main(["2", "2.0", str(src), str(dst)]) == 0
    result = _load(dst).astype(int)
    original = pixels.astype(int)
    assert np.all(np.abs(result - 128) >= np.minimum(np.abs(original - 128), 127))


def test_factor_out_of_range_fails(source_image, tmp_path, capsys):
    src, _ = source_image
    dst = tmp_path / "out.png"
    assert main(["1", "3", str(src), str(dst)]) == 1
    assert "factor must be in range (0, 2]" in capsys.readouterr().err
    assert not dst.exists()


def test_zero_threads_fails(source_image, tmp_path, capsys):
    src, _ = source_image
    dst = tmp_path / "out.png"
    assert main(["0", "1", str(src), str(dst)]) == 1
    assert "numThreads must be greater than 0" in capsys.readouterr().err


def test_non_numeric_threads_fails(source_image, tmp_path):
    src, _ = source_image
    assert main(["many", "1", str(src), str(tmp_path / "o.png")]) == 1


def test_missing_input_file_fails(tmp_path, capsys):
    assert main(["1", "1", str(tmp_path / "nope.png"), str(tmp_path / "o.png")]) == 1
    assert "Failed to open input file" in capsys.readouterr().err


def test_end_of_input_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1


def test_too_many_arguments(tmp_path):
    assert main(["1", "1", "a.png", "b.png", "extra"]) == 2