"""Multi-threaded contrast adjustment of image files."""

from __future__ import annotations

import io
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

PathType = Union[str, "PathLike[str]"]

_MIDPOINT = 128
_log_lock = threading.Lock()


def _log_finished() -> None:
    with _log_lock:
        print(
            f"Thread {threading.get_ident()} contrast thread finished successfully",
            flush=True,
        )


def _adjust_rows(pixels: np.ndarray, start: int, end: int, factor: float) -> None:
    block = pixels[start:end].astype(np.float64)
    scaled = np.trunc((block - _MIDPOINT) * factor).astype(np.int64) + _MIDPOINT
    pixels[start:end] = np.clip(scaled, 0, 255)
    _log_finished()


def adjust_contrast(pixels: np.ndarray, factor: float, num_threads: int = 1) -> np.ndarray:
    """Scale every channel of ``pixels`` around mid-grey, in place.

    The rows are split between ``num_threads`` workers; the last worker also
    takes the rows left over by the integer division. The array is returned.
    """
    if num_threads < 1:
        raise ValueError("numThreads must be greater than 0")

    height = pixels.shape[0]
    rows_per_thread = height // num_threads
    bounds = [
        (
            i * rows_per_thread,
            height if i == num_threads - 1 else (i + 1) * rows_per_thread,
        )
        for i in range(num_threads)
    ]

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        futures = [
            pool.submit(_adjust_rows, pixels, start, end, factor)
            for start, end in bounds
        ]
        for future in futures:
            future.result()
    return pixels


def read_image(path: PathType) -> np.ndarray:
    """Load an image file as an RGB ``uint8`` array of shape (height, width, 3)."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise RuntimeError("Failed to open input file") from exc

    if not data:
        raise RuntimeError("Input file is empty")

    try:
        with Image.open(io.BytesIO(data)) as image:
            return np.array(image.convert("RGB"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise RuntimeError("Failed to load input image") from exc


def write_image(path: PathType, pixels: np.ndarray) -> None:
    """Encode ``pixels`` as JPEG (for .jpg/.jpeg) or PNG and write it to ``path``."""
    path_str = str(path)
    dot = path_str.rfind(".")
    if dot == -1:
        raise ValueError(f"output path has no extension: {path_str}")
    extension = path_str[dot:]
    image_format = "JPEG" if extension in (".jpg", ".jpeg") else "PNG"

    buffer = io.BytesIO()
    try:
        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(buffer, format=image_format)
    except (ValueError, TypeError, OSError) as exc:
        raise RuntimeError("Failed to encode image") from exc

    try:
        Path(path_str).write_bytes(buffer.getvalue())
    except OSError as exc:
        raise RuntimeError("Failed to open output file") from exc


def _change_one(input_path: PathType, output_path: PathType, factor: float, num_threads: int) -> None:
    if factor <= 0 or factor > 2:
        raise ValueError("factor must be in range (0, 2]")
    pixels = read_image(input_path)
    adjust_contrast(pixels, factor, num_threads)
    write_image(output_path, pixels)


def change_contrast_many(
    inputs: Sequence[PathType],
    outputs: Sequence[PathType],
    factor: float = 1.0,
    num_threads: int = 1,
) -> None:
    """Process each input/output pair in its own thread.

    Every image is itself split across ``num_threads`` workers. The first
    error raised by any image is re-raised once all of them have finished.
    """
    if len(inputs) != len(outputs):
        raise ValueError("input and output size mismatch")
    if not inputs:
        return

    with ThreadPoolExecutor(max_workers=len(inputs)) as pool:
        futures = [
            pool.submit(_change_one, src, dst, factor, num_threads)
            for src, dst in zip(inputs, outputs)
        ]
    for future in futures:
        future.result()


def change_contrast(
    input_path: PathType,
    output_path: PathType,
    factor: float = 1.0,
    num_threads: int = 1,
) -> None:
    """Adjust the contrast of one image file and write the result."""
    change_contrast_many([input_path], [output_path], factor, num_threads)


def change_contrast_command(command_line: str) -> None:
    """Run a contrast change from a "<input> <output> <factor> <numThreads>" line."""
    args = command_line.split()
    if len(args) < 4:
        print(
            "Usage: ChangeContrast <input> <output> <factor> <numThreads>",
            file=sys.stderr,
        )
        return
    change_contrast_many([args[0]], [args[1]], float(args[2]), int(args[3]))