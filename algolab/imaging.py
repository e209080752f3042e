"""Grayscale edge detection and thresholding, with a command to run them on image files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import product
from os import PathLike

import numpy as np
from PIL import Image

SOBEL_X = np.array([[-1, 0, 1],
                    [-2, 0, 2],
                    [-1, 0, 1]])
SOBEL_Y = SOBEL_X.T

DEFAULT_INPUT = "image1.jpg"
DEFAULT_SOBEL_OUTPUT = "01-result.jpg"


def _as_grayscale(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValueError("image must be a two-dimensional grayscale array")
    return arr


def sobel(image: np.ndarray) -> np.ndarray:
    """Return the Sobel gradient magnitude of a grayscale image as uint8.

    The one-pixel border is left at zero. Magnitudes are rounded and stored
    modulo 256, as an unsigned byte store does.
    """
    pixels = _as_grayscale(image).astype(np.int64)
    rows, cols = pixels.shape
    out = np.zeros((rows, cols), dtype=np.uint8)
    if rows < 3 or cols < 3:
        return out

    gx = np.zeros((rows - 2, cols - 2), dtype=np.int64)
    gy = np.zeros_like(gx)
    for dy, dx in product(range(3), repeat=2):
        window = pixels[dy:dy + rows - 2, dx:dx + cols - 2]
        gx += SOBEL_X[dy, dx] * window
        gy += SOBEL_Y[dy, dx] * window

    magnitude = np.rint(np.sqrt(gx * gx + gy * gy)).astype(np.int64)
    out[1:-1, 1:-1] = (magnitude % 256).astype(np.uint8)
    return out


def _check_level(level: int) -> None:
    if not 0 <= level <= 255:
        raise ValueError("threshold value must be between 0 and 255")


def threshold(image: np.ndarray, level: int) -> np.ndarray:
    """Return 255 where a pixel is at least level and 0 elsewhere."""
    _check_level(level)
    arr = _as_grayscale(image)
    return np.where(arr >= level, 255, 0).astype(np.uint8)


def load_grayscale(path: str | PathLike[str]) -> np.ndarray:
    """Read an image file and return it as a uint8 grayscale array."""
    with Image.open(path) as img:
        return np.array(img.convert("L"), dtype=np.uint8)


def _save(image: np.ndarray, path: str | PathLike[str]) -> None:
    Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run edge detection or thresholding on an image file."""
    parser = argparse.ArgumentParser(description="Simple grayscale image operations.")
    commands = parser.add_subparsers(dest="command", required=True)

    edges = commands.add_parser("sobel", help="detect edges with the Sobel operator")
    edges.add_argument("--input", default=DEFAULT_INPUT)
    edges.add_argument("--output", default=DEFAULT_SOBEL_OUTPUT)

    binary = commands.add_parser("threshold", help="make a black and white image")
    binary.add_argument("level", type=int, help="threshold value, 0 to 255")
    binary.add_argument("output", help="output file name")
    binary.add_argument("--input", default=DEFAULT_INPUT)

    args = parser.parse_args(argv)

    if args.command == "threshold" and not 0 <= args.level <= 255:
        print("Threshold value must be between 0 and 255", file=sys.stderr)
        return 1

    try:
        image = load_grayscale(args.input)
    except OSError:
        print(f"Could not open or find the image {args.input}", file=sys.stderr)
        return 1

    if args.command == "sobel":
        _save(sobel(image), args.output)
        return 0

    _save(threshold(image, args.level), args.output)
    print(f"Thresholding complete. Output saved to {args.output}")
    return 0