"""PNG images of the Mandelbrot fractal and related functions."""

from __future__ import annotations

import argparse
import cmath
import math
import sys
from collections.abc import Sequence

from PIL import Image

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)

_XMIN, _YMIN, _XMAX, _YMAX = -2, -2, 2, 2


def _gray(y: int) -> Color:
    return (y, y, y, 255)


def _clamp_channel(v: int) -> int:
    if v & ~0xFFFFFF == 0:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b), 255)


def _wrap8(x: float) -> int:
    if not math.isfinite(x):
        return 0
    return int(x) & 0xFF


def mandelbrot(z: complex) -> Color:
    """Colour z by how quickly it escapes the Mandelbrot iteration."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - ((contrast * n) & 0xFF))
    return BLACK


def acos(z: complex) -> Color:
    """Colour z by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_wrap8(v.real * 128) + 127) & 0xFF
    red = (_wrap8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    """Colour z by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_wrap8(v.real * 128) + 127) & 0xFF
    red = (_wrap8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Colour z by how quickly Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except ZeroDivisionError:
            return BLACK  # the iteration can only yield NaN from here
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - ((contrast * i) & 0xFF))
    return BLACK


def render(width: int = 1024, height: int = 1024) -> Image.Image:
    """Render the Mandelbrot set over [-2, 2] x [-2, 2] as an RGBA image."""
    pixels = []
    for py in range(height):
        y = py / height * (_YMAX - _YMIN) + _YMIN
        for px in range(width):
            x = px / width * (_XMAX - _XMIN) + _XMIN
            pixels.append(mandelbrot(complex(x, y)))
    img = Image.new("RGBA", (width, height))
    img.putdata(pixels)
    return img


def main(argv: Sequence[str] | None = None) -> int:
    """Write a PNG image of the Mandelbrot fractal to standard output."""
    argparse.ArgumentParser(
        prog="mandelbrot", description="Emit a PNG of the Mandelbrot fractal."
    ).parse_args(sys.argv[1:] if argv is None else list(argv))
    render().save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())