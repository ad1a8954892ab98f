"""Convert a PNG image to JPEG."""

from __future__ import annotations

import io
import sys
from collections.abc import Sequence
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

_QUALITY = 95


def to_jpeg(inp: BinaryIO, out: BinaryIO) -> str:
    """Decode a PNG image from inp, write it to out as JPEG, return its format."""
    try:
        img = Image.open(inp, formats=["PNG"])
    except UnidentifiedImageError:
        raise ValueError("image: unknown format") from None
    with img:
        img.load()
        kind = (img.format or "").lower()
        print("Input format =", kind, file=sys.stderr)
        img.convert("RGB").save(out, format="JPEG", quality=_QUALITY)
    return kind


def main(argv: Sequence[str] | None = None) -> int:
    """Read a PNG image from standard input and write it as JPEG."""
    try:
        data = sys.stdin.buffer.read()
        to_jpeg(io.BytesIO(data), sys.stdout.buffer)
    except (OSError, ValueError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())