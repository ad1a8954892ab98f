"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
import shutil
import sys
from collections.abc import Sequence
from typing import BinaryIO

_BLOCK_SIZE = 9


class Writer:
    """Compress written data into an underlying binary stream.

    Closing the writer flushes the compressed data; it does not close
    the underlying stream.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(_BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        """Whether the writer has been closed."""
        return self._compressor is None

    def write(self, data: bytes) -> int:
        """Compress data and return the number of uncompressed bytes taken."""
        if self._compressor is None:
            raise ValueError("closed")
        chunk = self._compressor.compress(data)
        if chunk:
            self._out.write(chunk)
        return len(data)

    def close(self) -> None:
        """Flush the compressed data and end the stream."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        self._out.write(compressor.flush())

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.closed:
            self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Compress standard input to standard output."""
    w = Writer(sys.stdout.buffer)
    try:
        shutil.copyfileobj(sys.stdin.buffer, w)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        w.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())