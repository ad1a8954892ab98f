"""GIF animations of random Lissajous figures."""

from __future__ import annotations

import io
import logging
import math
import random
import sys
from collections.abc import Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

_log = logging.getLogger(__name__)

_PALETTE = [255, 255, 255, 0, 0, 0]  # white, black
_WHITE_INDEX = 0
_BLACK_INDEX = 1

_CYCLES = 5  # number of complete x oscillator revolutions
_RES = 0.001  # angular resolution
_SIZE = 100  # image canvas covers [-size..+size]
_NFRAMES = 64  # number of animation frames
_DELAY = 8  # delay between frames in 10ms units

_rng = random.Random()


def _angles() -> list[float]:
    ts = []
    t = 0.0
    limit = _CYCLES * 2 * math.pi
    while t < limit:
        ts.append(t)
        t += _RES
    return ts


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write a GIF animation of a random Lissajous figure to out."""
    rng = _rng if rng is None else rng
    freq = rng.random() * 3.0  # relative frequency of y oscillator
    side = 2 * _SIZE + 1
    ts = _angles()
    xs = [_SIZE + int(math.sin(t) * _SIZE + 0.5) for t in ts]
    frames = []
    phase = 0.0  # phase difference
    for _ in range(_NFRAMES):
        pixels = bytearray([_WHITE_INDEX]) * (side * side)
        for t, px in zip(ts, xs):
            py = _SIZE + int(math.sin(t * freq + phase) * _SIZE + 0.5)
            if 0 <= px < side and 0 <= py < side:
                pixels[py * side + px] = _BLACK_INDEX
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(_PALETTE)
        frames.append(frame)
        phase += 0.1
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=_DELAY * 10,
        loop=_NFRAMES,
        optimize=False,
    )


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        buf = io.BytesIO()
        lissajous(buf)
        body = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


def main(argv: Sequence[str] | None = None) -> int:
    """Write an animation to standard output, or serve them with "web"."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "web":
        try:
            with ThreadingHTTPServer(("localhost", 8000), _Handler) as server:
                server.serve_forever()
        except OSError as err:
            print(err, file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            pass
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())