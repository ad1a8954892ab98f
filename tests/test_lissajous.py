import io
import random

import pytest
from PIL import Image

from exemplar.lissajous import lissajous, main


def _render(seed):
    buf = io.BytesIO()
    lissajous(buf, random.Random(seed))
    return buf.getvalue()


@pytest.fixture(scope="module")
def gif_bytes():
    return _render(1)


def test_is_gif(gif_bytes):
    assert gif_bytes.startswith(b"GIF89a")


def test_frame_count_and_size(gif_bytes):
    im = Image.open(io.BytesIO(gif_bytes))
    assert im.n_frames == 64
    assert im.size == (201, 201)


def test_timing_and_loop(gif_bytes):
    im = Image.open(io.BytesIO(gif_bytes))
    assert im.info["duration"] == 80
    assert im.info["loop"] == 64


def test_first_frame_pixels(gif_bytes):
    im = Image.open(io.BytesIO(gif_bytes))
    im.seek(0)
    rgb = im.convert("RGB")
    assert rgb.getpixel((100, 100)) == (0, 0, 0)
    assert rgb.getpixel((0, 0)) == (255, 255, 255)


def test_frames_differ(gif_bytes):
    im = Image.open(io.BytesIO(gif_bytes))
    im.seek(0)
    first = im.convert("RGB").tobytes()
    im.seek(1)
    second = im.convert("RGB").tobytes()
    assert first != second


def test_deterministic_for_seed(gif_bytes):
    assert _render(1) == gif_bytes


def test_main_writes_gif(capsysbinary):
    assert main([]) == 0
    out = capsysbinary.readouterr().out
    assert out.startswith(b"GIF89a")
    assert Image.open(io.BytesIO(out)).n_frames == 64