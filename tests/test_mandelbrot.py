import io

import pytest
from PIL import Image

from exemplar.mandelbrot import BLACK, acos, mandelbrot, newton, render, sqrt

WHITE = (255, 255, 255, 255)


def test_origin_is_in_set():
    assert mandelbrot(0j) == BLACK


def test_far_point_escapes_immediately():
    assert mandelbrot(3 + 0j) == WHITE


def test_escape_colors_are_gray():
    for z in (1 + 1j, -2 + 0.5j, 0.5 + 0.5j):
        r, g, b, a = mandelbrot(z)
        assert r == g == b
        assert a == 255


def test_newton_root_converges_at_once():
    assert newton(1 + 0j) == WHITE


def test_newton_zero_is_black():
    assert newton(0j) == BLACK


@pytest.mark.parametrize("fn", [acos, sqrt])
@pytest.mark.parametrize("z", [0j, 1 + 1j, -1.5 - 0.25j, 2j])
def test_chroma_functions_return_valid_colors(fn, z):
    color = fn(z)
    assert len(color) == 4
    assert all(0 <= c <= 255 for c in color)
    assert color[3] == 255
    assert fn(z) == color


def test_render_size_and_mode():
    img = render(8, 8)
    assert img.size == (8, 8)
    assert img.mode == "RGBA"


def test_render_pixels():
    img = render(8, 8)
    assert img.getpixel((4, 4)) == BLACK
    assert img.getpixel((0, 0)) == WHITE


def test_render_png_round_trip():
    img = render(6, 4)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    back = Image.open(io.BytesIO(buf.getvalue()))
    assert back.size == (6, 4)
    assert list(back.convert("RGBA").getdata()) == list(img.getdata())