import io
import sys

import pytest
from PIL import Image

from exemplar.jpeg import main, to_jpeg


def _image_bytes(fmt, mode="RGB", size=(16, 12)):
    buf = io.BytesIO()
    Image.new(mode, size, (200, 100, 50) if mode == "RGB" else 0).save(buf, format=fmt)
    return buf.getvalue()


def test_png_converted_to_jpeg(capsys):
    out = io.BytesIO()
    kind = to_jpeg(io.BytesIO(_image_bytes("PNG")), out)
    assert kind == "png"
    assert capsys.readouterr().err == "Input format = png\n"
    assert out.getvalue()[:2] == b"\xff\xd8"
    with Image.open(io.BytesIO(out.getvalue())) as img:
        assert img.format == "JPEG"
        assert img.size == (16, 12)


def test_png_with_alpha_converted():
    buf = io.BytesIO()
    Image.new("RGBA", (4, 4), (1, 2, 3, 0)).save(buf, format="PNG")
    out = io.BytesIO()
    to_jpeg(io.BytesIO(buf.getvalue()), out)
    with Image.open(io.BytesIO(out.getvalue())) as img:
        assert img.mode == "RGB"
        assert img.size == (4, 4)


def test_non_png_is_unknown_format():
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(io.BytesIO(_image_bytes("GIF", mode="L")), io.BytesIO())


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"not an image")))
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO()))
    assert main([]) == 1
    assert "jpeg: image: unknown format" in capsys.readouterr().err


def test_main_converts(monkeypatch):
    stdout = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(_image_bytes("PNG"))))
    monkeypatch.setattr(sys, "stdout", stdout)
    assert main([]) == 0
    assert stdout.buffer.getvalue()[:2] == b"\xff\xd8"