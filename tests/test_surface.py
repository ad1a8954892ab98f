import pytest

from exemplar.surface import corner, f, main, render_svg


def test_f_is_nan_at_origin():
    assert str(f(0.0, 0.0)) == "nan"


def test_f_depends_only_on_distance():
    assert f(3.0, 4.0) == f(4.0, 3.0) == f(-3.0, -4.0) == f(0.0, 5.0)


@pytest.mark.parametrize("i", [0, 10, 37, 100])
def test_diagonal_corners_are_centered(i):
    sx, _ = corner(i, i)
    assert sx == 300.0


def test_corner_is_symmetric():
    assert corner(20, 70)[1] == corner(70, 20)[1]


def test_svg_header_and_footer():
    svg = render_svg()
    assert svg.startswith("<svg xmlns='http://www.w3.org/2000/svg' ")
    assert "width='600' height='320'>" in svg
    assert svg.endswith("</svg>\n")


def test_svg_polygon_count():
    assert render_svg().count("<polygon points=") == 100 * 100


def test_svg_contains_nan_at_center():
    assert "NaN" in render_svg()


def test_main_prints_svg(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == render_svg()