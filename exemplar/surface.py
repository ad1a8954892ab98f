"""An SVG rendering of a 3-D surface function."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from .tempconv import _format_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-xyrange..+xyrange)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 0.4  # pixels per z unit
ANGLE = math.pi / 6  # angle of x, y axes (=30°)

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Return the surface height sin(r)/r at distance r from the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def render_svg() -> str:
    """Return the SVG document for the whole surface."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (
                corner(i + 1, j),
                corner(i, j),
                corner(i, j + 1),
                corner(i + 1, j + 1),
            )
            text = " ".join(f"{_format_g(px)},{_format_g(py)}" for px, py in points)
            parts.append(f"<polygon points='{text}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Write the SVG rendering to standard output."""
    argparse.ArgumentParser(
        prog="surface", description="Emit an SVG rendering of a 3-D surface."
    ).parse_args(sys.argv[1:] if argv is None else list(argv))
    sys.stdout.write(render_svg())
    return 0


if __name__ == "__main__":
    sys.exit(main())