"""Struct embedding modelled as composition with promoted fields."""

from __future__ import annotations

from dataclasses import dataclass


def _promote(inner: str, name: str) -> property:
    """Expose the field name of the inner value as an attribute of the outer."""

    def get(self):
        return getattr(getattr(self, inner), name)

    def set_(self, value) -> None:
        setattr(getattr(self, inner), name, value)

    return property(get, set_, doc=f"The {name} of {inner}.")


@dataclass
class Point:
    """A point on the integer plane."""

    x: int = 0
    y: int = 0


@dataclass
class Circle:
    """A circle: a centre point and a radius."""

    point: Point
    radius: int = 0

    x = _promote("point", "x")
    y = _promote("point", "y")


@dataclass
class Wheel:
    """A wheel: a circle with spokes."""

    circle: Circle
    spokes: int = 0

    point = _promote("circle", "point")
    radius = _promote("circle", "radius")
    x = _promote("circle", "x")
    y = _promote("circle", "y")