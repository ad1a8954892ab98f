"""Celsius and Fahrenheit temperature computations."""

from __future__ import annotations

import math
import operator
import sys
from decimal import Decimal
from typing import Callable


def _format_g(x: float) -> str:
    """Format x like the shortest '%g' representation: 100, 37.5, 1e+06."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(x))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    stripped = digits.rstrip("0") or "0"
    exponent += len(digits) - len(stripped)
    digits = stripped
    point = exponent + len(digits)
    exp = point - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _binary(op: Callable[[float, float], float]):
    def method(self, other):
        if isinstance(other, _Temperature) and type(other) is not type(self):
            raise TypeError(
                f"mismatched types {type(self).__name__} and {type(other).__name__}"
            )
        if not isinstance(other, (int, float)):
            return NotImplemented
        return type(self)(op(float(self), float(other)))

    return method


def _reflected(op: Callable[[float, float], float]) -> Callable[[float, float], float]:
    return lambda a, b: op(b, a)


class _Temperature(float):
    """A temperature on a particular scale; arithmetic keeps the scale."""

    unit = ""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}°{self.unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return float.__format__(float(self), spec)

    def __neg__(self):
        return type(self)(-float(self))

    def __pos__(self):
        return self

    __add__ = _binary(operator.add)
    __radd__ = _binary(_reflected(operator.add))
    __sub__ = _binary(operator.sub)
    __rsub__ = _binary(_reflected(operator.sub))
    __mul__ = _binary(operator.mul)
    __rmul__ = _binary(_reflected(operator.mul))
    __truediv__ = _binary(operator.truediv)
    __rtruediv__ = _binary(_reflected(operator.truediv))


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    unit = "C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    unit = "F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(float(c) * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((float(f) - 32) * 5 / 9)


def describe_boiling() -> str:
    """Describe the boiling point of water on both scales."""
    f = Fahrenheit(212.0)
    return f"boiling point = {f} or {f_to_c(f)}"


def _parse_float(text: str) -> float:
    error = ValueError(f'strconv.ParseFloat: parsing "{text}": invalid syntax')
    if not text or text != text.strip() or "_" in text:
        raise error
    try:
        return float(text)
    except ValueError:
        raise error from None


def main(argv: list[str] | None = None) -> int:
    """Convert each numeric argument to Celsius and Fahrenheit."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        try:
            t = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())