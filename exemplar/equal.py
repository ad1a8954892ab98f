"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import dataclasses
import types
from typing import Any

_ATOMS = (bool, int, float, complex, str, bytes, bytearray, range, set, frozenset)
_CALLABLES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if type(x) is not type(y):
        return False
    if x is None:
        return True
    if isinstance(x, _ATOMS):
        return x == y
    if isinstance(x, _CALLABLES):
        return x == y

    # Cycle check.
    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(
            _equal(a, b, seen) for a, b in zip(x, y)
        )
    if isinstance(x, dict):
        return len(x) == len(y) and all(
            k in y and _equal(v, y[k], seen) for k, v in x.items()
        )
    if dataclasses.is_dataclass(x):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    if hasattr(x, "__dict__"):
        return _equal(vars(x), vars(y), seen)
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether x and y are deeply equal.

    Dictionary keys are always compared with ==, not deeply.
    """
    return _equal(x, y, set())