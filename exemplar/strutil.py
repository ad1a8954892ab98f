"""Small string and slice utilities."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, MutableSequence

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def basename_by_scan(s: str) -> str:
    """Remove directory components and a .suffix.

    e.g., a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    *_, s = s.rpartition("/")
    head, dot, _ = s.rpartition(".")
    return head if dot else s


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix."""
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format values like a list, with comma separators."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings."""
    return [s for s in strings if s != ""]


def reverse(s: MutableSequence) -> None:
    """Reverse a mutable sequence in place."""
    s.reverse()


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'strconv.ParseInt: parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{text}": value out of range')
    return value


def reverse_lines(lines: Iterable[str]) -> Iterator[list[int]]:
    """Yield the whitespace-separated integers of each line, reversed.

    A line holding something that is not an integer is reported on
    standard error and skipped.
    """
    for line in lines:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        reverse(ints)
        yield ints