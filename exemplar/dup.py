"""Find lines that appear more than once in the input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


class DuplicateCounter:
    """Count lines and remember which sources held repeated lines."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._sources: dict[str, dict[str, None]] = {}

    def add(self, lines: Iterable[str], source: str = "stdin") -> None:
        """Count each of lines as read from source."""
        for line in lines:
            self._counts[line] += 1
            if self._counts[line] > 1:
                self._sources.setdefault(line, {})[source] = None

    def duplicates(self) -> Iterator[tuple[str, int, tuple[str, ...]]]:
        """Yield (line, count, sources) for each line seen more than once."""
        for line, n in self._counts.items():
            if n > 1:
                yield line, n, tuple(self._sources.get(line, ()))


def split_lines(text: str) -> list[str]:
    """Split text at every newline, keeping a final empty piece."""
    return text.split("\n")


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, at its first appearance."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def _scan_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line[:-1] if line.endswith("\n") else line
        yield line[:-1] if line.endswith("\r") else line


def main(argv: Sequence[str] | None = None) -> int:
    """Print the count, text and sources of each repeated line."""
    files = sys.argv[1:] if argv is None else list(argv)
    counter = DuplicateCounter()
    if not files:
        counter.add(_scan_lines(sys.stdin), "stdin")
    for name in files:
        try:
            with open(name, encoding="utf-8", errors="replace") as f:
                counter.add(_scan_lines(f), name)
        except OSError as err:
            print(f"dup2: {err}", file=sys.stderr)
    for line, n, sources in counter.duplicates():
        print(f"{n}\t{line}" + "".join(f"\t{s}" for s in sources))
    return 0


if __name__ == "__main__":
    sys.exit(main())