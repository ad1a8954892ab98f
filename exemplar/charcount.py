"""Count the Unicode characters of UTF-8 input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

_UTF_MAX = 4
_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_rune(ch: str) -> str:
    if ch in _ESCAPES:
        return f"'{_ESCAPES[ch]}'"
    code = ord(ch)
    if ch.isprintable():
        return f"'{ch}'"
    if code < 0x20 or code == 0x7F:
        return f"'\\x{code:02x}'"
    if code < 0x10000:
        return f"'\\u{code:04x}'"
    return f"'\\U{code:08x}'"


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF5:
        return 4
    return 0


@dataclass
class CharCounts:
    """Character counts, encoding lengths and invalid bytes of some input."""

    counts: Counter = field(default_factory=Counter)
    lengths: dict[int, int] = field(
        default_factory=lambda: {n: 0 for n in range(1, _UTF_MAX + 1)}
    )
    invalid: int = 0

    def report(self) -> str:
        """Return the counts as a tab-separated text report."""
        parts = ["rune\tcount\n"]
        parts.extend(f"{_quote_rune(c)}\t{n}\n" for c, n in self.counts.items())
        parts.append("\nlen\tcount\n")
        parts.extend(f"{i}\t{n}\n" for i, n in self.lengths.items())
        if self.invalid > 0:
            parts.append(f"\n{self.invalid} invalid UTF-8 characters\n")
        return "".join(parts)


def count_chars(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 data; each undecodable byte is invalid."""
    result = CharCounts()
    pos = 0
    while pos < len(data):
        n = _sequence_length(data[pos])
        ch = ""
        if n:
            try:
                ch = data[pos:pos + n].decode("utf-8")
            except UnicodeDecodeError:
                n = 0
        if not n:
            result.invalid += 1
            pos += 1
            continue
        result.counts[ch] += 1
        result.lengths[n] += 1
        pos += n
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Report the character counts of standard input."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(count_chars(data).report())
    return 0


if __name__ == "__main__":
    sys.exit(main())