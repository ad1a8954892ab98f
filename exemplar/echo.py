"""Print command-line arguments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO


def echo(
    newline: bool, sep: str, args: Iterable[str], out: TextIO | None = None
) -> None:
    """Write args joined by sep to out, followed by a newline if asked."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def numbered_args(args: Iterable[str]) -> list[str]:
    """Return one "index: argument" line for each argument."""
    return [f"{i}: {arg}" for i, arg in enumerate(args)]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="echo", description="Print the arguments."
    )
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments, separated by -s and ended unless -n is given."""
    options = _parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    try:
        echo(not options.n, options.s, options.args)
    except OSError as err:
        print(f"echo: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())