"""A greeting, a SHA-256 comparison and the current build target."""

from __future__ import annotations

import argparse
import hashlib
import platform
import sys
from collections.abc import Sequence

_GOARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "mips": "mips",
    "mips64": "mips64",
}


def greeting() -> str:
    """Return the greeting."""
    return "Hello, 世界"


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def sha256_comparison(a: bytes | str = b"x", b: bytes | str = b"X") -> str:
    """Return both SHA-256 digests in hex, whether they match, and their type."""
    c1 = hashlib.sha256(_as_bytes(a)).digest()
    c2 = hashlib.sha256(_as_bytes(b)).digest()
    same = "true" if c1 == c2 else "false"
    return f"{c1.hex()}\n{c2.hex()}\n{same}\n[{len(c1)}]uint8\n"


def target() -> str:
    """Return the operating system and architecture, separated by a space."""
    system = platform.system().lower() or "unknown"
    machine = platform.machine().lower()
    arch = _GOARCH.get(machine, machine or "unknown")
    return f"{system} {arch}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting, the SHA-256 comparison or the target."""
    parser = argparse.ArgumentParser(prog="hello", description="Small demos.")
    parser.add_argument(
        "program", nargs="?", choices=("hello", "sha256", "cross"), default="hello"
    )
    options = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    if options.program == "sha256":
        sys.stdout.write(sha256_comparison())
    elif options.program == "cross":
        print(target())
    else:
        print(greeting())
    return 0


if __name__ == "__main__":
    sys.exit(main())