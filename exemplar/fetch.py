"""Fetch the content found at URLs, one at a time or all in parallel."""

from __future__ import annotations

import argparse
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import closing
from typing import Any

_CHUNK = 64 * 1024


def _open(url: str) -> Any:
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err  # an error status still carries a body


def fetch(url: str) -> bytes:
    """Return the body found at url, whatever its status."""
    with closing(_open(url)) as resp:
        try:
            return resp.read()
        except OSError as err:
            raise OSError(f"reading {url}: {err}") from err


def _fetch_timed(url: str) -> str:
    start = time.monotonic()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    with closing(resp):
        try:
            nbytes = sum(len(chunk) for chunk in iter(lambda: resp.read(_CHUNK), b""))
        except OSError as err:
            return f"while reading {url}: {err}"
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch urls in parallel, yielding a time-and-size line as each finishes."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(_fetch_timed, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the content at each URL, or with --all their times and sizes."""
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch URLs.")
    parser.add_argument(
        "--all", action="store_true", help="fetch in parallel and report sizes"
    )
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    if options.all:
        start = time.monotonic()
        for line in fetch_all(options.urls):
            print(line)
        print(f"{time.monotonic() - start:.2f}s elapsed")
        return 0
    for url in options.urls:
        try:
            data = fetch(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())