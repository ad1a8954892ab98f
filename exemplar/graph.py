"""A directed graph kept as a map from each node to its successors."""

from __future__ import annotations


class Graph:
    """A directed graph of string-named nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from src to dst."""
        self._edges.setdefault(src, set()).add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from src to dst."""
        return dst in self._edges.get(src, ())