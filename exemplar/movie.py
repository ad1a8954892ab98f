"""Movies written as and read from JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    """A film with its release year and leading actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] | None = field(default_factory=list)

    def to_json_object(self) -> dict[str, Any]:
        """Return the JSON object for this movie; color is left out when false."""
        obj: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            obj["color"] = True
        obj["Actors"] = self.actors
        return obj


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def _escape_html(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def movies_to_json(movies: Iterable[Movie], indent: int | str | None = None) -> str:
    """Encode movies as a JSON array, compact unless indent is given."""
    objects = [m.to_json_object() for m in movies]
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        objects, ensure_ascii=False, indent=indent, separators=separators
    )
    return _escape_html(text)


def titles_from_json(data: str | bytes) -> list[str]:
    """Return the title of each movie in a JSON array.

    Keys are matched without regard to case; a movie with no title
    yields the empty string.
    """
    try:
        value = json.loads(data)
    except json.JSONDecodeError as err:
        raise ValueError(f"invalid JSON: {err}") from None
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(
            f"cannot unmarshal {type(value).__name__} into a list of movies"
        )
    titles = []
    for item in value:
        if item is None:
            titles.append("")
            continue
        if not isinstance(item, dict):
            raise ValueError(f"cannot unmarshal {type(item).__name__} into a movie")
        title = ""
        for key, v in item.items():
            if key.casefold() == "title":
                if v is None:
                    continue
                if not isinstance(v, str):
                    raise ValueError(
                        f"cannot unmarshal {type(v).__name__} into field Title"
                    )
                title = v
        titles.append(title)
    return titles


def main(argv: Sequence[str] | None = None) -> int:
    """Print the movies as compact and indented JSON, then their titles."""
    print(movies_to_json(MOVIES))
    indented = movies_to_json(MOVIES, indent=4)
    print(indented)
    try:
        titles = titles_from_json(indented)
    except ValueError as err:
        print(f"JSON unmarshaling failed: {err}", file=sys.stderr)
        return 1
    print("[" + " ".join("{" + t + "}" for t in titles) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())