# exemplar

A collection of small, self-contained programs and library functions, each
doing one clear job: counting duplicate lines, converting temperatures,
checking palindromes, comparing values deeply, writing films as JSON, drawing
fractals, surfaces and Lissajous figures, compressing with bzip2 and fetching
URLs. Most pieces are usable both as a command and as an importable function.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from exemplar.word import is_palindrome
from exemplar.strutil import basename, comma
from exemplar.tempconv import Celsius, c_to_f, f_to_c
from exemplar.treesort import sort

is_palindrome("A man, a plan, a canal: Panama")   # True
is_palindrome("palindrome")                       # False

basename("a/b.c.go")                              # "b.c"
comma("1234567890")                               # "1,234,567,890"

print(f_to_c(212.0))                              # 100°C

values = [3, 1, 2]
sort(values)                                      # values is now [1, 2, 3]
```

Other modules worth knowing:

| Module | What it offers |
| --- | --- |
| `exemplar.word` | `is_palindrome` (ignores case and non-letters) and the naive `is_palindrome_bytes` |
| `exemplar.tempconv` | `Celsius`, `Fahrenheit`, `c_to_f`, `f_to_c`, `describe_boiling` |
| `exemplar.popcount` | `pop_count` — number of set bits in a 64-bit unsigned value |
| `exemplar.strutil` | `basename`, `basename_by_scan`, `comma`, `ints_to_string`, `nonempty`, `reverse`, `reverse_lines` |
| `exemplar.treesort` | `sort` — in-place sort through a binary tree |
| `exemplar.echo` | `echo` and `numbered_args` |
| `exemplar.dup` | `DuplicateCounter` with `add` and `duplicates`; `split_lines`, `dedup` |
| `exemplar.charcount` | `count_chars` returning `CharCounts`, whose `report` formats the counts |
| `exemplar.graph` | `Graph` with `add_edge` and `has_edge` |
| `exemplar.netflag` | `Flags` bit field with `is_up`, `turn_down`, `set_broadcast`, `is_cast` |
| `exemplar.embed` | `Point`, `Circle`, `Wheel` — nested dataclasses whose inner fields are reachable from the outer ones |
| `exemplar.equal` | `equal` — deep equality that copes with cyclic structures |
| `exemplar.movie` | `Movie`, `movies_to_json`, `titles_from_json` |
| `exemplar.mandelbrot` | `mandelbrot`, `acos`, `sqrt`, `newton` colour functions and `render` |
| `exemplar.surface` | `f`, `corner` and `render_svg` |
| `exemplar.lissajous` | `lissajous` — write an animated GIF to a binary stream |
| `exemplar.fetch` | `fetch` and the parallel `fetch_all` |
| `exemplar.hello` | `greeting`, `sha256_comparison`, `target` |
| `exemplar.bzip` | `Writer` — a bzip2-compressing writer with `write` and `close`, usable as a context manager |
| `exemplar.jpeg` | `to_jpeg` — convert a PNG stream to JPEG |

## Commands

| Command | What it does |
| --- | --- |
| `exemplar-hello` | Prints a greeting; `sha256` compares two digests, `cross` prints the OS and architecture |
| `exemplar-echo` | Prints its arguments; `-n` omits the newline, `-s` sets the separator |
| `exemplar-dup` | Prints lines that occur more than once in the named files or standard input, with their counts and the files they were repeated in |
| `exemplar-charcount` | Counts Unicode characters, UTF-8 encoding lengths and invalid bytes on standard input |
| `exemplar-tempconv` | Converts each numeric argument to Celsius and Fahrenheit |
| `exemplar-lissajous` | Writes an animated GIF of a random Lissajous figure to standard output; with `web`, serves one per request on localhost:8000 |
| `exemplar-mandelbrot` | Writes a 1024×1024 PNG of the Mandelbrot set to standard output |
| `exemplar-surface` | Writes an SVG rendering of a 3-D surface to standard output |
| `exemplar-jpeg` | Reads a PNG image on standard input and writes it as JPEG to standard output |
| `exemplar-bzip` | bzip2-compresses standard input to standard output |
| `exemplar-fetch` | Prints the content found at each URL given; `--all` fetches them in parallel and prints times and sizes |
| `exemplar-movie` | Prints a list of films as compact and indented JSON, then their titles |

Examples:

```
exemplar-echo -s , a b c
exemplar-tempconv 100 -40
exemplar-dup notes.txt todo.txt
exemplar-mandelbrot > mandelbrot.png
exemplar-mandelbrot | exemplar-jpeg > mandelbrot.jpg
exemplar-lissajous > out.gif
exemplar-bzip < big.log > big.log.bz2
exemplar-fetch --all http://localhost:8000/
```

## What it does not do

- There is no general-purpose echo or request-counting HTTP server; the only
  server is the Lissajous `web` mode.
- There is no issue-tracker search, report or HTML listing.
- There is no S-expression encoding, decoding or pretty-printing, and no
  printing of the structure or methods of arbitrary values.
- There is no parsing of query parameters into objects.