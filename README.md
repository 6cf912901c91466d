# fdfmap

`fdfmap` reads FdF height maps. These are plain-text files in which each
line is one row of a grid and each space-separated value gives the height (z)
at that point:

```
0 0 0 0
0 10 10 0
0 0 0 0
```

The first line fixes the width of the map. Every later line must hold exactly
that many values, or the map is rejected. Only the leading integer of each
value is used as its height, so a value such as `10,0xFF` reads as `10`.

## Installation

```
pip install .
```

## Command line

```
fdfmap path/to/map.fdf
```

The command parses the map and prints:

```
Map parsed successfully!
Width: 4, Height: 3
  0   0   0   0
  0  10  10   0
  0   0   0   0
```

Each height is right-aligned in three columns and followed by a space. When
no path is given, `test_maps/10-70.fdf` is read. If the file cannot be opened
or its rows are of unequal length, the command prints `Failed to parse map`
and exits with status 1.

## Library use

```python
from fdfmap.heightmap import load_map, parse_map, format_heights

height_map = load_map("maps/42.fdf")
print(height_map.width, height_map.height)

for point in height_map.row(0):
    print(point.x, point.y, point.z)

print(height_map.z_rows())
print(format_heights(height_map), end="")
```

- `parse_map(stream)` reads a map from an open text or binary stream.
  `load_map(path)` opens the file for you. Both return a `HeightMap` and raise
  `MapError` (a `ValueError`) when a row's length differs from the width.
- `HeightMap` is a frozen dataclass with `width`, `points` (a tuple of rows,
  each a tuple of `Point`) and a `height` property. `row(y)` returns one row
  and raises `IndexError` outside the map; `z_rows()` returns the heights as
  lists of integers; iterating a `HeightMap` yields every `Point` row by row.
- `Point` is a frozen dataclass with `x` (column), `y` (row) and `z` (height).
- `format_heights(height_map)` returns the grid text that the command prints.

### Reading lines

`fdfmap.lines.LineReader(stream, buffer_size=32)` reads a stream in chunks of
`buffer_size` and returns one line at a time from `read_line()`, or `None`
once the stream is exhausted; it can also be iterated.
`fdfmap.lines.read_lines(stream, buffer_size=32)` is a generator over the
same lines. Each line keeps its trailing newline, except a final line that
has none. Text and binary streams are both accepted. A `buffer_size` below 1
raises `ValueError`.

### Text helpers

`fdfmap.text` holds the string helpers the parser uses:

- `atoi(text)` skips leading spaces and control characters 7 to 13, takes one
  optional sign and reads digits up to the first non-digit. Text without
  digits gives 0; the result wraps to a signed 32-bit integer.
- `split_words(text, sep)` splits on a single-character separator, drops
  empty words, and ignores everything from the first newline onwards.
- `itoa(number)` returns the decimal representation of a number.
- `strtrim(text, charset)` strips characters of `charset` from both ends.
- `substr(text, start, length)` returns up to `length` characters from
  `start`; a start past the end gives `""`, and negative arguments raise
  `ValueError`.
- `strnstr(haystack, needle, limit)` returns the index of `needle` found
  wholly within the first `limit` characters, 0 for an empty needle, or -1.

## What it does not do

`fdfmap` only reads and prints height maps. It does not draw them: there is
no wireframe projection, no window and no rendering of any kind.

## Running the tests

```
pip install .[test]
pytest
```