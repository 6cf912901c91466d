"""Height maps read from whitespace-separated grids of integers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, AnyStr, Union

from .lines import LineReader
from .text import atoi, split_words


class MapError(ValueError):
    """Raised when a map file cannot be turned into a height map."""


@dataclass(frozen=True)
class Point:
    """One grid point: column ``x``, row ``y`` and height ``z``."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class HeightMap:
    """A grid of points, stored row by row."""

    width: int
    points: tuple[tuple[Point, ...], ...] = field(default_factory=tuple)

    @property
    def height(self) -> int:
        """Number of rows in the map."""
        return len(self.points)

    def row(self, y: int) -> tuple[Point, ...]:
        """Return the points of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside a map of height {self.height}")
        return self.points[y]

    def z_rows(self) -> list[list[int]]:
        """Return the heights of every row as lists of integers."""
        return [[point.z for point in row] for row in self.points]

    def __iter__(self) -> Iterator[Point]:
        for row in self.points:
            yield from row


def _as_text(line: Union[str, bytes]) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


def parse_map(stream: IO[AnyStr]) -> HeightMap:
    """Read a height map from ``stream``.

    Each line holds space-separated values; the leading integer of each value
    is its height. The first line with values fixes the map width, and every
    later line must have exactly that many values.
    """
    width = 0
    rows: list[tuple[Point, ...]] = []
    for y, line in enumerate(LineReader(stream)):
        values = split_words(_as_text(line), " ")
        if width == 0:
            width = len(values)
        elif len(values) != width:
            raise MapError(
                f"line {y + 1} has {len(values)} values, expected {width}"
            )
        rows.append(tuple(Point(x, y, atoi(value)) for x, value in enumerate(values)))
    return HeightMap(width=width, points=tuple(rows))


def load_map(path: Union[str, os.PathLike[str]]) -> HeightMap:
    """Read a height map from the file at ``path``."""
    with open(path, "rb") as stream:
        return parse_map(stream)


def format_heights(height_map: HeightMap) -> str:
    """Render the heights as rows of right-aligned, three-wide columns."""
    return "".join(
        "".join(f"{z:3d} " for z in row) + "\n" for row in height_map.z_rows()
    )