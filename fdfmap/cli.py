"""Command that reads a map file and prints its heights."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .heightmap import MapError, format_heights, load_map

DEFAULT_MAP = "test_maps/10-70.fdf"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse a map file and print its size and heights; return the exit code."""
    parser = argparse.ArgumentParser(
        prog="fdfmap", description="Read a height map and print its heights."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_MAP, help="map file to read")
    args = parser.parse_args(argv)

    try:
        height_map = load_map(args.path)
    except (OSError, MapError):
        print("Failed to parse map")
        return 1

    print("Map parsed successfully!")
    print(f"Width: {height_map.width}, Height: {height_map.height}")
    sys.stdout.write(format_heights(height_map))
    return 0


if __name__ == "__main__":
    sys.exit(main())