"""Reading FdF height maps into grids of points, with line and text helpers."""

__version__ = "0.1.0"