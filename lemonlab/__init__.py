"""A line-based TCP chat server and client, with small helpers for channels, records, grids and slices."""

__version__ = "0.1.0"