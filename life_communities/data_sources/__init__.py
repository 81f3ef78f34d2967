"""Data sources package for reading and writing grid files."""

from life_communities.data_sources.grid_reader import (
    GridSource,
    read_grid,
    read_grid_file,
    write_grid,
)

__all__ = [
    "GridSource",
    "read_grid",
    "read_grid_file",
    "write_grid",
]
