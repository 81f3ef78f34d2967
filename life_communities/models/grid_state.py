"""Immutable grid state handed out by the engine."""

import operator
from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np

from life_communities.errors import IndexOutOfRange



def check_cell(row: int, col: int, rows: int, cols: int) -> Tuple[int, int]:
    """
    Validate a coordinate against a rows x cols grid.

    Returns:
        The coordinate as plain integers.

    Raises:
        IndexOutOfRange: If either value is not an integer or lies outside the grid.
    """
    try:
        row, col = operator.index(row), operator.index(col)
    except TypeError:
        raise IndexOutOfRange(row, col, rows, cols) from None
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexOutOfRange(row, col, rows, cols)
    return row, col


@dataclass(frozen=True, eq=False)
class GridSnapshot:
    """
    Read-only copy of one generation of a Game of Life grid.

    Readers such as the community counter and the renderers work on a
    snapshot, so nothing they do can reach back into the engine's grid.
    """

    rows: int
    cols: int
    cells: np.ndarray = field(repr=False)
    generation: int = 0

    def __post_init__(self):
        """Take a private, read-only copy of the cell array."""
        cells = np.array(self.cells, dtype=bool, copy=True)
        if cells.shape != (self.rows, self.cols):
            raise ValueError(
                f"Cell array shape {cells.shape} doesn't match grid size {(self.rows, self.cols)}"
            )
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return self.rows, self.cols

    @property
    def alive_count(self) -> int:
        """Count total number of live cells."""
        return int(np.count_nonzero(self.cells))

    def is_alive(self, row: int, col: int) -> bool:
        """Get cell state at (row, col), raising for out-of-range coordinates."""
        row, col = check_cell(row, col, self.rows, self.cols)
        return bool(self.cells[row, col])

    def to_lists(self) -> List[List[bool]]:
        """Return the cells as nested Python lists."""
        return self.cells.tolist()
