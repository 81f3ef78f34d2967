"""Grid engine that owns a toroidal Game of Life board."""

import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO, Tuple, Union

import numpy as np

from life_communities.data_sources.grid_reader import read_grid, read_grid_file
from life_communities.errors import (
    InvalidDimensions,
    MalformedInput,
    TruncatedInput,
)
from life_communities.models.grid_state import GridSnapshot, check_cell
from life_communities.simulation import gol_rules
from life_communities.simulation.communities import count_communities
from life_communities.simulation.gol_rules import ALIVE, DEAD

logger = logging.getLogger(__name__)

# Built-in seed: five live cells on a 5x5 board, extinct after four generations
DEFAULT_ROWS = 5
DEFAULT_COLS = 5
DEFAULT_SEED: Tuple[Tuple[int, int], ...] = ((1, 1), (1, 3), (2, 2), (3, 2), (3, 3))


class GameOfLife:
    """
    Conway's Game of Life on a fixed-size grid whose edges wrap around.

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.

    The grid never changes size. Callers only ever see copies of it, through
    ``snapshot()`` or the ``grid`` property.
    """

    def __init__(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        cells: Optional[Iterable[bool]] = None,
    ):
        """
        Create a grid.

        With no arguments the built-in 5x5 seed is used. Otherwise ``cells``
        must supply exactly ``rows * cols`` values in row-major order.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            cells: Flat sequence of cell states, truthy meaning alive.

        Raises:
            InvalidDimensions: If rows or cols is not positive.
            TruncatedInput: If fewer than rows * cols cells are given.
            MalformedInput: If more than rows * cols cells are given.
        """
        if rows is None and cols is None and cells is None:
            grid = np.zeros((DEFAULT_ROWS, DEFAULT_COLS), dtype=bool)
            for row, col in DEFAULT_SEED:
                grid[row, col] = ALIVE
        else:
            grid = self._build_grid(rows, cols, cells)

        self._grid = grid
        self._generation = 0
        self._total_alive = self._count_alive()
        logger.debug(
            "Created %dx%d grid with %d live cells",
            grid.shape[0],
            grid.shape[1],
            self._total_alive,
        )

    @staticmethod
    def _build_grid(rows, cols, cells) -> np.ndarray:
        if rows is None or cols is None:
            raise InvalidDimensions("Both rows and cols are required")
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(
                f"Grid dimensions must be positive, got {rows}x{cols}"
            )

        expected = rows * cols
        values = [bool(cell) for cell in (cells if cells is not None else ())]
        if len(values) < expected:
            raise TruncatedInput(
                f"Expected {expected} cells for a {rows}x{cols} grid, got {len(values)}"
            )
        if len(values) > expected:
            raise MalformedInput(
                f"Expected {expected} cells for a {rows}x{cols} grid, got {len(values)}"
            )
        return np.array(values, dtype=bool).reshape(rows, cols)

    @classmethod
    def from_array(cls, array) -> "GameOfLife":
        """Create a grid from a 2D array-like of truthy/falsy values."""
        grid = np.asarray(array)
        if grid.ndim != 2:
            raise InvalidDimensions(f"Expected a 2D array, got {grid.ndim} dimensions")
        rows, cols = grid.shape
        return cls(rows, cols, grid.astype(bool).ravel())

    @classmethod
    def from_source(cls, source: Union[str, TextIO]) -> "GameOfLife":
        """Create a grid from text in the grid source format."""
        parsed = read_grid(source)
        return cls(parsed.rows, parsed.cols, parsed.cells)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GameOfLife":
        """Create a grid from a file in the grid source format."""
        parsed = read_grid_file(path)
        return cls(parsed.rows, parsed.cols, parsed.cells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    @property
    def generation(self) -> int:
        """Number of generations computed since construction."""
        return self._generation

    @property
    def grid(self) -> np.ndarray:
        """Read-only copy of the current generation."""
        return self.snapshot().cells

    def dimensions(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return self.rows, self.cols

    def alive_count(self) -> int:
        """Total number of live cells in the current generation."""
        return self._total_alive

    def snapshot(self) -> GridSnapshot:
        """Immutable copy of the current generation."""
        return GridSnapshot(self.rows, self.cols, self._grid, self._generation)

    def _check_bounds(self, row: int, col: int) -> Tuple[int, int]:
        return check_cell(row, col, self.rows, self.cols)

    def cell_state(self, row: int, col: int) -> bool:
        """
        Return the state of the cell at (row, col).

        Returns:
            ALIVE or DEAD.

        Raises:
            IndexOutOfRange: If the coordinate is outside the grid.
        """
        row, col = self._check_bounds(row, col)
        return ALIVE if self._grid[row, col] else DEAD

    def is_alive(self) -> bool:
        """True if there is at least one live cell in the grid."""
        return bool(self._grid.any())

    def alive_neighbor_count(self, row: int, col: int) -> int:
        """
        Count the live cells among the 8 wrapped neighbours of (row, col).

        Raises:
            IndexOutOfRange: If the coordinate is outside the grid.
        """
        row, col = self._check_bounds(row, col)
        return gol_rules.count_neighbors(self._grid, row, col)

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbour count of every cell, as a rows x cols array."""
        return gol_rules.count_all_neighbors(self._grid)

    def count_communities(self) -> int:
        """Number of separate communities of live cells."""
        return count_communities(self.snapshot())

    # ------------------------------------------------------------------
    # Evolution
    # ------------------------------------------------------------------

    def compute_new_grid(self) -> np.ndarray:
        """Compute the next generation without changing this grid."""
        return gol_rules.compute_next_generation(self._grid)

    def step_once(self) -> None:
        """Advance the grid by one generation."""
        self._grid = self.compute_new_grid()
        self._generation += 1
        self._total_alive = self._count_alive()
        logger.debug(
            "Generation %d: %d live cells", self._generation, self._total_alive
        )

    def step_n(self, n: int) -> None:
        """
        Advance the grid by ``n`` generations.

        Args:
            n: Number of generations; 0 leaves the grid unchanged.
        """
        if n < 0:
            raise ValueError(f"Number of generations must be non-negative, got {n}")
        for _ in range(n):
            self.step_once()

    def _count_alive(self) -> int:
        return int(np.count_nonzero(self._grid))

    def __repr__(self) -> str:
        return (
            f"GameOfLife(rows={self.rows}, cols={self.cols}, "
            f"generation={self._generation}, alive={self._total_alive})"
        )
