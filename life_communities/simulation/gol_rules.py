"""Game of Life rules on a toroidal grid, using NumPy for efficiency."""

import numpy as np

ALIVE = True
DEAD = False

# Eight neighbour offsets (row, col), the cell itself excluded
NEIGHBOR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

MAX_NEIGHBORS = len(NEIGHBOR_OFFSETS)

# TRANSITION_TABLE[state, k] is the next state of a cell in `state`
# with k live neighbours:
#   k == 2  -> unchanged
#   k == 3  -> alive
#   other   -> dead
TRANSITION_TABLE = np.zeros((2, MAX_NEIGHBORS + 1), dtype=bool)
TRANSITION_TABLE[1, 2] = ALIVE
TRANSITION_TABLE[:, 3] = ALIVE
TRANSITION_TABLE.flags.writeable = False


def next_state(state: bool, neighbors: int) -> bool:
    """
    Look up the next state of a single cell.

    Args:
        state: Current state of the cell.
        neighbors: Number of live neighbours (0-8).

    Returns:
        The cell's state in the next generation.
    """
    if not 0 <= neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"neighbor count must be between 0 and 8, got {neighbors}")
    return bool(TRANSITION_TABLE[int(bool(state)), neighbors])


def apply_rules(cells: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    """
    Apply the transition table to every cell at once.

    Args:
        cells: Boolean array of the current generation.
        neighbors: Integer array of live neighbour counts, same shape.

    Returns:
        New boolean array holding the next generation.
    """
    return TRANSITION_TABLE[cells.astype(np.intp), neighbors]


def wrap(row: int, col: int, rows: int, cols: int) -> tuple[int, int]:
    """Map a possibly out-of-bounds coordinate onto the torus."""
    return (row + rows) % rows, (col + cols) % cols


def toroidal_neighbors(row: int, col: int, rows: int, cols: int):
    """
    Yield the eight wrapped neighbour coordinates of (row, col).

    On a grid with a single row or column the same coordinate, or the cell
    itself, is yielded more than once.
    """
    for dr, dc in NEIGHBOR_OFFSETS:
        yield wrap(row + dr, col + dc, rows, cols)


def count_neighbors(cells: np.ndarray, row: int, col: int) -> int:
    """
    Count the number of live neighbours of one cell.

    Args:
        cells: Boolean grid.
        row: Row of the cell.
        col: Column of the cell.

    Returns:
        Number of live neighbours (0-8).
    """
    rows, cols = cells.shape
    return sum(
        1 for nr, nc in toroidal_neighbors(row, col, rows, cols) if cells[nr, nc]
    )


def count_all_neighbors(cells: np.ndarray) -> np.ndarray:
    """Count live neighbours for each cell using periodic boundaries."""
    counts = np.zeros(cells.shape, dtype=np.intp)
    for dr, dc in NEIGHBOR_OFFSETS:
        # Rolling by (-dr, -dc) lines cell (r+dr, c+dc) up with (r, c)
        counts += np.roll(cells, (-dr, -dc), axis=(0, 1))
    return counts


def compute_next_generation(cells: np.ndarray) -> np.ndarray:
    """
    Compute the next generation from the current one.

    The input array is only read; the result is a fresh array.
    """
    return apply_rules(cells, count_all_neighbors(cells))
