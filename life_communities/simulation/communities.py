"""Counting communities of live cells with a disjoint set."""

import logging

import numpy as np

from life_communities.models.disjoint_set import DisjointSet
from life_communities.models.grid_state import GridSnapshot
from life_communities.simulation.gol_rules import toroidal_neighbors

logger = logging.getLogger(__name__)


def build_disjoint_set(snapshot: GridSnapshot) -> DisjointSet:
    """
    Union every live cell with each of its live wrapped neighbours.

    Cell (row, col) is node ``row * cols + col``.

    Args:
        snapshot: Grid generation to partition.

    Returns:
        A fresh DisjointSet with one node per grid cell.
    """
    rows, cols = snapshot.shape
    cells = snapshot.cells
    uf = DisjointSet(rows * cols)

    for row, col in zip(*np.nonzero(cells)):
        row, col = int(row), int(col)
        index = row * cols + col
        for nr, nc in toroidal_neighbors(row, col, rows, cols):
            if cells[nr, nc]:
                uf.union(index, nr * cols + nc)

    return uf


def count_communities(snapshot: GridSnapshot) -> int:
    """
    Determine the number of separate communities in the grid.

    A community is a maximal group of live cells connected horizontally,
    vertically or diagonally, with the grid edges wrapping around.

    Args:
        snapshot: Grid generation to inspect.

    Returns:
        Number of communities; 0 for a grid with no live cells.
    """
    uf = build_disjoint_set(snapshot)
    cols = snapshot.cols
    roots = {
        uf.find(int(row) * cols + int(col))
        for row, col in zip(*np.nonzero(snapshot.cells))
    }
    logger.debug(
        "Generation %d: %d communities among %d live cells",
        snapshot.generation,
        len(roots),
        snapshot.alive_count,
    )
    return len(roots)


def label_communities(snapshot: GridSnapshot) -> np.ndarray:
    """
    Label every live cell with the number of its community.

    Communities are numbered from 1 in row-major order of their first cell;
    dead cells get 0.

    Args:
        snapshot: Grid generation to inspect.

    Returns:
        Integer array with the grid's shape.
    """
    uf = build_disjoint_set(snapshot)
    cols = snapshot.cols
    labels = np.zeros(snapshot.shape, dtype=np.intp)
    root_labels: dict[int, int] = {}

    for row, col in zip(*np.nonzero(snapshot.cells)):
        root = uf.find(int(row) * cols + int(col))
        if root not in root_labels:
            root_labels[root] = len(root_labels) + 1
        labels[row, col] = root_labels[root]

    return labels
