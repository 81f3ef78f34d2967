import numpy as np
import pytest

from life_communities.simulation.engine import GameOfLife


def grid_from_strings(*rows):
    """Build a boolean array from rows such as ``".O."``."""
    return np.array([[ch == "O" for ch in row] for row in rows], dtype=bool)


@pytest.fixture
def block_game():
    return GameOfLife.from_array(
        grid_from_strings(
            "......",
            "......",
            "..OO..",
            "..OO..",
            "......",
            "......",
        )
    )


@pytest.fixture
def rng():
    return np.random.default_rng(20240607)


@pytest.fixture
def make_grid():
    return grid_from_strings
