import numpy as np
import pytest

from life_communities.errors import (
    IndexOutOfRange,
    InvalidDimensions,
    MalformedInput,
    TruncatedInput,
)
from life_communities.simulation.engine import DEFAULT_SEED, GameOfLife
from life_communities.simulation.gol_rules import ALIVE, DEAD


def test_default_grid_has_five_seed_cells():
    game = GameOfLife()
    assert game.dimensions() == (5, 5)
    assert game.alive_count() == 5
    for row, col in DEFAULT_SEED:
        assert game.cell_state(row, col) == ALIVE
    assert game.cell_state(0, 0) == DEAD


def test_default_grid_dies_out_after_four_generations():
    game = GameOfLife()
    counts = [game.alive_count()]
    for _ in range(4):
        game.step_once()
        counts.append(game.alive_count())
    assert counts == [5, 4, 3, 2, 0]
    assert not game.is_alive()
    assert game.generation == 4


def test_construct_from_flat_cells():
    game = GameOfLife(2, 3, [True, False, False, False, True, True])
    assert game.dimensions() == (2, 3)
    assert game.alive_count() == 3
    assert game.cell_state(1, 2) == ALIVE
    assert game.cell_state(0, 1) == DEAD


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_are_rejected(rows, cols):
    with pytest.raises(InvalidDimensions):
        GameOfLife(rows, cols, [])


def test_missing_cells_raise_truncated_input():
    with pytest.raises(TruncatedInput):
        GameOfLife(2, 2, [True, False, True])


def test_extra_cells_raise_malformed_input():
    with pytest.raises(MalformedInput):
        GameOfLife(1, 2, [True, False, True])


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5), (9, 9)])
def test_out_of_range_queries_raise(row, col):
    game = GameOfLife()
    with pytest.raises(IndexOutOfRange):
        game.cell_state(row, col)
    with pytest.raises(IndexOutOfRange):
        game.alive_neighbor_count(row, col)


def test_index_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        GameOfLife().cell_state(5, 5)


def test_neighbor_count_wraps_around_corner():
    game = GameOfLife(3, 3, [True] + [False] * 8)
    assert game.alive_neighbor_count(2, 2) == 1
    assert game.alive_neighbor_count(0, 0) == 0


def test_neighbor_counts_stay_within_bounds(rng):
    game = GameOfLife.from_array(rng.random((6, 9)) < 0.7)
    counts = game.neighbor_counts()
    assert counts.shape == (6, 9)
    for row in range(6):
        for col in range(9):
            count = game.alive_neighbor_count(row, col)
            assert 0 <= count <= 8
            assert count == counts[row, col]


def test_block_is_still_life(block_game):
    before = block_game.grid
    block_game.step_once()
    assert np.array_equal(block_game.grid, before)
    assert block_game.alive_count() == 4


def test_blinker_oscillates(make_grid):
    game = GameOfLife.from_array(
        make_grid(
            ".....",
            ".....",
            ".OOO.",
            ".....",
            ".....",
        )
    )
    start = game.grid
    game.step_once()
    assert game.grid[1:4, 2].all()
    assert game.alive_count() == 3
    game.step_once()
    assert np.array_equal(game.grid, start)


def test_glider_crosses_the_edge_and_returns(make_grid):
    game = GameOfLife.from_array(
        make_grid(
            ".O....",
            "..O...",
            "OOO...",
            "......",
            "......",
            "......",
        )
    )
    start = game.grid
    # a glider moves one cell diagonally every four generations
    game.step_n(24)
    assert np.array_equal(game.grid, start)
    assert game.alive_count() == 5


def test_empty_grid_stays_extinct():
    game = GameOfLife(4, 4, [False] * 16)
    assert not game.is_alive()
    game.step_n(10)
    assert not game.is_alive()
    assert game.alive_count() == 0


def test_alive_count_matches_scan_after_each_step(rng):
    game = GameOfLife.from_array(rng.random((12, 10)) < 0.35)
    for _ in range(15):
        game.step_once()
        assert game.alive_count() == int(np.count_nonzero(game.grid))


def test_step_n_matches_repeated_single_steps(rng):
    cells = rng.random((8, 8)) < 0.4
    stepped = GameOfLife.from_array(cells)
    single = GameOfLife.from_array(cells)
    stepped.step_n(7)
    for _ in range(7):
        single.step_once()
    assert np.array_equal(stepped.grid, single.grid)
    assert stepped.generation == single.generation == 7


def test_step_n_zero_is_a_no_op():
    game = GameOfLife()
    before = game.grid
    game.step_n(0)
    assert np.array_equal(game.grid, before)
    assert game.generation == 0


def test_step_n_rejects_negative_counts():
    with pytest.raises(ValueError):
        GameOfLife().step_n(-1)


def test_compute_new_grid_leaves_state_untouched():
    game = GameOfLife()
    before = game.grid
    next_grid = game.compute_new_grid()
    assert np.array_equal(game.grid, before)
    assert int(next_grid.sum()) == 4


def test_exposed_grid_cannot_modify_engine():
    game = GameOfLife()
    grid = game.grid
    with pytest.raises(ValueError):
        grid[0, 0] = True
    copy = grid.copy()
    copy[0, 0] = True
    assert game.cell_state(0, 0) == DEAD


def test_snapshot_keeps_its_generation():
    game = GameOfLife()
    snapshot = game.snapshot()
    game.step_once()
    assert snapshot.generation == 0
    assert snapshot.alive_count == 5
    assert game.snapshot().generation == 1


def test_from_source_reads_text():
    game = GameOfLife.from_source("2 2\ntrue false\nfalse true\n")
    assert game.dimensions() == (2, 2)
    assert game.alive_count() == 2


def test_from_array_rejects_non_2d_input():
    with pytest.raises(InvalidDimensions):
        GameOfLife.from_array([True, False])


@pytest.mark.parametrize("row, col", [(1.5, 0), (0, 2.0), ("1", 1), (None, 0)])
def test_non_integer_coordinates_raise_index_out_of_range(row, col):
    game = GameOfLife()
    with pytest.raises(IndexOutOfRange):
        game.cell_state(row, col)
    with pytest.raises(IndexOutOfRange):
        game.alive_neighbor_count(row, col)
    with pytest.raises(IndexOutOfRange):
        game.snapshot().is_alive(row, col)


def test_numpy_integer_coordinates_are_accepted():
    game = GameOfLife()
    assert game.cell_state(np.int64(1), np.int32(1)) == ALIVE
    assert game.snapshot().is_alive(np.int64(2), np.int64(2))
