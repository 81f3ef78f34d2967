from collections import deque

import numpy as np

from life_communities.models.grid_state import GridSnapshot
from life_communities.simulation.communities import (
    build_disjoint_set,
    count_communities,
    label_communities,
)
from life_communities.simulation.engine import GameOfLife
from life_communities.simulation.gol_rules import toroidal_neighbors


def snapshot_of(cells):
    cells = np.asarray(cells, dtype=bool)
    return GridSnapshot(cells.shape[0], cells.shape[1], cells)


def flood_fill_count(cells):
    rows, cols = cells.shape
    seen = np.zeros_like(cells)
    components = 0
    for row in range(rows):
        for col in range(cols):
            if not cells[row, col] or seen[row, col]:
                continue
            components += 1
            seen[row, col] = True
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for nr, nc in toroidal_neighbors(r, c, rows, cols):
                    if cells[nr, nc] and not seen[nr, nc]:
                        seen[nr, nc] = True
                        queue.append((nr, nc))
    return components


def test_empty_grid_has_no_communities():
    assert count_communities(snapshot_of(np.zeros((4, 4)))) == 0


def test_single_blob_is_one_community(make_grid):
    cells = make_grid(
        "......",
        ".OO...",
        "..O...",
        "...OO.",
        "......",
    )
    assert count_communities(snapshot_of(cells)) == 1


def test_far_apart_cells_are_separate(make_grid):
    cells = make_grid(
        ".......",
        ".O.....",
        ".......",
        ".......",
        "....O..",
        ".......",
        ".......",
    )
    assert count_communities(snapshot_of(cells)) == 2


def test_communities_join_across_the_edges(make_grid):
    cells = make_grid(
        "O....",
        ".....",
        ".....",
        ".....",
        "....O",
    )
    assert count_communities(snapshot_of(cells)) == 1


def test_diagonal_contact_joins_communities(make_grid):
    cells = make_grid(
        "......",
        ".O....",
        "..O...",
        "......",
        "....OO",
        "......",
    )
    assert count_communities(snapshot_of(cells)) == 2


def test_full_grid_is_one_community():
    assert count_communities(snapshot_of(np.ones((3, 4)))) == 1


def test_counting_twice_gives_same_answer():
    game = GameOfLife()
    first = game.count_communities()
    second = game.count_communities()
    assert first == second == 1
    assert game.alive_count() == 5


def test_counts_match_flood_fill(rng):
    for _ in range(20):
        cells = rng.random((9, 11)) < 0.3
        assert count_communities(snapshot_of(cells)) == flood_fill_count(cells)


def test_default_seed_stays_one_community_until_extinct():
    game = GameOfLife()
    counts = [game.count_communities()]
    for _ in range(4):
        game.step_once()
        counts.append(game.count_communities())
    assert counts == [1, 1, 1, 1, 0]


def test_disjoint_set_covers_every_cell():
    snapshot = snapshot_of(np.eye(4))
    uf = build_disjoint_set(snapshot)
    assert len(uf) == 16
    # the diagonal is one chain, the 12 dead cells stay singletons
    assert uf.count == 13


def test_labels_number_communities_in_row_major_order(make_grid):
    cells = make_grid(
        "......",
        "....O.",
        "......",
        ".OO...",
        "......",
        "......",
    )
    labels = label_communities(snapshot_of(cells))
    assert labels[1, 4] == 1
    assert labels[3, 1] == labels[3, 2] == 2
    assert labels.max() == 2
    assert (labels[~cells] == 0).all()


def test_counting_does_not_touch_the_grid(rng):
    game = GameOfLife.from_array(rng.random((6, 6)) < 0.5)
    before = game.grid
    game.count_communities()
    assert np.array_equal(game.grid, before)
