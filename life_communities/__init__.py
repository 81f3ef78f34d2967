"""Conway's Game of Life on a toroidal grid, with community counting."""

from life_communities.errors import (
    GridError,
    IndexOutOfRange,
    InvalidDimensions,
    MalformedInput,
    TruncatedInput,
)
from life_communities.models.disjoint_set import DisjointSet
from life_communities.models.grid_state import GridSnapshot
from life_communities.simulation.communities import count_communities, label_communities
from life_communities.simulation.engine import GameOfLife
from life_communities.simulation.gol_rules import ALIVE, DEAD, TRANSITION_TABLE, next_state

__all__ = [
    "ALIVE",
    "DEAD",
    "TRANSITION_TABLE",
    "DisjointSet",
    "GameOfLife",
    "GridError",
    "GridSnapshot",
    "IndexOutOfRange",
    "InvalidDimensions",
    "MalformedInput",
    "TruncatedInput",
    "count_communities",
    "label_communities",
    "next_state",
]
