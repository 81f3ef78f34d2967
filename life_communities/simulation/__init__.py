"""Simulation package for Game of Life rules and community counting."""

from life_communities.simulation.gol_rules import (
    TRANSITION_TABLE,
    apply_rules,
    next_state,
)
from life_communities.simulation.communities import (
    count_communities,
    label_communities,
)
from life_communities.simulation.engine import GameOfLife

__all__ = [
    "TRANSITION_TABLE",
    "apply_rules",
    "next_state",
    "count_communities",
    "label_communities",
    "GameOfLife",
]
