"""Models package for grid state and disjoint sets."""

from life_communities.models.disjoint_set import DisjointSet
from life_communities.models.grid_state import GridSnapshot

__all__ = ["DisjointSet", "GridSnapshot"]
