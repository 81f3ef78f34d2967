"""Weighted quick-union disjoint set with path compression."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class DisjointSet:
    """
    Union-find structure over the integer indices ``0 .. size - 1``.

    ``union`` links the root of the smaller tree under the root of the larger
    one, and ``find`` flattens every path it walks, so any sequence of
    operations runs in near-constant amortized time per call.
    """

    size: int
    parent: List[int] = field(init=False, repr=False)
    weight: List[int] = field(init=False, repr=False)
    count: int = field(init=False)

    def __post_init__(self):
        """Put every index in its own singleton set."""
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.weight = [1] * self.size
        self.count = self.size

    def _validate(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} is not between 0 and {self.size - 1}")

    def find(self, index: int) -> int:
        """
        Return the root of the set containing ``index``.

        Args:
            index: Element to look up.

        Returns:
            The root index of its tree.
        """
        self._validate(index)
        parent = self.parent
        while parent[index] != index:
            # Path halving: point each visited node at its grandparent
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def union(self, left: int, right: int) -> bool:
        """
        Merge the sets containing ``left`` and ``right``.

        Args:
            left: First element.
            right: Second element.

        Returns:
            True if two sets were merged, False if they were already one set.
        """
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False

        # Smaller tree goes under the larger root; ties go under the left root
        if self.weight[root_left] < self.weight[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.weight[root_left] += self.weight[root_right]
        self.count -= 1
        return True

    def connected(self, left: int, right: int) -> bool:
        """Check whether two elements share a set."""
        return self.find(left) == self.find(right)

    def component_size(self, index: int) -> int:
        """Number of elements in the set containing ``index``."""
        return self.weight[self.find(index)]

    def __len__(self) -> int:
        return self.size
