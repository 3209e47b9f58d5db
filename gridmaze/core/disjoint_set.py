"""
Disjoint-set (union-find) over integer ids ``0..n-1``.
"""

from __future__ import annotations


class DisjointSet:
    """
    Union-find with path halving and union by rank.

    Args:
        size: Number of elements; each starts in its own set
    """

    def __init__(self, size: int):
        self._parent = list(range(size))
        self._rank = [0] * size
        self.components = size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of ``item``'s set."""
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if the sets were different and have been merged
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

        self.components -= 1
        return True
