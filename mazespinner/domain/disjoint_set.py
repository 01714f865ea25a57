"""Indexed union-find used by Kruskal's algorithm."""

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

K = TypeVar("K", bound=Hashable)


class DisjointSet(Generic[K]):
    """
    Union-find over a fixed set of keys.

    Keys are mapped to dense indices once; parents live in a flat list with
    path compression on find and union by size.
    """

    def __init__(self, keys: Iterable[K]):
        self._index: Dict[K, int] = {}
        for key in keys:
            if key not in self._index:
                self._index[key] = len(self._index)
        self._parent: List[int] = list(range(len(self._index)))
        self._size: List[int] = [1] * len(self._index)
        self._components = len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    @property
    def component_count(self) -> int:
        """Number of disjoint components remaining."""
        return self._components

    def _find_index(self, i: int) -> int:
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[i] != root:
            next_i = self._parent[i]
            self._parent[i] = root
            i = next_i
        return root

    def find(self, key: K) -> int:
        """Return the representative index of the key's component."""
        return self._find_index(self._index[key])

    def connected(self, a: K, b: K) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: K, b: K) -> bool:
        """
        Merge the components of two keys.

        Returns:
            True if the keys were in different components, False otherwise
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._components -= 1
        return True
