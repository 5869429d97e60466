"""Connected components of undirected graphs and reachability in digraphs."""

from __future__ import annotations

import logging

import numpy as np

from .graph import AdjacencyGraph, validate_vertex
from .paths import _dfs

logger = logging.getLogger(__name__)

__all__ = ["CC", "TransitiveClosure"]


class CC:
    """Connected components of an undirected (optionally edge-weighted) graph."""

    def __init__(self, g: AdjacencyGraph) -> None:
        self._V = g.V
        self._id = np.full(g.V, -1, dtype=np.int64)
        sizes: list[int] = []
        for v in range(g.V):
            if self._id[v] == -1:
                sizes.append(self._label(g, v, len(sizes)))
        self._size = np.asarray(sizes, dtype=np.int64)
        logger.debug("%r has %d connected components", g, self.count)

    def _label(self, g: AdjacencyGraph, root: int, component: int) -> int:
        ids = self._id
        ids[root] = component
        size = 1
        stack = [root]
        while stack:
            v = stack.pop()
            for w in g.neighbors(v):
                if ids[w] == -1:
                    ids[w] = component
                    size += 1
                    stack.append(w)
        return size

    @property
    def count(self) -> int:
        return int(self._size.size)

    def id(self, v: int) -> int:
        return int(self._id[validate_vertex(v, self._V)])

    def size(self, v: int) -> int:
        return int(self._size[self.id(v)])

    def connected(self, v: int, w: int) -> bool:
        return self.id(v) == self.id(w)

    def components(self) -> list[list[int]]:
        groups: list[list[int]] = [[] for _ in range(self.count)]
        for v, c in enumerate(self._id.tolist()):
            groups[c].append(v)
        return groups


class TransitiveClosure:
    """All-pairs reachability: one depth-first search per vertex.

    ``V^2`` booleans of storage, ``V (V + E)`` time.
    """

    def __init__(self, g: AdjacencyGraph) -> None:
        self._V = g.V
        self._reach = np.zeros((g.V, g.V), dtype=bool)
        for v in range(g.V):
            _dfs(g, v, self._reach[v])

    def reachable(self, v: int, w: int) -> bool:
        return bool(self._reach[validate_vertex(v, self._V), validate_vertex(w, self._V)])

    def matrix(self) -> np.ndarray:
        return self._reach.copy()
