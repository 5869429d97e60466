"""Depth-first and breadth-first search with path reconstruction.

The searches work on any graph exposing ``V`` and ``neighbors(v)``, so the same
classes serve undirected graphs and digraphs.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

import numpy as np

from . import _config
from .graph import AdjacencyGraph, validate_vertex

logger = logging.getLogger(__name__)

__all__ = [
    "INFINITY_HOPS",
    "DepthFirstSearch",
    "DirectedDFS",
    "DepthFirstPaths",
    "DepthFirstDirectedPaths",
    "BreadthFirstPaths",
    "BreadthFirstDirectedPaths",
]

INFINITY_HOPS = np.iinfo(np.int64).max


def _as_sources(sources: int | Iterable[int], n_vertices: int) -> list[int]:
    if isinstance(sources, (int, np.integer)):
        sources = [int(sources)]
    out = [validate_vertex(s, n_vertices) for s in sources]
    if not out:
        raise ValueError("at least one source vertex is required")
    return out


def _dfs(
    g: AdjacencyGraph,
    root: int,
    marked: np.ndarray,
    edge_to: np.ndarray | None = None,
) -> int:
    """Mark everything reachable from ``root``; return how many were newly marked."""
    marked[root] = True
    n_marked = 1
    stack = [(root, iter(g.neighbors(root)))]
    while stack:
        v, it = stack[-1]
        for w in it:
            if not marked[w]:
                marked[w] = True
                n_marked += 1
                if edge_to is not None:
                    edge_to[w] = v
                stack.append((w, iter(g.neighbors(w))))
                break
        else:
            stack.pop()
    return n_marked


class DepthFirstSearch:
    """Vertices reachable from one source or a set of sources."""

    def __init__(self, g: AdjacencyGraph, sources: int | Iterable[int]) -> None:
        self._V = g.V
        self._marked = np.zeros(g.V, dtype=bool)
        self._count = 0
        for s in _as_sources(sources, g.V):
            if not self._marked[s]:
                self._count += _dfs(g, s, self._marked)

    def marked(self, v: int) -> bool:
        return bool(self._marked[validate_vertex(v, self._V)])

    @property
    def count(self) -> int:
        return self._count

    def reachable(self) -> list[int]:
        return np.flatnonzero(self._marked).tolist()


DirectedDFS = DepthFirstSearch


class DepthFirstPaths:
    def __init__(self, g: AdjacencyGraph, s: int) -> None:
        self._V = g.V
        self._s = validate_vertex(s, g.V)
        self._marked = np.zeros(g.V, dtype=bool)
        self._edge_to = np.full(g.V, -1, dtype=np.int64)
        _dfs(g, self._s, self._marked, self._edge_to)

    def has_path_to(self, v: int) -> bool:
        return bool(self._marked[validate_vertex(v, self._V)])

    def path_to(self, v: int) -> list[int] | None:
        x = validate_vertex(v, self._V)
        if not self._marked[x]:
            return None
        path = []
        while x != self._s:
            path.append(x)
            x = int(self._edge_to[x])
        path.append(self._s)
        path.reverse()
        return path


DepthFirstDirectedPaths = DepthFirstPaths


class BreadthFirstPaths:
    """Shortest (fewest-edge) paths from one source or a set of sources."""

    def __init__(
        self, g: AdjacencyGraph, sources: int | Iterable[int], *, check: bool | None = None
    ) -> None:
        self._V = g.V
        self._marked = np.zeros(g.V, dtype=bool)
        self._edge_to = np.full(g.V, -1, dtype=np.int64)
        self._dist_to = np.full(g.V, INFINITY_HOPS, dtype=np.int64)
        self._sources = _as_sources(sources, g.V)
        self._bfs(g)
        if _config.checks_enabled(check):
            assert self.check(g), "breadth-first search violates optimality conditions"

    def _bfs(self, g: AdjacencyGraph) -> None:
        marked = self._marked
        dist_to = self._dist_to
        queue: deque[int] = deque()
        for s in self._sources:
            marked[s] = True
            dist_to[s] = 0
            queue.append(s)
        while queue:
            v = queue.popleft()
            for w in g.neighbors(v):
                if not marked[w]:
                    self._edge_to[w] = v
                    dist_to[w] = dist_to[v] + 1
                    marked[w] = True
                    queue.append(w)

    def has_path_to(self, v: int) -> bool:
        return bool(self._marked[validate_vertex(v, self._V)])

    def dist_to(self, v: int) -> int:
        return int(self._dist_to[validate_vertex(v, self._V)])

    def path_to(self, v: int) -> list[int] | None:
        x = validate_vertex(v, self._V)
        if not self._marked[x]:
            return None
        path = []
        while self._dist_to[x] != 0:
            path.append(x)
            x = int(self._edge_to[x])
        path.append(x)
        path.reverse()
        return path

    def check(self, g: AdjacencyGraph) -> bool:
        for s in self._sources:
            if self._dist_to[s] != 0:
                logger.error("distance of source %d to itself = %d", s, self._dist_to[s])
                return False
        directed = hasattr(g, "reverse")
        for v in range(g.V):
            for w in g.neighbors(v):
                if not directed and self.has_path_to(v) != self.has_path_to(w):
                    logger.error("edge %d-%d: has_path_to(%d) != has_path_to(%d)", v, w, v, w)
                    return False
                if self.has_path_to(v) and self._dist_to[w] > self._dist_to[v] + 1:
                    logger.error("edge %d-%d: dist_to[%d] > dist_to[%d] + 1", v, w, w, v)
                    return False
        for w in range(g.V):
            if not self.has_path_to(w) or self._dist_to[w] == 0:
                continue
            v = int(self._edge_to[w])
            if self._dist_to[w] != self._dist_to[v] + 1:
                logger.error("shortest path edge %d-%d: dist_to[%d] != dist_to[%d] + 1", v, w, w, v)
                return False
        return True


BreadthFirstDirectedPaths = BreadthFirstPaths
