"""Cycle finding in undirected graphs, digraphs and edge-weighted digraphs.

Every finder reports at most one cycle. A missing cycle is a normal result:
``has_cycle()`` is ``False`` and ``cycle()`` is ``None``.
"""

from __future__ import annotations

import logging

import numpy as np

from . import _config
from .graph import AdjacencyGraph, Graph, validate_vertex
from .weighted import DirectedEdge, EdgeWeightedDigraph

logger = logging.getLogger(__name__)

__all__ = ["Cycle", "DirectedCycle", "EdgeWeightedDirectedCycle", "Bipartite"]


def _tree_path(edge_to: np.ndarray, v: int, w: int) -> list[int]:
    """``[v, edge_to[v], ...]`` up to, but excluding, the ancestor ``w``."""
    path = []
    x = v
    while x != w:
        path.append(x)
        x = int(edge_to[x])
    return path


def _is_closed(walk: list[int]) -> bool:
    if walk[0] != walk[-1]:
        logger.error("cycle begins with %d and ends with %d", walk[0], walk[-1])
        return False
    return True


class Cycle:
    """Cycle in an undirected graph.

    A self-loop ``v-v`` is reported as ``[v, v]`` and a pair of parallel edges
    ``v-w`` as ``[v, w, v]`` before any search runs. Otherwise the cycle is the
    closed walk ``[v, w, ..., v]`` closed by the first non-tree edge ``v-w``.
    """

    def __init__(self, g: Graph) -> None:
        self._cycle: list[int] | None = None
        if self._find_self_loop(g) or self._find_parallel_edges(g):
            return
        marked = np.zeros(g.V, dtype=bool)
        edge_to = np.full(g.V, -1, dtype=np.int64)
        for v in range(g.V):
            if not marked[v]:
                self._dfs(g, v, marked, edge_to)
                if self._cycle is not None:
                    break
        logger.debug("undirected cycle search over %r: %s", g, self._cycle)

    def _find_self_loop(self, g: Graph) -> bool:
        for v in range(g.V):
            if v in g.adj(v):
                self._cycle = [v, v]
                return True
        return False

    def _find_parallel_edges(self, g: Graph) -> bool:
        marked = np.zeros(g.V, dtype=bool)
        for v in range(g.V):
            adj = g.adj(v)
            for w in adj:
                if marked[w]:
                    self._cycle = [v, w, v]
                    return True
                marked[w] = True
            # reset so marked[] is all False again
            marked[list(adj)] = False
        return False

    def _dfs(self, g: Graph, root: int, marked: np.ndarray, edge_to: np.ndarray) -> None:
        marked[root] = True
        stack = [(root, -1, iter(g.adj(root)))]
        while stack:
            v, parent, it = stack[-1]
            for w in it:
                if not marked[w]:
                    marked[w] = True
                    edge_to[w] = v
                    stack.append((w, v, iter(g.adj(w))))
                    break
                # ignore the reverse of the tree edge leading to v
                if w != parent:
                    self._cycle = [v, w] + _tree_path(edge_to, v, w)[::-1]
                    return
            else:
                stack.pop()

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> list[int] | None:
        return None if self._cycle is None else list(self._cycle)


class DirectedCycle:
    """Directed cycle found by depth-first search with an on-stack marker."""

    def __init__(self, g: AdjacencyGraph, *, check: bool | None = None) -> None:
        self._cycle: list[int] | None = None
        marked = np.zeros(g.V, dtype=bool)
        on_stack = np.zeros(g.V, dtype=bool)
        edge_to = np.full(g.V, -1, dtype=np.int64)
        for v in range(g.V):
            if not marked[v]:
                self._dfs(g, v, marked, on_stack, edge_to)
                if self._cycle is not None:
                    break
        logger.debug("directed cycle search over %r: %s", g, self._cycle)
        if _config.checks_enabled(check):
            assert self.check(), "reported cycle is not a directed cycle"

    def _dfs(
        self,
        g: AdjacencyGraph,
        root: int,
        marked: np.ndarray,
        on_stack: np.ndarray,
        edge_to: np.ndarray,
    ) -> None:
        marked[root] = on_stack[root] = True
        stack = [(root, iter(g.neighbors(root)))]
        while stack:
            v, it = stack[-1]
            for w in it:
                if not marked[w]:
                    marked[w] = on_stack[w] = True
                    edge_to[w] = v
                    stack.append((w, iter(g.neighbors(w))))
                    break
                if on_stack[w]:
                    self._cycle = [v, w] + _tree_path(edge_to, v, w)[::-1]
                    return
            else:
                on_stack[v] = False
                stack.pop()

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> list[int] | None:
        return None if self._cycle is None else list(self._cycle)

    def check(self) -> bool:
        return self._cycle is None or _is_closed(self._cycle)


class EdgeWeightedDirectedCycle:
    """Directed cycle in an edge-weighted digraph, reported as a list of edges."""

    def __init__(self, g: EdgeWeightedDigraph, *, check: bool | None = None) -> None:
        self._cycle: list[DirectedEdge] | None = None
        marked = np.zeros(g.V, dtype=bool)
        on_stack = np.zeros(g.V, dtype=bool)
        edge_to: list[DirectedEdge | None] = [None] * g.V
        for v in range(g.V):
            if not marked[v]:
                self._dfs(g, v, marked, on_stack, edge_to)
                if self._cycle is not None:
                    break
        if _config.checks_enabled(check):
            assert self.check(), "reported cycle is not a directed cycle"

    def _dfs(
        self,
        g: EdgeWeightedDigraph,
        root: int,
        marked: np.ndarray,
        on_stack: np.ndarray,
        edge_to: list[DirectedEdge | None],
    ) -> None:
        marked[root] = on_stack[root] = True
        stack = [(root, iter(g.adj(root)))]
        while stack:
            v, it = stack[-1]
            for e in it:
                w = e.w
                if not marked[w]:
                    marked[w] = on_stack[w] = True
                    edge_to[w] = e
                    stack.append((w, iter(g.adj(w))))
                    break
                if on_stack[w]:
                    cycle = []
                    edge = e
                    while edge.v != w:
                        cycle.append(edge)
                        edge = edge_to[edge.v]
                    cycle.append(edge)
                    cycle.reverse()
                    self._cycle = cycle
                    return
            else:
                on_stack[v] = False
                stack.pop()

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> list[DirectedEdge] | None:
        return None if self._cycle is None else list(self._cycle)

    def check(self) -> bool:
        if self._cycle is None:
            return True
        for prev, nxt in zip(self._cycle, self._cycle[1:] + self._cycle[:1]):
            if prev.w != nxt.v:
                logger.error("cycle edges %s and %s not incident", prev, nxt)
                return False
        return True


class Bipartite:
    """Two-colouring of an undirected graph, or an odd-length cycle proving none exists."""

    def __init__(self, g: Graph, *, check: bool | None = None) -> None:
        self._V = g.V
        self._color = np.zeros(g.V, dtype=bool)
        self._odd_cycle: list[int] | None = None
        marked = np.zeros(g.V, dtype=bool)
        edge_to = np.full(g.V, -1, dtype=np.int64)
        for v in range(g.V):
            if not marked[v]:
                self._dfs(g, v, marked, edge_to)
                if self._odd_cycle is not None:
                    break
        if _config.checks_enabled(check):
            assert self.check(g), "bipartition check failed"

    def _dfs(self, g: Graph, root: int, marked: np.ndarray, edge_to: np.ndarray) -> None:
        color = self._color
        marked[root] = True
        stack = [(root, iter(g.adj(root)))]
        while stack:
            v, it = stack[-1]
            for w in it:
                if not marked[w]:
                    marked[w] = True
                    edge_to[w] = v
                    color[w] = not color[v]
                    stack.append((w, iter(g.adj(w))))
                    break
                if color[w] == color[v]:
                    self._odd_cycle = [w] + _tree_path(edge_to, v, w)[::-1] + [w]
                    return
            else:
                stack.pop()

    def is_bipartite(self) -> bool:
        return self._odd_cycle is None

    def color(self, v: int) -> bool:
        v = validate_vertex(v, self._V)
        if not self.is_bipartite():
            raise ValueError("Graph is not bipartite")
        return bool(self._color[v])

    def odd_cycle(self) -> list[int] | None:
        return None if self._odd_cycle is None else list(self._odd_cycle)

    def check(self, g: Graph) -> bool:
        if self.is_bipartite():
            for v in range(g.V):
                for w in g.adj(v):
                    if self._color[v] == self._color[w]:
                        logger.error("edge %d-%d with %d and %d in same side of bipartition", v, w, v, w)
                        return False
            return True
        return _is_closed(self._odd_cycle)
