"""Depth-first vertex orderings and topological sort."""

from __future__ import annotations

import logging

import numpy as np

from .cycle import DirectedCycle, EdgeWeightedDirectedCycle
from .graph import AdjacencyGraph, validate_vertex
from .weighted import EdgeWeightedDigraph

logger = logging.getLogger(__name__)

__all__ = ["DepthFirstOrder", "Topological"]


class DepthFirstOrder:
    """Preorder, postorder and reverse postorder of a digraph.

    Works with ``Digraph`` and ``EdgeWeightedDigraph`` alike; every vertex is
    visited, roots are taken in increasing vertex order.
    """

    def __init__(self, g: AdjacencyGraph) -> None:
        self._V = g.V
        self._pre = np.full(g.V, -1, dtype=np.int64)
        self._post = np.full(g.V, -1, dtype=np.int64)
        self._preorder: list[int] = []
        self._postorder: list[int] = []
        marked = np.zeros(g.V, dtype=bool)
        for v in range(g.V):
            if not marked[v]:
                self._dfs(g, v, marked)

    def _dfs(self, g: AdjacencyGraph, root: int, marked: np.ndarray) -> None:
        self._enter(root, marked)
        stack = [(root, iter(g.neighbors(root)))]
        while stack:
            v, it = stack[-1]
            for w in it:
                if not marked[w]:
                    self._enter(w, marked)
                    stack.append((w, iter(g.neighbors(w))))
                    break
            else:
                stack.pop()
                self._post[v] = len(self._postorder)
                self._postorder.append(v)

    def _enter(self, v: int, marked: np.ndarray) -> None:
        marked[v] = True
        self._pre[v] = len(self._preorder)
        self._preorder.append(v)

    def pre(self, v: int) -> int:
        return int(self._pre[validate_vertex(v, self._V)])

    def post(self, v: int) -> int:
        return int(self._post[validate_vertex(v, self._V)])

    def preorder(self) -> list[int]:
        return list(self._preorder)

    def postorder(self) -> list[int]:
        return list(self._postorder)

    def reverse_postorder(self) -> list[int]:
        return self._postorder[::-1]

    def check(self) -> bool:
        for r, v in enumerate(self._postorder):
            if self._post[v] != r:
                logger.error("post(v) and postorder() inconsistent at vertex %d", v)
                return False
        for r, v in enumerate(self._preorder):
            if self._pre[v] != r:
                logger.error("pre(v) and preorder() inconsistent at vertex %d", v)
                return False
        return True


class Topological:
    """Topological order of a digraph, defined only when the digraph is acyclic.

    The cycle check runs first; for a cyclic digraph ``has_order()`` is False
    and ``order()`` is None.
    """

    def __init__(self, g: AdjacencyGraph) -> None:
        self._V = g.V
        self._order: list[int] | None = None
        self._rank: np.ndarray | None = None
        if isinstance(g, EdgeWeightedDigraph):
            finder = EdgeWeightedDirectedCycle(g)
        else:
            finder = DirectedCycle(g)
        if finder.has_cycle():
            logger.debug("%r has a directed cycle; no topological order", g)
            return
        self._order = DepthFirstOrder(g).reverse_postorder()
        self._rank = np.empty(g.V, dtype=np.int64)
        self._rank[self._order] = np.arange(g.V, dtype=np.int64)

    def has_order(self) -> bool:
        return self._order is not None

    def is_dag(self) -> bool:
        return self.has_order()

    def order(self) -> list[int] | None:
        return None if self._order is None else list(self._order)

    def rank(self, v: int) -> int:
        v = validate_vertex(v, self._V)
        if self._rank is None:
            return -1
        return int(self._rank[v])
