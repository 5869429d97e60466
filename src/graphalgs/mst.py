"""Minimum spanning forests of edge-weighted graphs (Kruskal, lazy Prim)."""

from __future__ import annotations

import heapq
import itertools
import logging

import numpy as np

from . import _config
from .union_find import UnionFind
from .weighted import Edge, EdgeWeightedGraph

logger = logging.getLogger(__name__)

__all__ = ["KruskalMST", "LazyPrimMST", "MST_ALGORITHMS", "check_spanning_forest"]


class _SpanningForest:
    _edges: list[Edge]
    _weight: float

    def edges(self) -> list[Edge]:
        return list(self._edges)

    @property
    def weight(self) -> float:
        return self._weight

    def check(self, g: EdgeWeightedGraph) -> bool:
        return check_spanning_forest(self._edges, self._weight, g)


class KruskalMST(_SpanningForest):
    def __init__(self, g: EdgeWeightedGraph, *, check: bool | None = None) -> None:
        all_edges = g.edges()
        self._edges = []
        self._weight = 0.0
        if all_edges:
            weights = np.fromiter((e.weight for e in all_edges), count=len(all_edges), dtype=np.float64)
            order = np.argsort(weights, kind="stable")
            uf = UnionFind(g.V)
            for i in order.tolist():
                e = all_edges[i]
                v = e.either()
                if uf.union(v, e.other(v)):
                    self._edges.append(e)
                    self._weight += e.weight
                    if len(self._edges) == g.V - 1:
                        break
        logger.debug("Kruskal spanning forest: %d edges, weight %.5f", len(self._edges), self._weight)
        if _config.checks_enabled(check):
            assert self.check(g), "spanning forest optimality conditions violated"


class LazyPrimMST(_SpanningForest):
    def __init__(self, g: EdgeWeightedGraph, *, check: bool | None = None) -> None:
        self._edges = []
        self._weight = 0.0
        marked = np.zeros(g.V, dtype=bool)
        # the counter breaks weight ties so Edge objects never get compared
        tiebreak = itertools.count()
        for root in range(g.V):
            if marked[root]:
                continue
            heap: list[tuple[float, int, Edge]] = []
            self._scan(g, root, marked, heap, tiebreak)
            while heap:
                _, _, e = heapq.heappop(heap)
                v = e.either()
                w = e.other(v)
                if marked[v] and marked[w]:
                    continue
                self._edges.append(e)
                self._weight += e.weight
                self._scan(g, w if marked[v] else v, marked, heap, tiebreak)
        logger.debug("Prim spanning forest: %d edges, weight %.5f", len(self._edges), self._weight)
        if _config.checks_enabled(check):
            assert self.check(g), "spanning forest optimality conditions violated"

    @staticmethod
    def _scan(g: EdgeWeightedGraph, v: int, marked: np.ndarray, heap: list, tiebreak) -> None:
        marked[v] = True
        for e in g.adj(v):
            if not marked[e.other(v)]:
                heapq.heappush(heap, (e.weight, next(tiebreak), e))


MST_ALGORITHMS = {"kruskal": KruskalMST, "prim": LazyPrimMST}


def check_spanning_forest(forest: list[Edge], weight: float, g: EdgeWeightedGraph) -> bool:
    """Weight sum, acyclicity, spanning and cut optimality of ``forest``."""
    total = sum(e.weight for e in forest)
    if abs(total - weight) > _config.FLOAT_EPSILON:
        logger.error("weight of edges does not equal weight: %r vs. %r", total, weight)
        return False

    uf = UnionFind(g.V)
    for e in forest:
        v = e.either()
        if not uf.union(v, e.other(v)):
            logger.error("not a forest")
            return False
    for e in g.edges():
        v = e.either()
        if not uf.connected(v, e.other(v)):
            logger.error("not a spanning forest")
            return False

    # every forest edge must be a lightest edge across the cut it defines
    for e in forest:
        uf = UnionFind(g.V)
        for f in forest:
            if f is not e:
                x = f.either()
                uf.union(x, f.other(x))
        for f in g.edges():
            x = f.either()
            if not uf.connected(x, f.other(x)) and f.weight < e.weight:
                logger.error("edge %s violates cut optimality conditions", f)
                return False
    return True
