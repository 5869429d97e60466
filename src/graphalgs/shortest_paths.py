"""Dijkstra's algorithm for edge-weighted digraphs with non-negative weights."""

from __future__ import annotations

import heapq
import logging

import numpy as np

from . import _config
from .dag_paths import _SingleSourcePaths
from .weighted import EdgeWeightedDigraph

logger = logging.getLogger(__name__)

__all__ = ["DijkstraSP"]


class DijkstraSP(_SingleSourcePaths):
    _unreached = np.inf

    def __init__(self, g: EdgeWeightedDigraph, s: int, *, check: bool | None = None) -> None:
        for e in g.edges():
            if e.weight < 0:
                raise ValueError(f"edge {e} has negative weight")
        super().__init__(g, s)
        dist_to = self._dist_to
        done = np.zeros(g.V, dtype=bool)
        heap: list[tuple[float, int]] = [(0.0, self._s)]
        while heap:
            d, v = heapq.heappop(heap)
            if done[v]:
                continue
            done[v] = True
            for e in g.adj(v):
                candidate = d + e.weight
                if candidate < dist_to[e.w]:
                    dist_to[e.w] = candidate
                    self._edge_to[e.w] = e
                    heapq.heappush(heap, (candidate, e.w))
        if _config.checks_enabled(check):
            assert self.check(g), "shortest-path optimality conditions violated"

    def check(self, g: EdgeWeightedDigraph) -> bool:
        dist_to = self._dist_to
        if dist_to[self._s] != 0.0 or self._edge_to[self._s] is not None:
            logger.error("dist_to[s] and edge_to[s] inconsistent")
            return False
        for v in range(g.V):
            if v != self._s and self._edge_to[v] is None and dist_to[v] != np.inf:
                logger.error("dist_to[] and edge_to[] inconsistent at %d", v)
                return False
        for e in g.edges():
            if dist_to[e.v] + e.weight < dist_to[e.w] - _config.FLOAT_EPSILON:
                logger.error("edge %s not relaxed", e)
                return False
        for w in range(g.V):
            e = self._edge_to[w]
            if e is None:
                continue
            if abs(dist_to[e.v] + e.weight - dist_to[w]) > _config.FLOAT_EPSILON:
                logger.error("edge %s on shortest path not tight", e)
                return False
        return True
