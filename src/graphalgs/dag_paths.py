"""Single-source shortest and longest paths in edge-weighted DAGs.

Edges are relaxed once each, in topological order, so negative weights are
fine. A digraph with a directed cycle is rejected at construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .graph import validate_vertex
from .order import Topological
from .weighted import DirectedEdge, EdgeWeightedDigraph

logger = logging.getLogger(__name__)

__all__ = ["AcyclicSP", "AcyclicLP", "CriticalPathSchedule", "critical_path"]


class _SingleSourcePaths:
    """``dist_to``/``edge_to`` records shared by the single-source path finders."""

    _unreached: float

    def __init__(self, g: EdgeWeightedDigraph, s: int) -> None:
        self._V = g.V
        self._s = validate_vertex(s, g.V)
        self._dist_to = np.full(g.V, self._unreached, dtype=np.float64)
        self._edge_to: list[DirectedEdge | None] = [None] * g.V
        self._dist_to[self._s] = 0.0

    @property
    def source(self) -> int:
        return self._s

    def dist_to(self, v: int) -> float:
        return float(self._dist_to[validate_vertex(v, self._V)])

    def has_path_to(self, v: int) -> bool:
        return bool(self._dist_to[validate_vertex(v, self._V)] != self._unreached)

    def path_to(self, v: int) -> list[DirectedEdge] | None:
        v = validate_vertex(v, self._V)
        if self._dist_to[v] == self._unreached:
            return None
        path = []
        e = self._edge_to[v]
        while e is not None:
            path.append(e)
            e = self._edge_to[e.v]
        path.reverse()
        return path


class _AcyclicPaths(_SingleSourcePaths):
    def __init__(self, g: EdgeWeightedDigraph, s: int) -> None:
        super().__init__(g, s)
        topological = Topological(g)
        if not topological.has_order():
            raise ValueError("Digraph is not acyclic")
        for v in topological.order():
            for e in g.adj(v):
                self._relax(e)
        logger.debug(
            "%s from %d reaches %d of %d vertices",
            type(self).__name__, self._s, int(np.count_nonzero(self._dist_to != self._unreached)), g.V,
        )

    def _improves(self, candidate: float, current: float) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def _relax(self, e: DirectedEdge) -> None:
        dist_to = self._dist_to
        if dist_to[e.v] == self._unreached:
            return
        candidate = dist_to[e.v] + e.weight
        if self._improves(candidate, dist_to[e.w]):
            dist_to[e.w] = candidate
            self._edge_to[e.w] = e


class AcyclicSP(_AcyclicPaths):
    _unreached = np.inf

    def _improves(self, candidate: float, current: float) -> bool:
        return candidate < current


class AcyclicLP(_AcyclicPaths):
    _unreached = -np.inf

    def _improves(self, candidate: float, current: float) -> bool:
        return candidate > current


@dataclass
class CriticalPathSchedule:
    start_times: np.ndarray
    durations: np.ndarray
    finish_time: float
    critical_jobs: list[int]

    def finish_times(self) -> np.ndarray:
        return self.start_times + self.durations


def critical_path(
    durations: Sequence[float],
    precedences: Sequence[Sequence[int]],
) -> CriticalPathSchedule:
    """Parallel job scheduling with precedence constraints.

    ``precedences[i]`` lists the jobs that may only start once job ``i`` has
    finished. Job ``i`` becomes the edge ``i -> i+n`` weighted by its duration
    in a ``2n + 2`` vertex network whose longest paths from the source give the
    earliest start times.
    """
    durations_arr = np.asarray(durations, dtype=np.float64)
    n = int(durations_arr.size)
    if len(precedences) != n:
        raise ValueError("precedences must have one entry per job")
    if np.any(durations_arr < 0) or np.any(np.isnan(durations_arr)):
        raise ValueError("durations must be non-negative numbers")
    source = 2 * n
    sink = 2 * n + 1
    g = EdgeWeightedDigraph(2 * n + 2)
    for i in range(n):
        g.add_edge(DirectedEdge(source, i, 0.0))
        g.add_edge(DirectedEdge(i + n, sink, 0.0))
        g.add_edge(DirectedEdge(i, i + n, float(durations_arr[i])))
        for successor in precedences[i]:
            validate_vertex(successor, n)
            g.add_edge(DirectedEdge(n + i, int(successor), 0.0))
    try:
        lp = AcyclicLP(g, source)
    except ValueError:
        raise ValueError("precedence constraints contain a cycle") from None
    start_times = np.array([lp.dist_to(i) for i in range(n)], dtype=np.float64)
    finish = lp.dist_to(sink) if n else 0.0
    critical = [] if not n else [e.v for e in lp.path_to(sink) if e.v < n and e.w == e.v + n]
    return CriticalPathSchedule(
        start_times=start_times,
        durations=durations_arr,
        finish_time=float(finish),
        critical_jobs=critical,
    )
