"""Weighted edges and the edge-weighted graph types."""

from __future__ import annotations

import math
import operator
import os
from typing import Iterator

import numpy as np

from .graph import validate_vertex
from .readers import TokenReader, read_text

__all__ = [
    "Edge",
    "DirectedEdge",
    "EdgeWeightedGraph",
    "EdgeWeightedDigraph",
    "AdjMatrixEdgeWeightedDigraph",
    "as_generator",
]


def as_generator(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _check_endpoints(v: int, w: int, weight: float) -> tuple[int, int, float]:
    try:
        v = operator.index(v)
        w = operator.index(w)
    except TypeError:
        raise TypeError(f"vertex names must be integers, got {v!r} and {w!r}") from None
    if v < 0 or w < 0:
        raise IndexError("Vertex names must be nonnegative integers")
    weight = float(weight)
    if math.isnan(weight):
        raise ValueError("Weight is NaN")
    return v, w, weight


class Edge:
    """Undirected weighted edge. Edges order by weight and compare by identity."""

    __slots__ = ("_v", "_w", "weight")

    def __init__(self, v: int, w: int, weight: float) -> None:
        self._v, self._w, self.weight = _check_endpoints(v, w, weight)

    def either(self) -> int:
        return self._v

    def other(self, vertex: int) -> int:
        if vertex == self._v:
            return self._w
        if vertex == self._w:
            return self._v
        raise ValueError(f"Illegal endpoint {vertex} for edge {self}")

    def __lt__(self, other: Edge) -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"{self._v}-{self._w} {self.weight:.5f}"

    def __repr__(self) -> str:
        return f"Edge({self._v}, {self._w}, {self.weight!r})"


class DirectedEdge:
    __slots__ = ("v", "w", "weight")

    def __init__(self, v: int, w: int, weight: float) -> None:
        self.v, self.w, self.weight = _check_endpoints(v, w, weight)

    def from_(self) -> int:
        return self.v

    def to(self) -> int:
        return self.w

    def __lt__(self, other: DirectedEdge) -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"{self.v}->{self.w} {self.weight:.2f}"

    def __repr__(self) -> str:
        return f"DirectedEdge({self.v}, {self.w}, {self.weight!r})"


class _EdgeLists:
    def __init__(self, V: int) -> None:
        if V < 0:
            raise ValueError("Number of vertices must be nonnegative")
        self._V = int(V)
        self._E = 0
        self._adj: list[list] = [[] for _ in range(self._V)]

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    def _validate(self, v: int) -> int:
        return validate_vertex(v, self._V)

    @classmethod
    def parse(cls, text: str):
        """Build a graph from ``V``, ``E`` and ``E`` triples ``v w weight``."""
        reader = TokenReader(text)
        g = cls(reader.read_count("vertices"))
        n_edges = reader.read_count("edges")
        for _ in range(n_edges):
            v = reader.read_int()
            w = reader.read_int()
            weight = reader.read_float()
            g._add_triple(v, w, weight)
        return g

    @classmethod
    def read(cls, path: str | os.PathLike[str]):
        return cls.parse(read_text(path))

    @classmethod
    def random(cls, V: int, E: int, rng: np.random.Generator | int | None = None):
        """``E`` uniformly random edges with weights rounded to two decimals."""
        if E < 0:
            raise ValueError("Number of edges must be nonnegative")
        g = cls(V)
        if E and not V:
            raise ValueError("cannot place edges in a graph without vertices")
        gen = as_generator(rng)
        ends = gen.integers(0, V, size=(E, 2)) if E else np.empty((0, 2), dtype=np.int64)
        weights = np.round(100 * gen.random(E)) / 100.0
        for (v, w), weight in zip(ends.tolist(), weights.tolist()):
            g._add_triple(v, w, weight)
        return g

    def _add_triple(self, v: int, w: int, weight: float) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def adj(self, v: int) -> tuple:
        return tuple(self._adj[self._validate(v)])

    def __str__(self) -> str:
        lines = [f"{self._V} {self._E}"]
        for v in range(self._V):
            lines.append(f"{v}: " + "  ".join(str(e) for e in self._adj[v]))
        return "\n".join(lines) + "\n"


class EdgeWeightedGraph(_EdgeLists):
    def _add_triple(self, v: int, w: int, weight: float) -> None:
        self.add_edge(Edge(v, w, weight))

    def add_edge(self, e: Edge) -> None:
        v = e.either()
        w = e.other(v)
        self._validate(v)
        self._validate(w)
        self._adj[v].append(e)
        self._adj[w].append(e)
        self._E += 1

    def adj(self, v: int) -> tuple[Edge, ...]:
        return super().adj(v)

    def neighbors(self, v: int) -> tuple[int, ...]:
        v = self._validate(v)
        return tuple(e.other(v) for e in self._adj[v])

    def degree(self, v: int) -> int:
        return len(self._adj[self._validate(v)])

    def edges(self) -> list[Edge]:
        out: list[Edge] = []
        for v in range(self._V):
            self_loops = 0
            for e in self._adj[v]:
                w = e.other(v)
                if w > v:
                    out.append(e)
                elif w == v:
                    if self_loops % 2 == 0:
                        out.append(e)
                    self_loops += 1
        return out

    def copy(self) -> EdgeWeightedGraph:
        g = EdgeWeightedGraph(self._V)
        g._E = self._E
        g._adj = [list(lst) for lst in self._adj]
        return g

    def __repr__(self) -> str:
        return f"EdgeWeightedGraph(V={self._V}, E={self._E})"


class EdgeWeightedDigraph(_EdgeLists):
    def __init__(self, V: int) -> None:
        super().__init__(V)
        self._indegree = np.zeros(self._V, dtype=np.int64)

    def _add_triple(self, v: int, w: int, weight: float) -> None:
        self._validate(v)
        self._validate(w)
        self.add_edge(DirectedEdge(v, w, weight))

    def add_edge(self, e: DirectedEdge) -> None:
        v = self._validate(e.v)
        w = self._validate(e.w)
        self._adj[v].append(e)
        self._indegree[w] += 1
        self._E += 1

    def adj(self, v: int) -> tuple[DirectedEdge, ...]:
        return super().adj(v)

    def neighbors(self, v: int) -> tuple[int, ...]:
        return tuple(e.w for e in self._adj[self._validate(v)])

    def out_degree(self, v: int) -> int:
        return len(self._adj[self._validate(v)])

    def in_degree(self, v: int) -> int:
        return int(self._indegree[self._validate(v)])

    def edges(self) -> list[DirectedEdge]:
        return [e for lst in self._adj for e in lst]

    def reverse(self) -> EdgeWeightedDigraph:
        r = EdgeWeightedDigraph(self._V)
        for e in self.edges():
            r.add_edge(DirectedEdge(e.w, e.v, e.weight))
        return r

    def copy(self) -> EdgeWeightedDigraph:
        g = EdgeWeightedDigraph(self._V)
        g._E = self._E
        g._adj = [list(lst) for lst in self._adj]
        g._indegree = self._indegree.copy()
        return g

    def __repr__(self) -> str:
        return f"EdgeWeightedDigraph(V={self._V}, E={self._E})"


class AdjMatrixEdgeWeightedDigraph:
    """Dense edge-weighted digraph: at most one edge per ordered pair.

    Weights live in a ``V x V`` float matrix with NaN marking absent edges.
    """

    def __init__(self, V: int) -> None:
        if V < 0:
            raise ValueError("Number of vertices must be nonnegative")
        self._V = int(V)
        self._E = 0
        self.weights = np.full((self._V, self._V), np.nan, dtype=np.float64)

    @classmethod
    def random(
        cls, V: int, E: int, rng: np.random.Generator | int | None = None
    ) -> AdjMatrixEdgeWeightedDigraph:
        if E < 0:
            raise ValueError("Number of edges must be nonnegative")
        if E > V * V:
            raise ValueError("Too many edges")
        g = cls(V)
        gen = as_generator(rng)
        while g.E != E:
            v, w = (int(x) for x in gen.integers(0, V, size=2))
            weight = round(100 * float(gen.random())) / 100.0
            g.add_edge(DirectedEdge(v, w, weight))
        return g

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    def add_edge(self, e: DirectedEdge) -> None:
        v = validate_vertex(e.v, self._V)
        w = validate_vertex(e.w, self._V)
        if np.isnan(self.weights[v, w]):
            self.weights[v, w] = e.weight
            self._E += 1

    def has_edge(self, v: int, w: int) -> bool:
        return not np.isnan(self.weights[validate_vertex(v, self._V), validate_vertex(w, self._V)])

    def adj(self, v: int) -> Iterator[DirectedEdge]:
        row = self.weights[validate_vertex(v, self._V)]
        for w in np.flatnonzero(~np.isnan(row)).tolist():
            yield DirectedEdge(v, w, float(row[w]))

    def neighbors(self, v: int) -> tuple[int, ...]:
        row = self.weights[validate_vertex(v, self._V)]
        return tuple(np.flatnonzero(~np.isnan(row)).tolist())

    def to_digraph(self) -> EdgeWeightedDigraph:
        g = EdgeWeightedDigraph(self._V)
        for v in range(self._V):
            for e in self.adj(v):
                g.add_edge(e)
        return g

    def __str__(self) -> str:
        lines = [f"{self._V} {self._E}"]
        for v in range(self._V):
            lines.append(f"{v}: " + "  ".join(str(e) for e in self.adj(v)))
        return "\n".join(lines) + "\n"
