"""Adjacency-list graphs over the integer vertices ``0 .. V-1``."""

from __future__ import annotations

import operator
import os
from typing import Iterator, Protocol

import numpy as np

from .readers import TokenReader, read_text

__all__ = [
    "AdjacencyGraph",
    "Graph",
    "Digraph",
    "validate_vertex",
    "max_degree",
    "average_degree",
    "number_of_self_loops",
]


class AdjacencyGraph(Protocol):
    """Anything traversable by vertex: undirected, directed or weighted."""

    @property
    def V(self) -> int: ...

    def neighbors(self, v: int) -> tuple[int, ...]: ...


def validate_vertex(v: int, n_vertices: int) -> int:
    """Return ``v`` as a plain int; floats and other non-integers are rejected."""
    try:
        v = operator.index(v)
    except TypeError:
        raise TypeError(f"vertex {v!r} is not an integer") from None
    if v < 0 or v >= n_vertices:
        raise IndexError(f"vertex {v} is not between 0 and {n_vertices - 1}")
    return v


class _AdjacencyLists:
    def __init__(self, V: int) -> None:
        if V < 0:
            raise ValueError("Number of vertices must be nonnegative")
        self._V = int(V)
        self._E = 0
        self._adj: list[list[int]] = [[] for _ in range(self._V)]

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    def _validate(self, v: int) -> int:
        return validate_vertex(v, self._V)

    def adj(self, v: int) -> tuple[int, ...]:
        return tuple(self._adj[self._validate(v)])

    def neighbors(self, v: int) -> tuple[int, ...]:
        return self.adj(v)

    def _copy_into(self, other: _AdjacencyLists) -> None:
        other._E = self._E
        other._adj = [list(lst) for lst in self._adj]

    @classmethod
    def _from_reader(cls, reader: TokenReader):
        g = cls(reader.read_count("vertices"))
        n_edges = reader.read_count("edges")
        for _ in range(n_edges):
            v = reader.read_int()
            w = reader.read_int()
            g.add_edge(v, w)
        return g

    @classmethod
    def parse(cls, text: str):
        """Build a graph from ``V``, ``E`` and ``E`` whitespace-separated vertex pairs."""
        return cls._from_reader(TokenReader(text))

    @classmethod
    def read(cls, path: str | os.PathLike[str]):
        return cls.parse(read_text(path))

    def add_edge(self, v: int, w: int) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def __str__(self) -> str:
        lines = [f"{self._V} vertices, {self._E} edges"]
        for v in range(self._V):
            lines.append(f"{v}: " + " ".join(str(w) for w in self._adj[v]))
        return "\n".join(lines) + "\n"


class Graph(_AdjacencyLists):
    """Undirected graph. Self-loops and parallel edges are allowed."""

    def add_edge(self, v: int, w: int) -> None:
        v = self._validate(v)
        w = self._validate(w)
        self._E += 1
        self._adj[v].append(w)
        self._adj[w].append(v)

    def degree(self, v: int) -> int:
        return len(self._adj[self._validate(v)])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Each edge once as ``(v, w)`` with ``v <= w``."""
        for v in range(self._V):
            self_loops = 0
            for w in self._adj[v]:
                if w > v:
                    yield v, w
                elif w == v:
                    # a self-loop appears twice in adj[v]
                    if self_loops % 2 == 0:
                        yield v, v
                    self_loops += 1

    def copy(self) -> Graph:
        g = Graph(self._V)
        self._copy_into(g)
        return g

    def __repr__(self) -> str:
        return f"Graph(V={self._V}, E={self._E})"


class Digraph(_AdjacencyLists):
    """Directed graph; ``adj(v)`` holds the out-neighbours of ``v``."""

    def __init__(self, V: int) -> None:
        super().__init__(V)
        self._indegree = np.zeros(self._V, dtype=np.int64)

    def add_edge(self, v: int, w: int) -> None:
        v = self._validate(v)
        w = self._validate(w)
        self._adj[v].append(w)
        self._indegree[w] += 1
        self._E += 1

    def out_degree(self, v: int) -> int:
        return len(self._adj[self._validate(v)])

    def in_degree(self, v: int) -> int:
        return int(self._indegree[self._validate(v)])

    def edges(self) -> Iterator[tuple[int, int]]:
        for v in range(self._V):
            for w in self._adj[v]:
                yield v, w

    def reverse(self) -> Digraph:
        r = Digraph(self._V)
        for v in range(self._V):
            for w in self._adj[v]:
                r.add_edge(w, v)
        return r

    def copy(self) -> Digraph:
        g = Digraph(self._V)
        self._copy_into(g)
        g._indegree = self._indegree.copy()
        return g

    def __repr__(self) -> str:
        return f"Digraph(V={self._V}, E={self._E})"


def max_degree(g: Graph) -> int:
    return max((g.degree(v) for v in range(g.V)), default=0)


def average_degree(g: Graph) -> float:
    if g.V == 0:
        return 0.0
    return 2.0 * g.E / g.V


def number_of_self_loops(g: Graph) -> int:
    return sum(1 for v, w in g.edges() if v == w)
