"""Random and structured graph generators.

Every generator takes ``rng``: a ``numpy.random.Generator``, an integer seed or
``None`` for fresh entropy. Passing the same seed reproduces the same graph.
"""

from __future__ import annotations

import numpy as np

from .graph import Digraph, Graph
from .weighted import DirectedEdge, EdgeWeightedDigraph, as_generator

__all__ = [
    "simple",
    "erdos_renyi",
    "complete",
    "complete_bipartite",
    "bipartite",
    "path",
    "binary_tree",
    "cycle",
    "star",
    "wheel",
    "simple_digraph",
    "erdos_renyi_digraph",
    "complete_digraph",
    "dag",
    "tournament",
    "rooted_in_dag",
    "rooted_out_dag",
    "rooted_in_tree",
    "rooted_out_tree",
    "path_digraph",
    "binary_tree_digraph",
    "cycle_digraph",
    "strong",
    "edge_weighted_dag",
]

Rng = np.random.Generator | int | None


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError("Probability must be between 0 and 1")


def _pair(gen: np.random.Generator, V: int) -> tuple[int, int]:
    v, w = gen.integers(0, V, size=2)
    return int(v), int(w)


# undirected -----------------------------------------------------------------


def simple(V: int, E: int, rng: Rng = None) -> Graph:
    """``V`` vertices and ``E`` edges, no self-loops or parallel edges."""
    if E > V * (V - 1) // 2:
        raise ValueError("Too many edges")
    if E < 0:
        raise ValueError("Too few edges")
    gen = as_generator(rng)
    g = Graph(V)
    seen: set[tuple[int, int]] = set()
    while g.E < E:
        v, w = _pair(gen, V)
        key = (min(v, w), max(v, w))
        if v != w and key not in seen:
            seen.add(key)
            g.add_edge(v, w)
    return g


def erdos_renyi(V: int, p: float, rng: Rng = None) -> Graph:
    """Each of the ``V(V-1)/2`` possible edges independently with probability ``p``."""
    _check_probability(p)
    gen = as_generator(rng)
    g = Graph(V)
    for v in range(V):
        for w in range(v + 1, V):
            if gen.random() < p:
                g.add_edge(v, w)
    return g


def complete(V: int) -> Graph:
    g = Graph(V)
    for v in range(V):
        for w in range(v + 1, V):
            g.add_edge(v, w)
    return g


def complete_bipartite(V1: int, V2: int, rng: Rng = None) -> Graph:
    return bipartite(V1, V2, V1 * V2, rng)


def bipartite(V1: int, V2: int, E: int, rng: Rng = None) -> Graph:
    """Random simple bipartite graph with ``V1`` and ``V2`` vertices on each side."""
    if V1 < 0 or V2 < 0:
        raise ValueError("Number of vertices must be nonnegative")
    if E > V1 * V2:
        raise ValueError("Too many edges")
    if E < 0:
        raise ValueError("Too few edges")
    gen = as_generator(rng)
    vertices = gen.permutation(V1 + V2).tolist()
    g = Graph(V1 + V2)
    seen: set[tuple[int, int]] = set()
    while g.E < E:
        i = int(gen.integers(0, V1))
        j = V1 + int(gen.integers(0, V2))
        if (i, j) not in seen:
            seen.add((i, j))
            g.add_edge(vertices[i], vertices[j])
    return g


def path(V: int, rng: Rng = None) -> Graph:
    vertices = as_generator(rng).permutation(V).tolist()
    g = Graph(V)
    for i in range(V - 1):
        g.add_edge(vertices[i], vertices[i + 1])
    return g


def binary_tree(V: int, rng: Rng = None) -> Graph:
    vertices = as_generator(rng).permutation(V).tolist()
    g = Graph(V)
    for i in range(1, V):
        g.add_edge(vertices[i], vertices[(i - 1) // 2])
    return g


def cycle(V: int, rng: Rng = None) -> Graph:
    vertices = as_generator(rng).permutation(V).tolist()
    g = Graph(V)
    for i in range(V - 1):
        g.add_edge(vertices[i], vertices[i + 1])
    if V:
        g.add_edge(vertices[V - 1], vertices[0])
    return g


def star(V: int, rng: Rng = None) -> Graph:
    """One hub joined to ``V - 1`` leaves."""
    if V <= 0:
        raise ValueError("Number of vertices must be at least 1")
    vertices = as_generator(rng).permutation(V).tolist()
    g = Graph(V)
    for i in range(1, V):
        g.add_edge(vertices[0], vertices[i])
    return g


def wheel(V: int, rng: Rng = None) -> Graph:
    """A cycle on ``V - 1`` vertices plus a hub joined to all of them."""
    if V <= 1:
        raise ValueError("Number of vertices must be at least 2")
    vertices = as_generator(rng).permutation(V).tolist()
    g = Graph(V)
    for i in range(1, V - 1):
        g.add_edge(vertices[i], vertices[i + 1])
    g.add_edge(vertices[V - 1], vertices[1])
    for i in range(1, V):
        g.add_edge(vertices[0], vertices[i])
    return g


# directed -------------------------------------------------------------------


def simple_digraph(V: int, E: int, rng: Rng = None) -> Digraph:
    if E > V * (V - 1):
        raise ValueError("Too many edges")
    if E < 0:
        raise ValueError("Too few edges")
    gen = as_generator(rng)
    g = Digraph(V)
    seen: set[tuple[int, int]] = set()
    while g.E < E:
        v, w = _pair(gen, V)
        if v != w and (v, w) not in seen:
            seen.add((v, w))
            g.add_edge(v, w)
    return g


def erdos_renyi_digraph(V: int, p: float, rng: Rng = None) -> Digraph:
    _check_probability(p)
    gen = as_generator(rng)
    g = Digraph(V)
    for v in range(V):
        for w in range(V):
            if v != w and gen.random() < p:
                g.add_edge(v, w)
    return g


def complete_digraph(V: int) -> Digraph:
    g = Digraph(V)
    for v in range(V):
        for w in range(V):
            if v != w:
                g.add_edge(v, w)
    return g


def dag(V: int, E: int, rng: Rng = None) -> Digraph:
    """Random simple DAG; edges respect a hidden random topological order."""
    if E > V * (V - 1) // 2:
        raise ValueError("Too many edges")
    if E < 0:
        raise ValueError("Too few edges")
    gen = as_generator(rng)
    vertices = gen.permutation(V).tolist()
    g = Digraph(V)
    seen: set[tuple[int, int]] = set()
    while g.E < E:
        v, w = _pair(gen, V)
        if v < w and (v, w) not in seen:
            seen.add((v, w))
            g.add_edge(vertices[v], vertices[w])
    return g


def tournament(V: int, rng: Rng = None) -> Digraph:
    """Exactly one edge, in a random direction, between every pair of vertices."""
    gen = as_generator(rng)
    g = Digraph(V)
    for v in range(V):
        for w in range(v + 1, V):
            if gen.random() < 0.5:
                g.add_edge(v, w)
            else:
                g.add_edge(w, v)
    return g


def _rooted_dag(V: int, E: int, rng: Rng, into_root: bool) -> Digraph:
    if E > V * (V - 1) // 2:
        raise ValueError("Too many edges")
    if E < V - 1:
        raise ValueError("Too few edges")
    gen = as_generator(rng)
    vertices = gen.permutation(V).tolist()
    g = Digraph(V)
    seen: set[tuple[int, int]] = set()

    def add(lo: int, hi: int) -> None:
        seen.add((lo, hi))
        if into_root:
            g.add_edge(vertices[lo], vertices[hi])
        else:
            g.add_edge(vertices[hi], vertices[lo])

    # one edge per vertex towards (or from) the root vertices[V-1]
    for v in range(V - 1):
        add(v, int(gen.integers(v + 1, V)))
    while g.E < E:
        v, w = _pair(gen, V)
        if v < w and (v, w) not in seen:
            add(v, w)
    return g


def rooted_in_dag(V: int, E: int, rng: Rng = None) -> Digraph:
    """DAG in which every vertex reaches a single sink (the root)."""
    return _rooted_dag(V, E, rng, into_root=True)


def rooted_out_dag(V: int, E: int, rng: Rng = None) -> Digraph:
    """DAG in which a single source (the root) reaches every vertex."""
    return _rooted_dag(V, E, rng, into_root=False)


def rooted_in_tree(V: int, rng: Rng = None) -> Digraph:
    return rooted_in_dag(V, V - 1, rng)


def rooted_out_tree(V: int, rng: Rng = None) -> Digraph:
    return rooted_out_dag(V, V - 1, rng)


def path_digraph(V: int, rng: Rng = None) -> Digraph:
    vertices = as_generator(rng).permutation(V).tolist()
    g = Digraph(V)
    for i in range(V - 1):
        g.add_edge(vertices[i], vertices[i + 1])
    return g


def binary_tree_digraph(V: int, rng: Rng = None) -> Digraph:
    """Complete binary tree with every edge pointing towards the root."""
    vertices = as_generator(rng).permutation(V).tolist()
    g = Digraph(V)
    for i in range(1, V):
        g.add_edge(vertices[i], vertices[(i - 1) // 2])
    return g


def cycle_digraph(V: int, rng: Rng = None) -> Digraph:
    vertices = as_generator(rng).permutation(V).tolist()
    g = Digraph(V)
    for i in range(V - 1):
        g.add_edge(vertices[i], vertices[i + 1])
    if V:
        g.add_edge(vertices[V - 1], vertices[0])
    return g


def strong(V: int, E: int, c: int, rng: Rng = None) -> Digraph:
    """Random simple digraph with exactly ``c`` strong components.

    Each component is a rooted in-tree plus a rooted out-tree sharing a root;
    the remaining edges only go from lower to equal or higher component labels,
    so components never merge.
    """
    if c >= V or c <= 0:
        raise ValueError("Number of components must be between 1 and V")
    if E <= 2 * (V - c):
        raise ValueError("Number of edges must be at least 2(V-c)")
    if E > V * (V - 1) // 2:
        raise ValueError("Too many edges")
    gen = as_generator(rng)
    label = gen.integers(0, c, size=V)
    # every label gets at least one vertex
    label[gen.permutation(V)[:c]] = np.arange(c)
    g = Digraph(V)
    seen: set[tuple[int, int]] = set()

    def add(v: int, w: int) -> None:
        seen.add((v, w))
        g.add_edge(v, w)

    for i in range(c):
        members = np.flatnonzero(label == i)
        vertices = gen.permutation(members).tolist()
        count = len(vertices)
        for k in range(count - 1):
            j = int(gen.integers(k + 1, count))
            add(vertices[j], vertices[k])
        for k in range(count - 1):
            j = int(gen.integers(k + 1, count))
            if (vertices[k], vertices[j]) not in seen:
                add(vertices[k], vertices[j])
    while g.E < E:
        v, w = _pair(gen, V)
        if v != w and (v, w) not in seen and label[v] <= label[w]:
            add(v, w)
    return g


def edge_weighted_dag(V: int, E: int, rng: Rng = None) -> EdgeWeightedDigraph:
    """Random DAG shape from :func:`dag` with uniform ``[0, 1)`` weights."""
    gen = as_generator(rng)
    shape = dag(V, E, gen)
    g = EdgeWeightedDigraph(V)
    for v, w in shape.edges():
        g.add_edge(DirectedEdge(v, w, float(gen.random())))
    return g
