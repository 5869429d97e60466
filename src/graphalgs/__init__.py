"""graphalgs: union-find and classic graph algorithms."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "UnionFind": "union_find",
    "QuickFindUF": "union_find",
    "QuickUnionUF": "union_find",
    "WeightedQuickUnionUF": "union_find",
    "Graph": "graph",
    "Digraph": "graph",
    "Edge": "weighted",
    "DirectedEdge": "weighted",
    "EdgeWeightedGraph": "weighted",
    "EdgeWeightedDigraph": "weighted",
    "AdjMatrixEdgeWeightedDigraph": "weighted",
    "DepthFirstSearch": "paths",
    "DirectedDFS": "paths",
    "DepthFirstPaths": "paths",
    "DepthFirstDirectedPaths": "paths",
    "BreadthFirstPaths": "paths",
    "BreadthFirstDirectedPaths": "paths",
    "Cycle": "cycle",
    "DirectedCycle": "cycle",
    "EdgeWeightedDirectedCycle": "cycle",
    "Bipartite": "cycle",
    "DepthFirstOrder": "order",
    "Topological": "order",
    "CC": "connectivity",
    "TransitiveClosure": "connectivity",
    "KosarajuSharirSCC": "scc",
    "TarjanSCC": "scc",
    "GabowSCC": "scc",
    "AcyclicSP": "dag_paths",
    "AcyclicLP": "dag_paths",
    "critical_path": "dag_paths",
    "DijkstraSP": "shortest_paths",
    "KruskalMST": "mst",
    "LazyPrimMST": "mst",
    "SymbolGraph": "symbol_graph",
    "SymbolDigraph": "symbol_graph",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(f"graphalgs.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module 'graphalgs' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
