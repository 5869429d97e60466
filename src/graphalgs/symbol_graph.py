"""Graphs whose vertices are named by strings instead of integers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from .graph import Digraph, Graph, validate_vertex
from .paths import BreadthFirstPaths

logger = logging.getLogger(__name__)

__all__ = ["SymbolGraph", "SymbolDigraph", "degrees_of_separation"]


class _SymbolTable:
    _graph_type: type

    def __init__(self, rows: list[list[str]]) -> None:
        self._index: dict[str, int] = {}
        for row in rows:
            for name in row:
                self._index.setdefault(name, len(self._index))
        self._keys = list(self._index)
        self._graph = self._graph_type(len(self._keys))
        for row in rows:
            v = self._index[row[0]]
            for name in row[1:]:
                self._graph.add_edge(v, self._index[name])
        logger.debug("%s: %d names, %d edges", type(self).__name__, self._graph.V, self._graph.E)

    @classmethod
    def parse(cls, lines: Iterable[str], delimiter: str = " "):
        """Each line names a vertex followed by the vertices it is joined to."""
        rows = []
        for line in lines:
            line = line.rstrip("\r\n")
            if line:
                rows.append(line.split(delimiter))
        return cls(rows)

    @classmethod
    def read(cls, path: str | os.PathLike[str], delimiter: str = " "):
        return cls.parse(Path(path).read_text(encoding="utf-8").splitlines(), delimiter)

    @property
    def graph(self):
        return self._graph

    def contains(self, name: str) -> bool:
        return name in self._index

    __contains__ = contains

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"{name!r} is not a vertex name") from None

    def name_of(self, v: int) -> str:
        return self._keys[validate_vertex(v, len(self._keys))]

    def __len__(self) -> int:
        return len(self._keys)


class SymbolGraph(_SymbolTable):
    _graph_type = Graph


class SymbolDigraph(_SymbolTable):
    _graph_type = Digraph


def degrees_of_separation(sg: SymbolGraph | SymbolDigraph, source: str, sink: str) -> list[str] | None:
    """Names along a shortest path from ``source`` to ``sink``, or ``None``."""
    s = sg.index_of(source)
    t = sg.index_of(sink)
    bfs = BreadthFirstPaths(sg.graph, s)
    path = bfs.path_to(t)
    if path is None:
        return None
    return [sg.name_of(v) for v in path]
