"""Strongly connected components: Kosaraju-Sharir, Tarjan and Gabow.

The three classes share one query surface and must agree on the partition of
the vertices for every digraph (component ids may differ). Each runs in
``O(V + E)`` with an explicit search stack.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import numpy as np

from . import _config
from .connectivity import TransitiveClosure
from .graph import Digraph, validate_vertex
from .order import DepthFirstOrder

logger = logging.getLogger(__name__)

__all__ = [
    "StronglyConnectedComponents",
    "KosarajuSharirSCC",
    "TarjanSCC",
    "GabowSCC",
    "SCC_ALGORITHMS",
    "check_strong_components",
]


@runtime_checkable
class StronglyConnectedComponents(Protocol):
    @property
    def count(self) -> int: ...

    def id(self, v: int) -> int: ...

    def strongly_connected(self, v: int, w: int) -> bool: ...

    def components(self) -> list[list[int]]: ...


class _ComponentIds:
    def __init__(self, g: Digraph) -> None:
        self._V = g.V
        self._id = np.full(g.V, -1, dtype=np.int64)
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def id(self, v: int) -> int:
        return int(self._id[validate_vertex(v, self._V)])

    def strongly_connected(self, v: int, w: int) -> bool:
        return self.id(v) == self.id(w)

    def components(self) -> list[list[int]]:
        groups: list[list[int]] = [[] for _ in range(self._count)]
        for v, c in enumerate(self._id.tolist()):
            groups[c].append(v)
        return groups

    def _finish(self, g: Digraph, check: bool | None) -> None:
        logger.debug("%s found %d strong components in %r", type(self).__name__, self._count, g)
        if _config.checks_enabled(check):
            assert check_strong_components(self, g), "strong components disagree with transitive closure"


class KosarajuSharirSCC(_ComponentIds):
    """Two passes: reverse postorder of the reversed digraph, then plain DFS."""

    def __init__(self, g: Digraph, *, check: bool | None = None) -> None:
        super().__init__(g)
        ids = self._id
        for root in DepthFirstOrder(g.reverse()).reverse_postorder():
            if ids[root] != -1:
                continue
            ids[root] = self._count
            stack = [root]
            while stack:
                v = stack.pop()
                for w in g.neighbors(v):
                    if ids[w] == -1:
                        ids[w] = self._count
                        stack.append(w)
            self._count += 1
        self._finish(g, check)


class TarjanSCC(_ComponentIds):
    """Single pass with preorder numbers and low links.

    Vertices whose component has been emitted get ``low = V`` so they no
    longer pull an ancestor's low link down.
    """

    def __init__(self, g: Digraph, *, check: bool | None = None) -> None:
        super().__init__(g)
        self._marked = np.zeros(g.V, dtype=bool)
        self._low = np.zeros(g.V, dtype=np.int64)
        self._pre = 0
        self._stack: list[int] = []
        for v in range(g.V):
            if not self._marked[v]:
                self._dfs(g, v)
        del self._marked, self._low, self._stack
        self._finish(g, check)

    def _enter(self, v: int) -> int:
        self._marked[v] = True
        self._low[v] = self._pre
        self._pre += 1
        self._stack.append(v)
        return int(self._low[v])

    def _dfs(self, g: Digraph, root: int) -> None:
        low = self._low
        # frame: [vertex, neighbour iterator, smallest low link seen so far]
        frames = [[root, iter(g.neighbors(root)), self._enter(root)]]
        while frames:
            frame = frames[-1]
            v, it = frame[0], frame[1]
            for w in it:
                if not self._marked[w]:
                    frames.append([w, iter(g.neighbors(w)), self._enter(w)])
                    break
                if low[w] < frame[2]:
                    frame[2] = int(low[w])
            else:
                frames.pop()
                if frame[2] < low[v]:
                    low[v] = frame[2]
                else:
                    while True:
                        w = self._stack.pop()
                        self._id[w] = self._count
                        low[w] = g.V
                        if w == v:
                            break
                    self._count += 1
                if frames and low[v] < frames[-1][2]:
                    frames[-1][2] = int(low[v])


class GabowSCC(_ComponentIds):
    """Single pass with a path stack and a stack of candidate component roots."""

    def __init__(self, g: Digraph, *, check: bool | None = None) -> None:
        super().__init__(g)
        self._marked = np.zeros(g.V, dtype=bool)
        self._preorder = np.zeros(g.V, dtype=np.int64)
        self._pre = 0
        self._path: list[int] = []
        self._roots: list[int] = []
        for v in range(g.V):
            if not self._marked[v]:
                self._dfs(g, v)
        del self._marked, self._path, self._roots
        self._finish(g, check)

    def _enter(self, v: int) -> None:
        self._marked[v] = True
        self._preorder[v] = self._pre
        self._pre += 1
        self._path.append(v)
        self._roots.append(v)

    def _dfs(self, g: Digraph, root: int) -> None:
        preorder = self._preorder
        roots = self._roots
        self._enter(root)
        frames = [(root, iter(g.neighbors(root)))]
        while frames:
            v, it = frames[-1]
            for w in it:
                if not self._marked[w]:
                    self._enter(w)
                    frames.append((w, iter(g.neighbors(w))))
                    break
                if self._id[w] == -1:
                    # w is on the path: collapse the roots above it
                    while preorder[roots[-1]] > preorder[w]:
                        roots.pop()
            else:
                frames.pop()
                if roots[-1] == v:
                    roots.pop()
                    while True:
                        w = self._path.pop()
                        self._id[w] = self._count
                        if w == v:
                            break
                    self._count += 1


SCC_ALGORITHMS: dict[str, type[_ComponentIds]] = {
    "kosaraju": KosarajuSharirSCC,
    "tarjan": TarjanSCC,
    "gabow": GabowSCC,
}


def check_strong_components(scc: StronglyConnectedComponents, g: Digraph) -> bool:
    """``strongly_connected(v, w)`` must equal mutual reachability for every pair."""
    reach = TransitiveClosure(g).matrix()
    mutual = reach & reach.T
    ids = np.fromiter((scc.id(v) for v in range(g.V)), count=g.V, dtype=np.int64)
    same = ids[:, None] == ids[None, :]
    bad = np.argwhere(same != mutual)
    if bad.size:
        v, w = (int(x) for x in bad[0])
        logger.error(
            "%s: strongly_connected(%d, %d) = %s but mutual reachability = %s",
            type(scc).__name__, v, w, bool(same[v, w]), bool(mutual[v, w]),
        )
        return False
    return True
