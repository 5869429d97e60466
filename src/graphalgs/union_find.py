"""Disjoint-set (union-find) structures over the sites ``0 .. n-1``.

``UnionFind`` is the one to use: path halving plus union by rank. The other
three are the classical reference variants (quick-find, quick-union and
size-weighted quick-union) and are kept for comparison.
"""

from __future__ import annotations

import logging
import operator
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)

__all__ = [
    "DisjointSet",
    "UnionFind",
    "QuickFindUF",
    "QuickUnionUF",
    "WeightedQuickUnionUF",
    "components",
]


@runtime_checkable
class DisjointSet(Protocol):
    @property
    def count(self) -> int: ...

    def __len__(self) -> int: ...

    def find(self, p: int) -> int: ...

    def union(self, p: int, q: int) -> bool: ...

    def connected(self, p: int, q: int) -> bool: ...


class _Sites:
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of sites must be non-negative")
        self._n = int(n)
        self._count = int(n)

    def __len__(self) -> int:
        return self._n

    @property
    def count(self) -> int:
        return self._count

    def _validate(self, p: int) -> int:
        try:
            p = operator.index(p)
        except TypeError:
            raise TypeError(f"index {p!r} is not an integer") from None
        if p < 0 or p >= self._n:
            raise IndexError(f"index {p} is not between 0 and {self._n - 1}")
        return p

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def find(self, p: int) -> int:  # pragma: no cover - overridden
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, count={self._count})"


class UnionFind(_Sites):
    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.parent = np.arange(self._n, dtype=np.int64)
        self._rank = np.zeros(self._n, dtype=np.int8)

    def find(self, p: int) -> int:
        p = self._validate(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = int(parent[p])
        return p

    def union(self, p: int, q: int) -> bool:
        rp = self.find(p)
        rq = self.find(q)
        if rp == rq:
            return False
        rank = self._rank
        if rank[rp] < rank[rq]:
            self.parent[rp] = rq
        elif rank[rp] > rank[rq]:
            self.parent[rq] = rp
        else:
            self.parent[rq] = rp
            rank[rp] += 1
        self._count -= 1
        return True


class QuickFindUF(_Sites):
    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.id = np.arange(self._n, dtype=np.int64)

    def find(self, p: int) -> int:
        return int(self.id[self._validate(p)])

    def union(self, p: int, q: int) -> bool:
        pid = self.find(p)
        qid = self.find(q)
        if pid == qid:
            return False
        self.id[self.id == pid] = qid
        self._count -= 1
        return True


class QuickUnionUF(_Sites):
    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.parent = np.arange(self._n, dtype=np.int64)

    def find(self, p: int) -> int:
        p = self._validate(p)
        parent = self.parent
        while parent[p] != p:
            p = int(parent[p])
        return p

    def union(self, p: int, q: int) -> bool:
        rp = self.find(p)
        rq = self.find(q)
        if rp == rq:
            return False
        self.parent[rp] = rq
        self._count -= 1
        return True


class WeightedQuickUnionUF(_Sites):
    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.parent = np.arange(self._n, dtype=np.int64)
        self._size = np.ones(self._n, dtype=np.int64)

    def find(self, p: int) -> int:
        p = self._validate(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = int(parent[p])
        return p

    def union(self, p: int, q: int) -> bool:
        rp = self.find(p)
        rq = self.find(q)
        if rp == rq:
            return False
        size = self._size
        if size[rp] < size[rq]:
            rp, rq = rq, rp
        self.parent[rq] = rp
        size[rp] += size[rq]
        self._count -= 1
        return True

    def component_size(self, p: int) -> int:
        return int(self._size[self.find(p)])


def components(uf: DisjointSet) -> list[list[int]]:
    """Group the sites of ``uf`` by representative, in order of first site."""
    groups: dict[int, list[int]] = {}
    for p in range(len(uf)):
        groups.setdefault(uf.find(p), []).append(p)
    logger.debug("union-find with %d sites has %d components", len(uf), len(groups))
    return list(groups.values())
