import numpy as np
import pytest

from graphalgs.union_find import (
    QuickFindUF,
    QuickUnionUF,
    UnionFind,
    WeightedQuickUnionUF,
    components,
)

ALL_UF = [UnionFind, QuickFindUF, QuickUnionUF, WeightedQuickUnionUF]

TINY_PAIRS = [(4, 3), (3, 8), (6, 5), (9, 4), (2, 1), (8, 9), (5, 0), (7, 2), (6, 1), (1, 0), (6, 7)]


@pytest.mark.parametrize("cls", ALL_UF)
def test_tiny_sequence_leaves_two_components(cls):
    uf = cls(10)
    merged = [uf.union(p, q) for p, q in TINY_PAIRS]
    assert merged == [True, True, True, True, True, False, True, True, True, False, False]
    assert uf.count == 2
    assert uf.connected(0, 7)
    assert uf.connected(3, 9)
    assert not uf.connected(0, 3)
    assert sorted(sorted(c) for c in components(uf)) == [[0, 1, 2, 5, 6, 7], [3, 4, 8, 9]]


@pytest.mark.parametrize("cls", ALL_UF)
def test_union_is_idempotent_and_self_union_is_noop(cls):
    uf = cls(3)
    assert not uf.union(1, 1)
    assert uf.count == 3
    assert uf.union(0, 2)
    assert not uf.union(2, 0)
    assert uf.count == 2
    assert uf.find(0) == uf.find(2)


@pytest.mark.parametrize("cls", ALL_UF)
def test_zero_sites(cls):
    uf = cls(0)
    assert uf.count == 0
    assert len(uf) == 0
    assert components(uf) == []


@pytest.mark.parametrize("cls", ALL_UF)
def test_bad_arguments(cls):
    with pytest.raises(ValueError):
        cls(-1)
    uf = cls(4)
    with pytest.raises(IndexError):
        uf.find(4)
    with pytest.raises(IndexError):
        uf.union(-1, 0)
    with pytest.raises(IndexError):
        uf.connected(0, 10)
    with pytest.raises(TypeError):
        uf.union(0.5, 1)
    with pytest.raises(TypeError):
        uf.find(2.0)
    assert uf.count == 4


@pytest.mark.parametrize("cls", ALL_UF)
def test_transitive_union_leaves_untouched_site_apart(cls):
    uf = cls(5)
    for p, q in [(0, 1), (2, 3), (1, 2)]:
        assert uf.union(p, q)
    assert uf.count == 2
    assert uf.connected(0, 3)
    assert not uf.connected(0, 4)


@pytest.mark.parametrize("cls", ALL_UF)
def test_random_unions_agree_with_union_find(cls):
    rng = np.random.default_rng(0)
    n = 60
    reference = UnionFind(n)
    uf = cls(n)
    for p, q in rng.integers(0, n, size=(80, 2)).tolist():
        assert uf.union(p, q) == reference.union(p, q)
        assert uf.count == reference.count
    for p in range(n):
        for q in range(n):
            assert uf.connected(p, q) == reference.connected(p, q)


def test_weighted_component_size():
    uf = WeightedQuickUnionUF(5)
    uf.union(0, 1)
    uf.union(2, 1)
    assert uf.component_size(0) == 3
    assert uf.component_size(4) == 1


def test_union_by_rank_keeps_trees_shallow():
    n = 1024
    uf = UnionFind(n)
    step = 1
    while step < n:
        for p in range(0, n, 2 * step):
            uf.union(p, p + step)
        step *= 2
    assert uf.count == 1
    depth = 0
    p = n - 1
    while uf.parent[p] != p:
        p = int(uf.parent[p])
        depth += 1
    assert depth <= 10


def test_repr_reports_counts():
    uf = QuickUnionUF(3)
    uf.union(0, 1)
    assert repr(uf) == "QuickUnionUF(n=3, count=2)"
