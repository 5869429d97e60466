import numpy as np
import pytest

from graphalgs import generators
from graphalgs.connectivity import CC, TransitiveClosure
from graphalgs.cycle import Bipartite, Cycle, DirectedCycle
from graphalgs.graph import max_degree, number_of_self_loops
from graphalgs.scc import KosarajuSharirSCC


def _undirected_pairs(g):
    return sorted(g.edges())


def test_seed_reproduces_graph():
    a = generators.simple(12, 20, rng=42)
    b = generators.simple(12, 20, rng=np.random.default_rng(42))
    assert _undirected_pairs(a) == _undirected_pairs(b)
    c = generators.simple(12, 20, rng=43)
    assert _undirected_pairs(a) != _undirected_pairs(c)


def test_simple_graph_has_no_loops_or_parallel_edges():
    g = generators.simple(15, 60, rng=0)
    assert g.E == 60
    assert number_of_self_loops(g) == 0
    assert len(set(g.edges())) == g.E


def test_erdos_renyi_extremes():
    assert generators.erdos_renyi(10, 0.0, rng=0).E == 0
    assert generators.erdos_renyi(10, 1.0, rng=0).E == 45
    assert generators.erdos_renyi_digraph(6, 1.0, rng=0).E == 30


def test_structured_graphs():
    assert generators.complete(6).E == 15
    assert generators.path(7, rng=0).E == 6
    assert CC(generators.path(7, rng=0)).count == 1
    assert generators.binary_tree(15, rng=0).E == 14
    assert not Cycle(generators.binary_tree(15, rng=0)).has_cycle()
    assert generators.cycle(8, rng=0).E == 8
    star = generators.star(9, rng=0)
    assert star.E == 8
    assert max_degree(star) == 8
    wheel = generators.wheel(9, rng=0)
    assert wheel.E == 16
    assert max_degree(wheel) == 8


def test_bipartite_generators():
    g = generators.bipartite(5, 6, 20, rng=1)
    assert g.V == 11
    assert g.E == 20
    assert Bipartite(g).is_bipartite()
    assert generators.complete_bipartite(4, 5, rng=1).E == 20


def test_dag_and_tournament():
    dag = generators.dag(20, 100, rng=0)
    assert dag.E == 100
    assert not DirectedCycle(dag).has_cycle()
    t = generators.tournament(8, rng=0)
    assert t.E == 28
    edges = set(t.edges())
    for v in range(8):
        for w in range(v + 1, 8):
            assert ((v, w) in edges) != ((w, v) in edges)


def test_rooted_dags():
    g = generators.rooted_in_dag(12, 30, rng=3)
    assert not DirectedCycle(g).has_cycle()
    reach = TransitiveClosure(g).matrix()
    sinks = [v for v in range(g.V) if g.out_degree(v) == 0]
    assert len(sinks) == 1
    assert reach[:, sinks[0]].all()

    g = generators.rooted_out_dag(12, 30, rng=3)
    reach = TransitiveClosure(g).matrix()
    sources = [v for v in range(g.V) if g.in_degree(v) == 0]
    assert len(sources) == 1
    assert reach[sources[0]].all()

    assert generators.rooted_in_tree(10, rng=0).E == 9
    assert generators.rooted_out_tree(10, rng=0).E == 9


def test_directed_structures():
    assert generators.complete_digraph(5).E == 20
    assert generators.path_digraph(5, rng=0).E == 4
    assert KosarajuSharirSCC(generators.cycle_digraph(6, rng=0)).count == 1
    tree = generators.binary_tree_digraph(7, rng=0)
    assert sorted(tree.out_degree(v) for v in range(7)) == [0, 1, 1, 1, 1, 1, 1]


@pytest.mark.parametrize("c", [1, 3, 7])
def test_strong_has_exactly_c_components(c):
    g = generators.strong(30, 80, c, rng=c)
    assert g.E == 80
    assert KosarajuSharirSCC(g).count == c
    assert len(set(g.edges())) == g.E


def test_edge_weighted_dag():
    g = generators.edge_weighted_dag(10, 20, rng=0)
    assert g.E == 20
    assert all(0.0 <= e.weight < 1.0 for e in g.edges())


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generators.simple(3, 4)
    with pytest.raises(ValueError):
        generators.simple(3, -1)
    with pytest.raises(ValueError):
        generators.simple_digraph(3, 7)
    with pytest.raises(ValueError):
        generators.erdos_renyi(3, 1.5)
    with pytest.raises(ValueError):
        generators.bipartite(2, 2, 5)
    with pytest.raises(ValueError):
        generators.rooted_in_dag(5, 2)
    with pytest.raises(ValueError):
        generators.strong(5, 6, 2)
    with pytest.raises(ValueError):
        generators.strong(5, 9, 5)
    with pytest.raises(ValueError):
        generators.star(0)
    with pytest.raises(ValueError):
        generators.wheel(1)
