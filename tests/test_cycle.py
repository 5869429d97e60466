import numpy as np
import pytest

from graphalgs import generators
from graphalgs.cycle import Bipartite, Cycle, DirectedCycle, EdgeWeightedDirectedCycle
from graphalgs.graph import Digraph, Graph
from graphalgs.weighted import DirectedEdge, EdgeWeightedDigraph


def _assert_closed_walk(g, cycle):
    assert cycle[0] == cycle[-1]
    for v, w in zip(cycle, cycle[1:]):
        assert w in g.adj(v)


def test_undirected_cycle_in_tiny_graph(data_dir):
    g = Graph.read(data_dir / "tinyG.txt")
    finder = Cycle(g)
    assert finder.has_cycle()
    assert finder.cycle() == [3, 5, 4, 3]
    _assert_closed_walk(g, finder.cycle())


def test_self_loop_and_parallel_edges_reported_first():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    g.add_edge(3, 3)
    assert Cycle(g).cycle() == [3, 3]

    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 1)
    assert Cycle(g).cycle() == [1, 2, 1]


def test_forest_has_no_cycle():
    g = generators.binary_tree(31, rng=0)
    finder = Cycle(g)
    assert not finder.has_cycle()
    assert finder.cycle() is None


def test_cycle_returns_copy():
    g = generators.cycle(4, rng=1)
    finder = Cycle(g)
    first = finder.cycle()
    first.clear()
    assert len(finder.cycle()) == 5


def test_directed_cycle_in_tiny_digraph(data_dir):
    g = Digraph.read(data_dir / "tinyDG.txt")
    finder = DirectedCycle(g, check=True)
    assert finder.cycle() == [3, 2, 3]
    assert finder.check()


def test_directed_cycle_random():
    rng = np.random.default_rng(0)
    for _ in range(10):
        dag = generators.dag(20, 40, rng)
        assert not DirectedCycle(dag).has_cycle()
        g = generators.simple_digraph(20, 40, rng)
        finder = DirectedCycle(g)
        if finder.has_cycle():
            _assert_closed_walk(g, finder.cycle())
            assert finder.check()


def test_directed_cycle_through_every_vertex():
    g = Digraph(5)
    for v, w in [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]:
        g.add_edge(v, w)
    cycle = DirectedCycle(g, check=True).cycle()
    assert len(cycle) == 6
    assert len(set(cycle[:-1])) == 5
    _assert_closed_walk(g, cycle)


@pytest.mark.parametrize("seed", range(5))
def test_directed_cycle_check_on_dag(seed):
    dag = generators.dag(15, 30, seed)
    finder = DirectedCycle(dag, check=True)
    assert not finder.has_cycle()
    assert finder.cycle() is None


def test_directed_self_loop():
    g = Digraph(2)
    g.add_edge(1, 1)
    assert DirectedCycle(g).cycle() == [1, 1]


def test_edge_weighted_directed_cycle(data_dir):
    g = EdgeWeightedDigraph.read(data_dir / "tinyEWDAG.txt")
    assert not EdgeWeightedDirectedCycle(g, check=True).has_cycle()
    g.add_edge(DirectedEdge(2, 5, 0.1))
    finder = EdgeWeightedDirectedCycle(g, check=True)
    cycle = finder.cycle()
    assert cycle is not None
    assert finder.check()
    assert [str(e) for e in cycle] == ["2->5 0.10", "5->4 0.35", "4->7 0.37", "7->2 0.34"]


def test_even_cycle_is_bipartite():
    g = generators.cycle(6, rng=0)
    b = Bipartite(g, check=True)
    assert b.is_bipartite()
    assert b.odd_cycle() is None
    for v, w in g.edges():
        assert b.color(v) != b.color(w)


def test_complete_bipartite_graph_is_bipartite():
    g = generators.complete_bipartite(3, 4, rng=2)
    assert Bipartite(g, check=True).is_bipartite()


def test_odd_cycle_reported():
    g = generators.cycle(5, rng=0)
    b = Bipartite(g, check=True)
    assert not b.is_bipartite()
    cycle = b.odd_cycle()
    _assert_closed_walk(g, cycle)
    assert (len(cycle) - 1) % 2 == 1
    with pytest.raises(ValueError, match="not bipartite"):
        b.color(0)


def test_self_loop_is_odd_cycle():
    g = Graph(2)
    g.add_edge(0, 1)
    g.add_edge(1, 1)
    assert Bipartite(g).odd_cycle() == [1, 1]


def test_empty_graphs():
    assert not Cycle(Graph(0)).has_cycle()
    assert not DirectedCycle(Digraph(0)).has_cycle()
    assert Bipartite(Graph(0)).is_bipartite()
