import numpy as np
import pytest

from graphalgs.graph import Digraph, Graph, average_degree, max_degree, number_of_self_loops


def test_read_tiny_graph(data_dir):
    g = Graph.read(data_dir / "tinyG.txt")
    assert g.V == 13
    assert g.E == 13
    assert g.adj(0) == (5, 1, 2, 6)
    assert g.degree(0) == 4
    assert max_degree(g) == 4
    assert average_degree(g) == pytest.approx(2.0)
    assert sorted(g.edges()) == sorted(
        (min(v, w), max(v, w))
        for v, w in [(0, 5), (4, 3), (0, 1), (9, 12), (6, 4), (5, 4), (0, 2),
                     (11, 12), (9, 10), (0, 6), (7, 8), (9, 11), (5, 3)]
    )


def test_self_loop_and_parallel_edges():
    g = Graph(3)
    g.add_edge(1, 1)
    g.add_edge(0, 2)
    g.add_edge(2, 0)
    assert g.E == 3
    assert g.adj(1) == (1, 1)
    assert g.degree(1) == 2
    assert number_of_self_loops(g) == 1
    assert list(g.edges()) == [(0, 2), (0, 2), (1, 1)]


def test_str_lists_adjacency():
    g = Graph(2)
    g.add_edge(0, 1)
    assert str(g) == "2 vertices, 1 edges\n0: 1\n1: 0\n"


def test_copy_is_independent():
    g = Graph(3)
    g.add_edge(0, 1)
    h = g.copy()
    h.add_edge(1, 2)
    assert g.E == 1
    assert h.E == 2
    assert g.adj(1) == (0,)


def test_digraph_degrees_and_reverse(data_dir):
    g = Digraph.read(data_dir / "tinyDG.txt")
    assert g.V == 13
    assert g.E == 22
    assert g.adj(6) == (0, 8, 4, 9)
    assert g.out_degree(6) == 4
    assert g.in_degree(6) == 2
    r = g.reverse()
    assert r.E == g.E
    assert sorted(r.adj(6)) == [7, 8]
    assert sorted((w, v) for v, w in r.edges()) == sorted(g.edges())
    assert sum(g.in_degree(v) for v in range(g.V)) == g.E


def test_digraph_copy_keeps_in_degrees():
    g = Digraph(2)
    g.add_edge(0, 1)
    h = g.copy()
    h.add_edge(0, 1)
    assert g.in_degree(1) == 1
    assert h.in_degree(1) == 2


def test_empty_graph():
    g = Graph(0)
    assert g.V == 0
    assert list(g.edges()) == []
    assert max_degree(g) == 0
    assert average_degree(g) == 0.0


@pytest.mark.parametrize("cls", [Graph, Digraph])
def test_invalid_input(cls):
    with pytest.raises(ValueError):
        cls(-1)
    g = cls(3)
    with pytest.raises(IndexError, match="vertex 3 is not between 0 and 2"):
        g.add_edge(0, 3)
    with pytest.raises(IndexError):
        g.adj(-1)
    with pytest.raises(TypeError):
        g.add_edge(1.7, 2)
    with pytest.raises(TypeError):
        g.adj(0.5)
    assert g.E == 0
    g.add_edge(np.int64(0), 1)
    assert g.E == 1
    with pytest.raises(ValueError):
        cls.parse("3\n-1\n")
    with pytest.raises(ValueError):
        cls.parse("3\n2\n0 1\n")
    with pytest.raises(ValueError):
        cls.parse("3\n1\n0 x\n")


def _random_multigraph(seed):
    rng = np.random.default_rng(seed)
    V = int(rng.integers(1, 12))
    g = Graph(V)
    for _ in range(int(rng.integers(0, 3 * V + 1))):
        g.add_edge(int(rng.integers(0, V)), int(rng.integers(0, V)))
    # one self-loop and one parallel pair on top of the random edges
    g.add_edge(0, 0)
    g.add_edge(0, V - 1)
    g.add_edge(0, V - 1)
    return g


@pytest.mark.parametrize("seed", range(8))
def test_degrees_sum_to_twice_the_edge_count(seed):
    g = _random_multigraph(seed)
    assert sum(g.degree(v) for v in range(g.V)) == 2 * g.E


def test_degrees_sum_to_twice_the_edge_count_in_tiny_graph(data_dir):
    g = Graph.read(data_dir / "tinyG.txt")
    assert sum(g.degree(v) for v in range(g.V)) == 2 * g.E
