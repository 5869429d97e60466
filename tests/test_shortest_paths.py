import numpy as np
import pytest

from graphalgs import generators
from graphalgs.dag_paths import AcyclicSP
from graphalgs.shortest_paths import DijkstraSP
from graphalgs.weighted import DirectedEdge, EdgeWeightedDigraph


def test_dijkstra_on_tiny_dag(data_dir):
    g = EdgeWeightedDigraph.read(data_dir / "tinyEWDAG.txt")
    sp = DijkstraSP(g, 5, check=True)
    assert sp.dist_to(6) == pytest.approx(1.13)
    assert [str(e) for e in sp.path_to(6)] == ["5->1 0.32", "1->3 0.29", "3->6 0.52"]
    assert sp.check(g)


def test_dijkstra_matches_acyclic_sp_on_dags():
    rng = np.random.default_rng(11)
    for _ in range(10):
        g = generators.edge_weighted_dag(25, 70, rng)
        dijkstra = DijkstraSP(g, 0, check=True)
        acyclic = AcyclicSP(g, 0)
        for v in range(g.V):
            assert dijkstra.has_path_to(v) == acyclic.has_path_to(v)
            if acyclic.has_path_to(v):
                assert dijkstra.dist_to(v) == pytest.approx(acyclic.dist_to(v))


def test_dijkstra_handles_cycles():
    g = EdgeWeightedDigraph.random(30, 120, rng=2)
    sp = DijkstraSP(g, 0, check=True)
    assert sp.dist_to(0) == 0.0


def test_negative_weight_rejected():
    g = EdgeWeightedDigraph(2)
    g.add_edge(DirectedEdge(0, 1, -0.5))
    with pytest.raises(ValueError, match="negative weight"):
        DijkstraSP(g, 0)
