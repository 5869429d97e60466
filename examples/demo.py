"""Small demonstration of the graphalgs strong-component and DAG path algorithms."""

from __future__ import annotations

import numpy as np

from graphalgs import AcyclicLP, AcyclicSP, GabowSCC, KosarajuSharirSCC, TarjanSCC
from graphalgs import generators
from graphalgs.dag_paths import critical_path


def make_digraph(seed: int = 0):
    rng = np.random.default_rng(seed)
    return generators.strong(40, 120, 5, rng)


def main() -> None:
    g = make_digraph()
    for algorithm in (KosarajuSharirSCC, TarjanSCC, GabowSCC):
        scc = algorithm(g)
        sizes = sorted(len(c) for c in scc.components())
        print(f"{algorithm.__name__}: {scc.count} strong components, sizes {sizes}")

    dag = generators.edge_weighted_dag(12, 30, rng=1)
    sp = AcyclicSP(dag, 0)
    lp = AcyclicLP(dag, 0)
    print("Shortest / longest distances from vertex 0:")
    for v in range(dag.V):
        if sp.has_path_to(v):
            print(f"  {v:2d}: {sp.dist_to(v):.2f} / {lp.dist_to(v):.2f}")

    # jobs: duration, then the jobs that must wait for it
    schedule = critical_path(
        [41.0, 51.0, 50.0, 36.0, 38.0, 45.0, 21.0, 32.0, 32.0, 29.0],
        [[1, 7, 9], [2], [], [], [], [], [3, 8], [3, 8], [2], [4, 6]],
    )
    print("Job start times:")
    print(schedule.start_times)
    print(f"Finish time: {schedule.finish_time:.1f}")


if __name__ == "__main__":
    main()
