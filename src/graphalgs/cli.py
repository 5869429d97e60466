"""Command-line interface for graphalgs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from graphalgs.connectivity import CC
from graphalgs.cycle import Cycle, DirectedCycle
from graphalgs.dag_paths import AcyclicLP, AcyclicSP
from graphalgs.graph import Digraph, Graph
from graphalgs.mst import MST_ALGORITHMS
from graphalgs.order import Topological
from graphalgs.readers import TokenReader, read_text
from graphalgs.scc import SCC_ALGORITHMS
from graphalgs.union_find import UnionFind
from graphalgs.weighted import EdgeWeightedDigraph, EdgeWeightedGraph

logger = logging.getLogger(__name__)


def _read_graph(path: Path, directed: bool, weighted: bool):
    if weighted:
        cls = EdgeWeightedDigraph if directed else EdgeWeightedGraph
    else:
        cls = Digraph if directed else Graph
    g = cls.read(path)
    logger.debug("read %s with %d vertices and %d edges from %s", cls.__name__, g.V, g.E, path)
    return g


def _print_components(groups: list[list[int]], what: str, out: TextIO) -> None:
    print(f"{len(groups)} {what}", file=out)
    for group in groups:
        print(" ".join(str(v) for v in group), file=out)


def _cmd_graph(args: argparse.Namespace, out: TextIO) -> None:
    out.write(str(_read_graph(args.file, args.directed, args.weighted)))


def _cmd_cc(args: argparse.Namespace, out: TextIO) -> None:
    _print_components(CC(_read_graph(args.file, False, False)).components(), "components", out)


def _cmd_cycle(args: argparse.Namespace, out: TextIO) -> None:
    g = _read_graph(args.file, args.directed, False)
    finder = DirectedCycle(g) if args.directed else Cycle(g)
    if finder.has_cycle():
        print(" ".join(str(v) for v in finder.cycle()), file=out)
    else:
        print("Graph is acyclic", file=out)


def _cmd_topo(args: argparse.Namespace, out: TextIO) -> None:
    g = _read_graph(args.file, True, args.weighted)
    topological = Topological(g)
    if topological.has_order():
        print(" ".join(str(v) for v in topological.order()), file=out)
    else:
        print("Digraph is not a DAG", file=out)


def _cmd_scc(args: argparse.Namespace, out: TextIO) -> None:
    scc = SCC_ALGORITHMS[args.algorithm](_read_graph(args.file, True, False))
    _print_components(scc.components(), "strong components", out)


def _print_paths(finder, V: int, out: TextIO) -> None:
    s = finder.source
    for v in range(V):
        if finder.has_path_to(v):
            edges = "   ".join(str(e) for e in finder.path_to(v))
            print(f"{s} to {v} ({finder.dist_to(v):.2f})  {edges}", file=out)
        else:
            print(f"{s} to {v}         no path", file=out)


def _cmd_sp(args: argparse.Namespace, out: TextIO) -> None:
    g = _read_graph(args.file, True, True)
    _print_paths(AcyclicSP(g, args.source), g.V, out)


def _cmd_lp(args: argparse.Namespace, out: TextIO) -> None:
    g = _read_graph(args.file, True, True)
    _print_paths(AcyclicLP(g, args.source), g.V, out)


def _cmd_mst(args: argparse.Namespace, out: TextIO) -> None:
    forest = MST_ALGORITHMS[args.algorithm](_read_graph(args.file, False, True))
    for e in forest.edges():
        print(e, file=out)
    print(f"{forest.weight:.5f}", file=out)


def _cmd_uf(args: argparse.Namespace, out: TextIO) -> None:
    """Site count followed by pairs; prints each pair that joined two components."""
    reader = TokenReader(read_text(args.file))
    uf = UnionFind(reader.read_count("sites"))
    while not reader.is_empty():
        p = reader.read_int()
        q = reader.read_int()
        if uf.union(p, q):
            print(f"{p} {q}", file=out)
    print(f"{uf.count} components", file=out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphalgs",
        description="Run graph algorithms on graphs stored in the V/E text format.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def command(name: str, handler: Callable, summary: str) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=summary)
        p.add_argument("file", type=Path, help="Path to the graph file")
        p.set_defaults(handler=handler)
        return p

    p = command("graph", _cmd_graph, "Print the adjacency lists of a graph")
    p.add_argument("-d", "--directed", action="store_true", help="Read a digraph")
    p.add_argument("-w", "--weighted", action="store_true", help="Read an edge-weighted graph")

    command("cc", _cmd_cc, "Connected components of an undirected graph")

    p = command("cycle", _cmd_cycle, "Find a cycle")
    p.add_argument("-d", "--directed", action="store_true", help="Read a digraph")

    p = command("topo", _cmd_topo, "Topological order of a digraph")
    p.add_argument("-w", "--weighted", action="store_true", help="Read an edge-weighted digraph")

    p = command("scc", _cmd_scc, "Strong components of a digraph")
    p.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(SCC_ALGORITHMS),
        default="kosaraju",
        help="Strong component algorithm (default: kosaraju)",
    )

    p = command("sp", _cmd_sp, "Shortest paths in an edge-weighted DAG")
    p.add_argument("source", type=int, help="Source vertex")

    p = command("lp", _cmd_lp, "Longest paths in an edge-weighted DAG")
    p.add_argument("source", type=int, help="Source vertex")

    p = command("mst", _cmd_mst, "Minimum spanning forest of an edge-weighted graph")
    p.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(MST_ALGORITHMS),
        default="kruskal",
        help="Spanning forest algorithm (default: kruskal)",
    )

    command("uf", _cmd_uf, "Union-find over a site count and a list of pairs")
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("graphalgs").setLevel(logging.DEBUG)

    try:
        args.handler(args, out if out is not None else sys.stdout)
    except (OSError, ValueError, IndexError) as exc:
        parser.exit(1, f"graphalgs: error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
