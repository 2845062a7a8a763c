"""adjgraph CLI entry point.

Builds a graph from edges given on the command line and runs one
algorithm on it.  Vertices are plain strings.

Usage:
    adjgraph bfs A -e A B -e B C
    adjgraph toposort --kind directed -e shirt tie -e tie jacket
    adjgraph print --kind weighted -e A B 2.5
"""
import argparse
import logging
import sys

from adjgraph.graph.adjacency import AdjacencyGraph
from adjgraph.graph.cycle_detector import find_cycle
from adjgraph.graph.directed import DirectedGraph, in_degree
from adjgraph.graph.topological import topological_sort
from adjgraph.graph.traversal import INFINITY, bfs, dfs, shortest_path
from adjgraph.graph.undirected import UndirectedGraph
from adjgraph.graph.weighted import WeightedGraph

log = logging.getLogger(__name__)

KINDS = {
    "undirected": UndirectedGraph,
    "directed": DirectedGraph,
    "weighted": WeightedGraph,
}

# commands that only make sense on one-way edges
_DIRECTED_ONLY = {"toposort", "has-cycle", "in-degree"}


def _graph_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--kind", choices=sorted(KINDS), default="undirected",
        help="Graph variant to build (default: undirected)",
    )
    common.add_argument(
        "-e", "--edge", nargs="+", action="append", default=[],
        metavar="VERTEX",
        help="Edge as SRC DST, or SRC DST WEIGHT for --kind weighted. "
             "Repeat for more edges.",
    )
    common.add_argument(
        "--vertex", action="append", default=[],
        help="Isolated vertex to add. Repeatable.",
    )
    return common


def _add_commands(subparsers: argparse._SubParsersAction) -> None:
    common = _graph_options()

    subparsers.add_parser(
        "print", parents=[common],
        help="Print the adjacency lists.",
    )
    for name, desc in [
        ("bfs", "Breadth-first visiting order from SOURCE."),
        ("dfs", "Depth-first visiting order from SOURCE."),
        ("shortest-path", "Hop distance from SOURCE to every vertex."),
    ]:
        p = subparsers.add_parser(name, parents=[common], help=desc)
        p.add_argument("source", help="Start vertex")

    subparsers.add_parser(
        "toposort", parents=[common],
        help="Topological order (directed/weighted graphs).",
    )
    subparsers.add_parser(
        "has-cycle", parents=[common],
        help="Report a directed cycle; exit status 1 if one exists.",
    )
    p = subparsers.add_parser(
        "in-degree", parents=[common],
        help="Number of edges ending at VERTEX (directed graphs).",
    )
    p.add_argument("target", metavar="VERTEX")


def build_graph(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> AdjacencyGraph[str]:
    """Create the requested graph variant from the parsed edge list."""
    graph = KINDS[args.kind]()
    for vertex in args.vertex:
        graph.add_vertex(vertex)
    for edge in args.edge:
        if args.kind == "weighted" and len(edge) in (2, 3):
            weight = 1.0
            if len(edge) == 3:
                try:
                    weight = float(edge[2])
                except ValueError:
                    parser.error(f"invalid weight {edge[2]!r} for edge {edge[0]} -> {edge[1]}")
            graph.add_edge(edge[0], edge[1], weight)
        elif len(edge) == 2:
            graph.add_edge(edge[0], edge[1])
        else:
            expected = "SRC DST [WEIGHT]" if args.kind == "weighted" else "SRC DST"
            parser.error(f"edge {' '.join(edge)!r} must be {expected}")
    log.debug("built %r", graph)
    return graph


def _format_distance(d: float) -> str:
    return "inf" if d == INFINITY else str(int(d))


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command in _DIRECTED_ONLY and args.kind == "undirected":
        parser.error(f"{args.command} needs --kind directed or --kind weighted")

    graph = build_graph(parser, args)

    if args.command == "print":
        graph.print_graph()
    elif args.command == "bfs":
        print(" ".join(bfs(graph, args.source)))
    elif args.command == "dfs":
        print(" ".join(dfs(graph, args.source)))
    elif args.command == "shortest-path":
        for vertex, d in shortest_path(graph, args.source).items():
            print(f"{vertex} {_format_distance(d)}")
    elif args.command == "toposort":
        print(" ".join(topological_sort(graph)))
    elif args.command == "has-cycle":
        result = find_cycle(graph)
        if result.has_cycle:
            print("cycle: " + " -> ".join(result.cycle_path or []))
            return 1
        print("no cycle")
    elif args.command == "in-degree":
        print(in_degree(graph, args.target))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="adjgraph",
        description="Adjacency-list graphs: traversals, shortest paths, "
                    "topological order and cycle detection.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_commands(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_run(parser, args))
