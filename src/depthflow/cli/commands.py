"""
CLI subcommands operating on edge list files.
"""

import logging
import sys
from pathlib import Path

from depthflow.traversal import find_cycles, find_sources, toposort, traverse
from depthflow.util.io import dot
from depthflow.visitor import CycleCollectorVisitor, DepthFirstNoOpVisitor

LOG = logging.getLogger(__name__)


def resolve_start(args, labels):
    """Map --start names to vertices.

    Unknown names are passed through as plain strings, which the traversal
    rejects with InvalidStartError.
    """
    if not args.start:
        return None
    return [labels.get(name, name) for name in args.start]


def write_lines(args, lines):
    text = "".join("%s\n" % line for line in lines)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        LOG.info("output written to %s", args.output)
    else:
        sys.stdout.write(text)


def run_sources(graph, labels, args):
    """Print the source vertices, one per line."""
    queue = find_sources(graph, DepthFirstNoOpVisitor())
    write_lines(args, queue)
    return 0


def run_toposort(graph, labels, args):
    """Print the depth-first finish order, one vertex per line."""
    order = toposort(graph, resolve_start(args, labels), args.iterative)
    if args.reverse:
        order.reverse()
    write_lines(args, order)
    return 0


def run_cycles(graph, labels, args):
    """Print every cycle as ``a -> b -> a``; exit status 1 if any exist."""
    cycles = find_cycles(graph, resolve_start(args, labels), args.iterative)
    write_lines(args, (" -> ".join(str(v) for v in cycle + cycle[:1]) for cycle in cycles))
    return 1 if cycles else 0


def run_dot(graph, labels, args):
    """Write the graph as DOT with its back edges highlighted."""
    start = resolve_start(args, labels)
    if start is None:
        start = list(graph.each_vertex())

    back_edges = []
    if start:
        visitor = CycleCollectorVisitor()
        traverse(graph, visitor, start, args.iterative)
        back_edges = [(cycle[-1], cycle[0]) for cycle in visitor.cycles]

    name = Path(args.input).stem
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            dot.dump_graph(graph, f, back_edges=back_edges, name=name)
    else:
        dot.dump_graph(graph, sys.stdout, back_edges=back_edges, name=name)
    return 0


COMMANDS = {
    "sources": (run_sources, "List vertices without incoming edges"),
    "toposort": (run_toposort, "Print vertices in depth-first finish order"),
    "cycles": (run_cycles, "List the cycles found by depth-first search"),
    "dot": (run_dot, "Write the graph in Graphviz DOT format"),
}


def add_command_parsers(subparsers, common):
    """Register every subcommand; common is a parent parser of shared options."""
    for name, (func, summary) in COMMANDS.items():
        parser = subparsers.add_parser(name, help=summary, parents=[common])
        if name == "toposort":
            parser.add_argument(
                "--reverse",
                "-r",
                action="store_true",
                help="Print dependents first (edge order) instead of finish order",
            )
        parser.set_defaults(func=func)
