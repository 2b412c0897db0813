"""Main CLI dispatcher for depthflow.

Reads a directed graph from an edge list file and dispatches to the
subcommand that traverses it.
"""

import argparse
import logging
import sys

from depthflow import __version__
from depthflow.application.errors import TraversalError
from depthflow.util.io.edgelist import read_edgelist

from .commands import add_command_parsers

LOG = logging.getLogger(__name__)


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", help="Edge list file ('tail head' per line)")
    common.add_argument(
        "--start",
        "-s",
        action="append",
        metavar="NAME",
        help="Start vertex; repeat for several roots (default: source vertices)",
    )
    common.add_argument(
        "--iterative",
        action="store_true",
        help="Use the explicit-stack traversal for very deep graphs",
    )
    common.add_argument("--output", "-o", help="Output file (default: stdout)")
    common.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    parser = argparse.ArgumentParser(
        description="depthflow - depth-first traversal of directed graphs",
        prog="depthflow",
    )
    parser.add_argument("--version", action="version", version="depthflow %s" % __version__)

    subparsers = parser.add_subparsers(
        dest="command", help="Available commands", required=True
    )
    add_command_parsers(subparsers, common)
    return parser


def main(argv=None):
    """Main entry point for the depthflow CLI.

    Returns:
        int: Exit code (0 for success, non-zero for error).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        graph, labels = read_edgelist(args.input)
    except (OSError, ValueError) as e:
        LOG.error("cannot read %s: %s", args.input, e)
        return 1

    LOG.debug("loaded %r from %s", graph, args.input)

    try:
        return args.func(graph, labels, args)
    except TraversalError as e:
        LOG.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
