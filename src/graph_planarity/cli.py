"""
Command-line entry point.

Usage:
    graph-planarity EDGE_LIST_FILE [--no-euler-bound] [--full-bipartite-check] [--verbose]

Prints ``Planar!`` or ``Nao planar!``. Any usage or input error is reported on
stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from .io import read_edge_list
from .planarity import check_planarity
from .validation import ValidationError

PLANAR_MESSAGE = "Planar!"
NON_PLANAR_MESSAGE = "Nao planar!"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="graph-planarity",
        description="Test whether the graph in an edge-list file is planar",
    )
    parser.add_argument("path", help="File of whitespace-separated integer pairs, one edge per pair")
    parser.add_argument(
        "--euler-bound",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Reject early when a level has more than 3n - 6 edges (default: on)",
    )
    parser.add_argument(
        "--full-bipartite-check",
        action="store_true",
        help="Colour every component of the interlacement graph",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print run statistics to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        graph = read_edge_list(args.path)
        result = check_planarity(
            graph,
            euler_bound=args.euler_bound,
            full_bipartite_check=args.full_bipartite_check,
        )
    except OSError as exc:
        parser.error(f"cannot read input file '{args.path}': {exc.strerror or exc}")
    except ValidationError as exc:
        parser.error(f"invalid input file '{args.path}': {exc}")

    if args.verbose:
        reason = result.reason.name if result.reason is not None else "-"
        print(
            f"vertices={graph.num_vertices()} edges={graph.num_edges()} "
            f"depth={result.depth} pieces={result.pieces} reason={reason}",
            file=sys.stderr,
        )

    print(PLANAR_MESSAGE if result.is_planar else NON_PLANAR_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
