"""Command-line front-end for the transportation network engine.

Usage:
    roadnet show network.txt
    roadnet connected network.txt
    roadnet distance network.txt A C
    roadnet all-pairs network.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .container import Container
from .domain.errors import UnknownVertexError
from .domain.models import NOT_FOUND, UNREACHABLE
from .logging_config import configure_logging
from .services import TransportationNetwork


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadnet",
        description="Inspect a transportation network edge list.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="display direct distances")
    show.add_argument("path")

    connected = sub.add_parser("connected", help="check strong connectivity")
    connected.add_argument("path")

    distance = sub.add_parser("distance", help="shortest distance between two intersections")
    distance.add_argument("path")
    distance.add_argument("source")
    distance.add_argument("target")

    all_pairs = sub.add_parser("all-pairs", help="display all shortest distances")
    all_pairs.add_argument("path")

    return parser


def _report_distance(network: TransportationNetwork, source: str, target: str) -> int:
    result = network.shortest_distance(source, target)
    if result == NOT_FOUND:
        vertices = network.vertices() or ()
        label = source if source not in vertices else target
        error = UnknownVertexError(f"Unknown intersection: {label}", label=label)
        print(error, file=sys.stderr)
        return 1
    if result == UNREACHABLE and source != target:
        print(f"No path from {source} to {target}.")
        return 0
    print(f"Shortest distance from {source} to {target}: {result}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    container = Container.create_default()
    configure_logging(container.config.observability)
    network: TransportationNetwork = container.resolve(TransportationNetwork)

    if not network.load(args.path):
        print(f"Failed to load network: {network.last_error}", file=sys.stderr)
        return 1

    if args.command == "show":
        print(network.display())
    elif args.command == "connected":
        connected = network.is_strongly_connected()
        print("strongly connected" if connected else "not strongly connected")
    elif args.command == "distance":
        return _report_distance(network, args.source, args.target)
    elif args.command == "all-pairs":
        print(network.display_shortest())
    return 0


if __name__ == "__main__":
    sys.exit(main())
