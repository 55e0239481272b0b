"""Graph engine for the transportation network.

This subpackage turns raw edge-list lines into a dense distance matrix
and runs connectivity and shortest-path algorithms on top of it. Every
function takes the network state explicitly; nothing here keeps state
between calls.
"""

from .builder import build_network
from .connectivity import is_strongly_connected, reachable_from
from .parser import parse_edge_records, parse_edge_text
from .shortest_path import all_shortest_distances, shortest_distance

__all__ = [
    "parse_edge_records",
    "parse_edge_text",
    "build_network",
    "is_strongly_connected",
    "reachable_from",
    "shortest_distance",
    "all_shortest_distances",
]
