"""Strong-connectivity analysis over the dense distance matrix."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..domain.models import NO_EDGE, NetworkState


def reachable_from(state: NetworkState, start: int) -> List[bool]:
    """Mark every intersection reachable from ``start``.

    Depth-first search with an explicit stack; any cell other than
    ``NO_EDGE`` is a traversable edge.

    Parameters
    ----------
    state:
        Loaded network.
    start:
        Matrix position of the starting intersection.

    Returns
    -------
    list[bool]
        ``visited[i]`` is True when position ``i`` can be reached.
        ``start`` itself is always marked.
    """
    n = state.size
    visited = [False] * n
    visited[start] = True
    stack = [start]

    while stack:
        u = stack.pop()
        for v in np.flatnonzero(state.distances[u] != NO_EDGE).tolist():
            if not visited[v]:
                visited[v] = True
                stack.append(v)

    return visited


def is_strongly_connected(state: Optional[NetworkState]) -> bool:
    """Check whether every intersection can reach every other one.

    Returns False when no network is loaded. A network with a single
    intersection is trivially strongly connected.
    """
    if state is None:
        return False

    for start in range(state.size):
        if not all(reachable_from(state, start)):
            return False
    return True
