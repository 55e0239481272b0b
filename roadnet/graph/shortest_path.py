"""Shortest-distance computation over the dense distance matrix.

Two algorithms are provided:

- ``shortest_distance``: single pair, greedy label-setting (Dijkstra)
  with an O(n^2) scan of the tentative-distance array.
- ``all_shortest_distances``: every pair, Floyd-Warshall.

Both assume non-negative weights; with negative weights the results
are undefined. Every relaxation adds two distances only after checking
that neither is ``NO_EDGE``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..domain.models import NO_EDGE, NOT_FOUND, UNREACHABLE, NetworkState


def shortest_distance(
    state: Optional[NetworkState], source: str, target: str
) -> int:
    """Compute the shortest distance between two intersections.

    Parameters
    ----------
    state:
        Loaded network, or None when nothing is loaded.
    source:
        Label of the departure intersection.
    target:
        Label of the arrival intersection.

    Returns
    -------
    int
        The shortest distance; ``NOT_FOUND`` if no network is loaded or
        either label is unknown; ``UNREACHABLE`` if no path exists.
        ``UNREACHABLE`` is 0, which a zero-weight path would also yield.
    """
    if state is None:
        return NOT_FOUND

    start = state.index.position(source)
    end = state.index.position(target)
    if start is None or end is None:
        return NOT_FOUND

    n = state.size
    dist = np.full(n, NO_EDGE, dtype=state.distances.dtype)
    visited = np.zeros(n, dtype=bool)
    dist[start] = 0

    for _ in range(n):
        tentative = np.where(visited, NO_EDGE, dist)
        u = int(np.argmin(tentative))
        if tentative[u] == NO_EDGE:
            # Everything left is unreachable.
            break

        visited[u] = True
        row = state.distances[u]
        edges = row != NO_EDGE
        through = dist[u] + row[edges]
        dist[edges] = np.minimum(dist[edges], through)

    if dist[end] == NO_EDGE:
        return UNREACHABLE
    return int(dist[end])


def all_shortest_distances(state: Optional[NetworkState]) -> Optional[np.ndarray]:
    """Compute the shortest distance between every pair of intersections.

    Parameters
    ----------
    state:
        Loaded network, or None when nothing is loaded.

    Returns
    -------
    numpy.ndarray or None
        A new ``n x n`` matrix in the same order as the vertex index,
        with ``NO_EDGE`` where no path exists. The loaded matrix is left
        untouched. None when no network is loaded.
    """
    if state is None:
        return None

    dist = state.distances.copy()

    for k in range(state.size):
        into_k = dist[:, k]
        out_of_k = dist[k, :]
        into_ok = into_k != NO_EDGE
        out_ok = out_of_k != NO_EDGE
        if not into_ok.any() or not out_ok.any():
            continue

        # Sentinels are zeroed before adding and masked out afterwards.
        through = (
            np.where(into_ok, into_k, 0)[:, np.newaxis]
            + np.where(out_ok, out_of_k, 0)[np.newaxis, :]
        )
        improved = np.outer(into_ok, out_ok) & (through < dist)
        dist[improved] = through[improved]

    return dist
