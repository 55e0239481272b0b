"""Transportation network service - Public query surface.

The service owns the loaded network (vertex index and distance matrix)
and routes every query through the graph engine, passing that state
explicitly. Several instances can coexist in one process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from ..adapters.rendering import FixedWidthTableRenderer
from ..adapters.source import FileEdgeSource
from ..domain.errors import NetworkError
from ..domain.models import NetworkState
from ..graph import (
    all_shortest_distances,
    build_network,
    is_strongly_connected,
    parse_edge_records,
    shortest_distance,
)
from ..ports.rendering import MatrixRendererPort
from ..ports.source import EdgeSourcePort

NO_NETWORK_MESSAGE = "No transportation network data to display."


@dataclass
class TransportationNetwork:
    """A transportation network plan and the queries it supports.

    Loading is all-or-nothing: a load either installs a complete new
    network or leaves the instance empty, discarding any network loaded
    before. Queries never raise for missing data; they answer with an
    empty value or a sentinel instead:

    - ``vertices()`` / ``direct_distances()`` / ``all_shortest_distances()``
      return None when nothing is loaded
    - ``is_strongly_connected()`` returns False when nothing is loaded
    - ``shortest_distance()`` returns NOT_FOUND for an unknown label (or
      no network) and UNREACHABLE when no path exists

    Matrices returned by ``direct_distances()`` are the live, read-only
    array; ``all_shortest_distances()`` returns a fresh array each call.

    Attributes:
        source: Where edge lists are read from
        renderer: How matrices are displayed
        last_error: Why the most recent load failed, None after a success
    """

    source: EdgeSourcePort = field(default_factory=FileEdgeSource)
    renderer: MatrixRendererPort = field(default_factory=FixedWidthTableRenderer)
    last_error: Optional[NetworkError] = field(default=None, init=False)

    _state: Optional[NetworkState] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        """Check if a network is currently loaded."""
        return self._state is not None

    def load(self, path: Union[str, Path]) -> bool:
        """Read a network plan from an edge-list file.

        Args:
            path: Location of the edge list; see FileEdgeSource for the
                fallback directories searched when it does not exist.

        Returns:
            True if the network was loaded. False otherwise, in which
            case any previously loaded network is discarded and
            ``last_error`` explains the failure.
        """
        self._logger.debug("Loading network", extra={"path": str(path)})
        try:
            lines = self.source.read_lines(path)
        except NetworkError as e:
            return self._fail(e)
        return self.load_lines(lines, source_path=str(path))

    def load_lines(
        self, lines: Iterable[str], source_path: Optional[str] = None
    ) -> bool:
        """Load a network plan from edge-list lines already in memory.

        Same all-or-nothing semantics as ``load``.
        """
        try:
            state = build_network(parse_edge_records(lines, source_path=source_path))
        except NetworkError as e:
            return self._fail(e)

        self._state = state
        self.last_error = None
        self._logger.info(
            "Network loaded",
            extra={"path": source_path, "vertices": state.size},
        )
        return True

    def _fail(self, error: NetworkError) -> bool:
        self._state = None
        self.last_error = error
        self._logger.warning(
            "Network load failed, existing data cleared",
            extra={"path": error.source_path, "error": str(error)},
        )
        return False

    def vertices(self) -> Optional[tuple[str, ...]]:
        """Return the intersection labels in ascending order, or None."""
        if self._state is None:
            return None
        return self._state.vertices

    def direct_distances(self) -> Optional[np.ndarray]:
        """Return the direct-distance matrix, or None.

        The array is shared with the instance and is not writeable.
        """
        if self._state is None:
            return None
        return self._state.distances

    def is_strongly_connected(self) -> bool:
        """Check whether every intersection can reach every other one."""
        return is_strongly_connected(self._state)

    def shortest_distance(self, source: str, target: str) -> int:
        """Return the shortest distance from ``source`` to ``target``.

        Returns:
            The distance, NOT_FOUND (-1) if either label is unknown or
            nothing is loaded, UNREACHABLE (0) if no path exists.
        """
        return shortest_distance(self._state, source, target)

    def all_shortest_distances(self) -> Optional[np.ndarray]:
        """Return a new matrix of shortest distances between all pairs, or None."""
        return all_shortest_distances(self._state)

    def display(self) -> str:
        """Render the direct-distance matrix."""
        if self._state is None:
            return NO_NETWORK_MESSAGE
        return self.renderer.render(self._state.vertices, self._state.distances)

    def display_shortest(self) -> str:
        """Render the all-pairs shortest-distance matrix."""
        shortest = self.all_shortest_distances()
        if self._state is None or shortest is None:
            return NO_NETWORK_MESSAGE
        return self.renderer.render(self._state.vertices, shortest)
