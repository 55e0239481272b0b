"""Immutable domain models for the road network engine.

All models are frozen dataclasses with slots. The distance matrix is a
dense ``numpy`` array of ``int64`` whose rows and columns follow the
ascending order of the intersection labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional

import numpy as np

# Matrix dtype and its reserved "no direct edge" value.
DISTANCE_DTYPE = np.int64
NO_EDGE: int = int(np.iinfo(DISTANCE_DTYPE).max)
# Largest accepted edge weight. A path of fewer than 2**32 edges stays
# below NO_EDGE, so relaxation sums never wrap around.
MAX_WEIGHT: int = NO_EDGE // 2**32
MIN_WEIGHT: int = -MAX_WEIGHT

# Single-source query results outside the space of real distances.
NOT_FOUND: int = -1
UNREACHABLE: int = 0


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A directed road segment parsed from one line of an edge list.

    Attributes:
        source: Label of the departure intersection
        target: Label of the arrival intersection
        weight: Distance of the segment
    """

    source: str
    target: str
    weight: int

    @property
    def is_self_loop(self) -> bool:
        """Check if the segment starts and ends at the same intersection."""
        return self.source == self.target


@dataclass(frozen=True)
class VertexIndex:
    """Bijection between intersection labels and matrix positions.

    Positions are assigned by sorting the labels in ascending order, so
    ``labels[i]`` is both the i-th listed intersection and the i-th
    row/column of the distance matrix.
    """

    labels: tuple[str, ...]
    _positions: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if list(self.labels) != sorted(set(self.labels)):
            raise ValueError("Vertex labels must be unique and sorted")
        object.__setattr__(
            self, "_positions", {label: i for i, label in enumerate(self.labels)}
        )

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> VertexIndex:
        """Build an index from any iterable of labels, duplicates allowed."""
        return cls(tuple(sorted(set(labels))))

    def position(self, label: str) -> Optional[int]:
        """Return the matrix position of ``label``, or None if unknown."""
        return self._positions.get(label)

    def label(self, position: int) -> str:
        return self.labels[position]

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)


@dataclass(frozen=True, eq=False)
class NetworkState:
    """A loaded network: the vertex index and its distance matrix.

    The two always travel together. ``distances[i, j]`` holds the direct
    weight from ``index.labels[i]`` to ``index.labels[j]``, or NO_EDGE.

    Attributes:
        index: Sorted intersection labels and their positions
        distances: ``n x n`` int64 direct-distance matrix
    """

    index: VertexIndex
    distances: np.ndarray

    def __post_init__(self) -> None:
        n = len(self.index)
        if self.distances.shape != (n, n):
            raise ValueError(
                f"Distance matrix shape {self.distances.shape} does not match "
                f"{n} vertices"
            )

    @property
    def size(self) -> int:
        """Return the number of intersections."""
        return len(self.index)

    @property
    def vertices(self) -> tuple[str, ...]:
        return self.index.labels
