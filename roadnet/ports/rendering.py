"""Rendering port - Abstraction for displaying distance matrices."""

from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np


class MatrixRendererPort(Protocol):
    """Port for matrix rendering.

    Implementation: adapters/rendering/table_renderer.py

    Renderers receive the ordered intersection labels and a matrix in
    the same order (direct or shortest distances) and turn them into
    text.
    """

    def render(self, vertices: Sequence[str], matrix: np.ndarray) -> str:
        """Render a distance matrix.

        Args:
            vertices: Intersection labels, in matrix order.
            matrix: ``n x n`` distances with ``NO_EDGE`` for no edge/path.

        Returns:
            The rendered text, one line per row.
        """
        ...
