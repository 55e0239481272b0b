"""Fixed-width table renderer adapter.

Lays a distance matrix out as a console table: a header row of
intersection labels, then one row per intersection. Cells with no edge
(or no path) and self-distances on the diagonal show a placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from ...config import DisplayConfig, get_config
from ...domain.errors import ConfigurationError
from ...domain.models import NO_EDGE


@dataclass
class FixedWidthTableRenderer:
    """Plain-text matrix renderer.

    This adapter implements MatrixRendererPort. Every cell, including
    the leading label column, is left-justified to ``cell_width`` and
    followed by ``separator``. Longer values are not truncated.
    """

    config: DisplayConfig = field(default_factory=lambda: get_config().display)

    def __post_init__(self) -> None:
        if self.config.cell_width < 1:
            raise ConfigurationError(
                f"Cell width must be positive, got {self.config.cell_width}",
                setting_name="cell_width",
                expected_type="int >= 1",
            )

    def _cell(self, text: str) -> str:
        return text.ljust(self.config.cell_width) + self.config.separator

    def render(self, vertices: Sequence[str], matrix: np.ndarray) -> str:
        """Render ``matrix`` with ``vertices`` as row and column headers.

        Args:
            vertices: Intersection labels, in matrix order.
            matrix: ``n x n`` distances with ``NO_EDGE`` for no edge/path.

        Returns:
            The table, rows separated by newlines.
        """
        if matrix.shape != (len(vertices), len(vertices)):
            raise ValueError(
                f"Matrix shape {matrix.shape} does not match {len(vertices)} vertices"
            )

        placeholder = self.config.placeholder
        lines: List[str] = [
            self._cell("") + "".join(self._cell(label) for label in vertices)
        ]
        for i, label in enumerate(vertices):
            cells = [self._cell(label)]
            for j, value in enumerate(matrix[i].tolist()):
                if i == j or value == NO_EDGE:
                    cells.append(self._cell(placeholder))
                else:
                    cells.append(self._cell(str(value)))
            lines.append("".join(cells))
        return "\n".join(lines)
