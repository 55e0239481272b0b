"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph engine and the
collaborators around it: where edge lists come from and how matrices
are shown.
"""

from .rendering import MatrixRendererPort
from .source import EdgeSourcePort

__all__ = [
    "EdgeSourcePort",
    "MatrixRendererPort",
]
