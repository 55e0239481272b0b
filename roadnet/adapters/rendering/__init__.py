"""Rendering adapters - Implementations of MatrixRendererPort.

Available implementations:
- FixedWidthTableRenderer: Plain-text table for console output
"""

from .table_renderer import FixedWidthTableRenderer

__all__ = ["FixedWidthTableRenderer"]
