"""Edge source adapters - Implementations of EdgeSourcePort.

Available implementations:
- FileEdgeSource: Reads edge lists from text files with fallback directories
"""

from .file_source import FileEdgeSource

__all__ = ["FileEdgeSource"]
