"""Edge source port - Abstraction for reading edge lists."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Union


class EdgeSourcePort(Protocol):
    """Port for obtaining the raw lines of an edge list.

    Implementation: adapters/source/file_source.py

    The source resolves a path and returns its lines. It does not parse
    them; that is the graph engine's job.
    """

    def read_lines(self, path: Union[str, Path]) -> List[str]:
        """Read the edge list stored at ``path``.

        Args:
            path: Location of the edge list, as given by the caller.

        Returns:
            The lines of the edge list, without line terminators.

        Raises:
            SourceUnavailableError: If the edge list cannot be located
                or read.
        """
        ...
