"""File edge source adapter.

Reads an edge list from a text file. A path that does not exist as
given is looked up again under each configured fallback directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ...config import SourceConfig, get_config
from ...domain.errors import SourceUnavailableError


@dataclass
class FileEdgeSource:
    """Edge source backed by the local filesystem.

    This adapter implements EdgeSourcePort.

    Attributes:
        config: Source configuration (fallback directories, encoding)
        base_dir: Directory relative fallbacks are resolved against;
            the current working directory when None
    """

    config: SourceConfig = field(default_factory=lambda: get_config().source)
    base_dir: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def candidates(self, path: Union[str, Path]) -> List[Path]:
        """List the paths tried for ``path``, in lookup order."""
        path = Path(path)
        base_dir = self.base_dir if self.base_dir is not None else Path.cwd()

        found: List[Path] = [path]
        for fallback in self.config.fallback_dirs:
            candidate = base_dir / fallback / path
            if candidate not in found:
                found.append(candidate)
        return found

    def resolve(self, path: Union[str, Path]) -> Path:
        """Return the first existing candidate for ``path``.

        Raises:
            SourceUnavailableError: If no candidate is an existing file.
        """
        tried = self.candidates(path)
        for candidate in tried:
            if candidate.is_file():
                if candidate != tried[0]:
                    self._logger.debug(
                        "Edge list found in fallback directory",
                        extra={"requested": str(path), "resolved": str(candidate)},
                    )
                return candidate

        raise SourceUnavailableError(
            f"Edge list does not exist: {path}",
            source_path=str(path),
            searched=tuple(str(c) for c in tried),
        )

    def read_lines(self, path: Union[str, Path]) -> List[str]:
        """Read the edge list stored at ``path``.

        Args:
            path: Location of the edge list.

        Returns:
            The lines of the file, without line terminators.

        Raises:
            SourceUnavailableError: If the file cannot be located, read
                or decoded.
        """
        resolved = self.resolve(path)
        try:
            text = resolved.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(
                f"Failed to read edge list {resolved}",
                source_path=str(resolved),
                searched=(str(resolved),),
                cause=e,
            )

        lines = text.splitlines()
        self._logger.debug(
            "Edge list read",
            extra={"path": str(resolved), "lines": len(lines)},
        )
        return lines
