"""Typed domain errors for the road network engine.

Load failures are raised as typed errors by the parser and the edge
source, then caught by the service, which resets its state and reports
``False``. Query-time problems (unknown labels, no network loaded) are
encoded in sentinel return values instead and never reach this module.

All errors inherit from RoadNetError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadNetError(Exception):
    """Base error for the road network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NetworkError(RoadNetError):
    """A network could not be loaded.

    Attributes:
        source_path: Path of the edge list involved, if any
    """

    source_path: Optional[str] = None


@dataclass
class SourceUnavailableError(NetworkError):
    """The edge list cannot be located or read.

    Attributes:
        searched: Every candidate path that was tried
    """

    searched: tuple[str, ...] = ()


@dataclass
class MalformedRecordError(NetworkError):
    """A line is not a ``source,target,weight`` record.

    Attributes:
        line_number: 1-based number of the offending line
        line: The raw offending line
    """

    line_number: int = 0
    line: str = ""


@dataclass
class UnknownVertexError(RoadNetError):
    """An intersection label is not part of the loaded network.

    Attributes:
        label: The label that was not found
    """

    label: str = ""


@dataclass
class ConfigurationError(RoadNetError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
