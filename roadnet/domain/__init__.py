"""Domain layer - Core models, sentinels and errors.

This module contains immutable domain models and typed errors
used throughout the application.
"""

from .errors import (
    ConfigurationError,
    MalformedRecordError,
    NetworkError,
    RoadNetError,
    SourceUnavailableError,
    UnknownVertexError,
)
from .models import (
    NO_EDGE,
    NOT_FOUND,
    UNREACHABLE,
    EdgeRecord,
    NetworkState,
    VertexIndex,
)

__all__ = [
    # Models
    "EdgeRecord",
    "VertexIndex",
    "NetworkState",
    # Sentinels
    "NO_EDGE",
    "NOT_FOUND",
    "UNREACHABLE",
    # Errors
    "RoadNetError",
    "NetworkError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "UnknownVertexError",
    "ConfigurationError",
]
