"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    DigraphError,
    EmptyPathError,
    GraphFormatError,
    GraphLoadError,
    ImmutableGraphError,
    NoPathError,
    VertexOutOfRangeError,
)
from .models import Arc, PathResult

__all__ = [
    # Models
    "Arc",
    "PathResult",
    # Errors
    "DigraphError",
    "GraphLoadError",
    "GraphFormatError",
    "VertexOutOfRangeError",
    "EmptyPathError",
    "NoPathError",
    "ImmutableGraphError",
]
