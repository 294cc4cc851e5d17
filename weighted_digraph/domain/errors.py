"""Typed domain errors for the weighted digraph.

Ordinary negative answers (no arc, no path) are returned as values such
as ``math.inf`` or ``False``. These errors cover contract violations and
input failures only.

All errors inherit from DigraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DigraphError(Exception):
    """Base error for the digraph domain.

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
class GraphLoadError(DigraphError):
    """The graph source could not be opened or read.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphFormatError(DigraphError):
    """A line of the text description could not be parsed.

    Attributes:
        line_number: 1-based line number of the offending line
    """

    line_number: int = 0


@dataclass
class VertexOutOfRangeError(DigraphError):
    """A vertex index lies outside ``[0, num_vertices)``.

    Attributes:
        vertex: The offending vertex index
        num_vertices: Vertex count of the graph
    """

    vertex: int = -1
    num_vertices: int = 0


@dataclass
class EmptyPathError(DigraphError):
    """A path-based query received an empty vertex sequence."""


@dataclass
class NoPathError(DigraphError):
    """No path exists between the requested vertices.

    Attributes:
        source: Start vertex
        target: End vertex
    """

    source: int = -1
    target: int = -1


@dataclass
class ImmutableGraphError(DigraphError):
    """An arc insertion was attempted after construction completed."""

