"""Immutable domain models for the weighted digraph.

All models are frozen dataclasses with slots for memory efficiency.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Arc:
    """A directed, weighted edge between two vertices.

    Attributes:
        source: Vertex the arc leaves from
        target: Vertex the arc points to
        weight: Arc weight (any real number, negatives accepted)
    """

    source: int
    target: int
    weight: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a minimum-weight path computation.

    Attributes:
        path: Ordered tuple of vertices from source to target
        total_weight: Sum of arc weights along the path
    """

    path: tuple[int, ...]
    total_weight: float = math.inf

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_vertices(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.path)
