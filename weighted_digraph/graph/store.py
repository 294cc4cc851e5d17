"""Adjacency storage for the weighted digraph.

The store owns the vertex count and, for each vertex, a mapping from
destination vertex to arc weight. It is populated once by the builder
and sealed afterwards.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping

from ..domain.errors import ImmutableGraphError, VertexOutOfRangeError

logger = logging.getLogger(__name__)


class GraphStore:
    """Per-vertex out-arc mappings plus the vertex and insertion counts.

    ``num_arcs`` counts insertion attempts, so it overcounts distinct arcs
    when the input repeats a source/destination pair.
    """

    __slots__ = ("_num_vertices", "_num_arcs", "_out_arcs", "_sealed")

    def __init__(self, num_vertices: int) -> None:
        if isinstance(num_vertices, bool) or not isinstance(num_vertices, int):
            raise ValueError(f"Vertex count must be an integer, got {num_vertices!r}")
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {num_vertices}")

        self._num_vertices = num_vertices
        self._num_arcs = 0
        self._out_arcs: List[Dict[int, float]] = [{} for _ in range(num_vertices)]
        self._sealed = False

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_arcs(self) -> int:
        return self._num_arcs

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def vertex_count(self) -> int:
        """Return the total number of vertices."""
        return self._num_vertices

    def arc_count(self) -> int:
        """Return the number of insertion attempts, duplicates included."""
        return self._num_arcs

    def out_arcs(self, vertex: int) -> Mapping[int, float]:
        """Return a read-only view of the arcs leaving ``vertex``."""
        self.check_vertex(vertex)
        return MappingProxyType(self._out_arcs[vertex])

    def check_vertex(self, vertex: int) -> None:
        """Raise VertexOutOfRangeError unless ``vertex`` is a valid index."""
        if not 0 <= vertex < self._num_vertices:
            raise VertexOutOfRangeError(
                f"Vertex {vertex} outside [0, {self._num_vertices})",
                vertex=vertex,
                num_vertices=self._num_vertices,
            )

    def _insert_arc(self, source: int, target: int, weight: float) -> None:
        # First insertion wins; the counter moves on every attempt.
        if self._sealed:
            raise ImmutableGraphError(
                f"Cannot insert arc {source} -> {target} into a sealed graph"
            )
        self.check_vertex(source)
        self.check_vertex(target)

        arcs = self._out_arcs[source]
        if target in arcs:
            logger.debug(
                "Duplicate arc ignored",
                extra={
                    "source": source,
                    "target": target,
                    "kept_weight": arcs[target],
                    "ignored_weight": weight,
                },
            )
        else:
            arcs[target] = float(weight)
        self._num_arcs += 1

    def _seal(self) -> None:
        self._sealed = True

    def __repr__(self) -> str:
        return (
            f"GraphStore(num_vertices={self._num_vertices}, "
            f"num_arcs={self._num_arcs})"
        )
