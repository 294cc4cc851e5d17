"""Dijkstra Path Solver adapter.

This adapter wraps the Dijkstra search in ``graph.search`` and adds:
- Domain model output (PathResult)
- Logging
- A non-raising variant
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ...domain.errors import NoPathError
from ...domain.models import PathResult
from ...graph.search import shortest_path_result
from ...graph.store import GraphStore


@dataclass
class DijkstraPathSolver:
    """Path solver using Dijkstra's shortest path algorithm.

    This adapter implements PathSolverPort. Weights are assumed
    non-negative.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphStore, source: int, target: int) -> PathResult:
        """Find a minimum-weight path between two vertices.

        Args:
            graph: The digraph to search.
            source: Start vertex.
            target: End vertex.

        Returns:
            PathResult with path and total weight.

        Raises:
            VertexOutOfRangeError: If either vertex is not in the graph.
            NoPathError: If no path exists.
        """
        self._logger.debug(
            "Solving path",
            extra={"source": source, "target": target},
        )

        try:
            result = shortest_path_result(graph, source, target)
        except NoPathError:
            self._logger.warning(
                "No path found",
                extra={"source": source, "target": target},
            )
            raise

        self._logger.info(
            "Path found",
            extra={
                "source": source,
                "target": target,
                "vertices": result.num_vertices,
                "total_weight": result.total_weight,
            },
        )
        return result

    def solve_safe(self, graph: GraphStore, source: int, target: int) -> PathResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty PathResult with infinite weight
        instead of raising NoPathError.
        """
        try:
            return shortest_path_result(graph, source, target)
        except NoPathError:
            return PathResult(path=(), total_weight=math.inf)
