"""Digraph query service - Main orchestrator.

This service loads the graph through the repository port on first use
and answers every query against it, delegating minimum-weight paths to
the solver port.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from ..domain.models import PathResult
from ..graph import queries, search
from ..graph.store import GraphStore
from ..ports.graph import GraphRepositoryPort, PathSolverPort


@dataclass
class DigraphQueryService:
    """Main service for querying a loaded digraph.

    Attributes:
        graph_repository: Loads the digraph
        path_solver: Computes minimum-weight paths
    """

    graph_repository: GraphRepositoryPort
    path_solver: PathSolverPort

    _graph: Optional[GraphStore] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> GraphStore:
        """Return the graph, loading it through the repository on first access.

        Raises:
            GraphLoadError: If the repository cannot load the graph.
        """
        if self._graph is None:
            self._graph = self.graph_repository.load()
            self._logger.debug(
                "Graph attached",
                extra={"vertices": self._graph.num_vertices},
            )
        return self._graph

    def summary(self) -> Dict[str, int]:
        """Return vertex and arc counts of the loaded graph."""
        return {
            "vertices": self.graph.vertex_count(),
            "arcs": self.graph.arc_count(),
        }

    def out_degree(self, vertex: int) -> int:
        return queries.get_out_degree(self.graph, vertex)

    def arc_weight(self, source: int, target: int) -> float:
        return queries.get_arc_weight(self.graph, source, target)

    def path_weight(self, path: Sequence[int]) -> float:
        return queries.get_path_weight(self.graph, path)

    def are_connected(self, source: int, target: int) -> bool:
        return queries.are_connected(self.graph, source, target)

    def does_path_exist(self, source: int, target: int) -> bool:
        return search.does_path_exist(self.graph, source, target)

    def is_path_valid(self, path: Sequence[int]) -> bool:
        return queries.is_path_valid(self.graph, path)

    def shortest_path(self, source: int, target: int) -> PathResult:
        """Find a minimum-weight path.

        Raises:
            NoPathError: If ``target`` is unreachable from ``source``.
        """
        return self.path_solver.solve(self.graph, source, target)
