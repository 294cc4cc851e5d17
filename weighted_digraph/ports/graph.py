"""Graph ports - Abstractions for graph loading and path solving.

These protocols define the contracts for graph operations: loading the
digraph from persistent storage and computing minimum-weight paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the digraph
    from persistent storage.
    """

    def load(self) -> GraphStore:
        """Load the digraph.

        Returns:
            The sealed graph store.
        """
        ...


class PathSolverPort(Protocol):
    """Port for minimum-weight path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: GraphStore, source: int, target: int) -> PathResult:
        """Find a minimum-weight path between two vertices.

        Args:
            graph: The digraph to search.
            source: Start vertex.
            target: End vertex.

        Returns:
            PathResult with the path and its total weight.
        """
        ...
