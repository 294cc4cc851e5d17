"""Text Graph Repository adapter.

This adapter wraps the text-format reader and adds:
- Configuration injection (path from config)
- Caching of the built graph
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...graph.store import GraphStore
from ...io.digraph_text import read_digraph_file


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a line-oriented text file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file name)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[GraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the digraph from the configured text file.

        Returns:
            The sealed graph store.

        Raises:
            GraphLoadError: If the file cannot be opened or parsed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={"graph_path": str(self.config.graph_path)},
        )

        graph = read_digraph_file(self.config.graph_path)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.num_vertices, "arcs": graph.num_arcs},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
