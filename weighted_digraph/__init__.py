"""Top-level package for the weighted digraph toolkit.

The package builds an immutable, edge-weighted directed graph once from a
textual description and answers structural and shortest-path queries
against it (out-degree, arc weight, path weight, adjacency, reachability
and minimum-weight paths).
"""

from .graph.digraph import WeightedDigraph

__version__ = "0.1.0"

__all__ = ["WeightedDigraph", "__version__"]
