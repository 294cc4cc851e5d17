"""In-memory weighted digraph and the algorithms that query it.

This subpackage contains the adjacency store, the builder that
populates it once, and the read-only queries (local lookups, BFS
reachability and Dijkstra shortest paths).
"""

from .builder import build_graph
from .digraph import WeightedDigraph
from .queries import (
    are_connected,
    get_arc_weight,
    get_out_degree,
    get_path_weight,
    is_path_valid,
)
from .search import does_path_exist, find_minimum_weighted_path, shortest_path_result
from .store import GraphStore

__all__ = [
    "GraphStore",
    "WeightedDigraph",
    "build_graph",
    "get_out_degree",
    "get_arc_weight",
    "get_path_weight",
    "are_connected",
    "is_path_valid",
    "does_path_exist",
    "find_minimum_weighted_path",
    "shortest_path_result",
]
