"""Local queries answered from a vertex's own out-arcs.

Absence of an arc is reported as ``math.inf`` or ``False``, never as an
exception. Invalid vertex indices raise VertexOutOfRangeError.
"""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Sequence

from ..domain.errors import EmptyPathError
from .store import GraphStore


def get_out_degree(graph: GraphStore, vertex: int) -> int:
    """Return the number of distinct destinations reachable by one arc."""
    return len(graph.out_arcs(vertex))


def get_arc_weight(graph: GraphStore, source: int, target: int) -> float:
    """Return the weight of ``source -> target``, or infinity if absent."""
    graph.check_vertex(target)
    return graph.out_arcs(source).get(target, math.inf)


def are_connected(graph: GraphStore, source: int, target: int) -> bool:
    """Check for a direct arc ``source -> target``.

    A vertex is always reported connected to itself, whether or not a
    self-loop arc was inserted. This does not traverse multiple hops; use
    ``does_path_exist`` for reachability.
    """
    graph.check_vertex(target)
    return target in graph.out_arcs(source) or source == target


def is_path_valid(graph: GraphStore, path: Sequence[int]) -> bool:
    """Check that every consecutive pair of ``path`` is a direct arc.

    Paths of length 0 or 1 are trivially valid. The last vertex's own
    out-arcs play no part in validity.
    """
    for vertex in path:
        graph.check_vertex(vertex)

    for prev, curr in pairwise(path):
        if curr not in graph.out_arcs(prev):
            return False
    return True


def get_path_weight(graph: GraphStore, path: Sequence[int]) -> float:
    """Sum arc weights along ``path``.

    Returns infinity if the path is broken and ``0.0`` for a single vertex.

    Raises:
        EmptyPathError: If ``path`` has no vertices.
    """
    if len(path) == 0:
        raise EmptyPathError("Path weight is undefined for an empty path")
    if not is_path_valid(graph, path):
        return math.inf

    total = 0.0
    for prev, curr in pairwise(path):
        total += graph.out_arcs(prev)[curr]
    return total
