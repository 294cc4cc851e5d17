"""Graph searches: breadth-first reachability and Dijkstra shortest path.

Both searches are bounded by ``O(V + E)`` (BFS) and ``O((V + E) log V)``
(Dijkstra) and never mutate the store.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from typing import Deque, List, Optional, Tuple

from ..domain.errors import NoPathError
from ..domain.models import PathResult
from .queries import get_path_weight
from .store import GraphStore

logger = logging.getLogger(__name__)


def does_path_exist(graph: GraphStore, source: int, target: int) -> bool:
    """Determine whether ``target`` is reachable from ``source``.

    Breadth-first search over out-arcs with a FIFO frontier. A vertex
    reaches itself through zero arcs.
    """
    graph.check_vertex(source)
    graph.check_vertex(target)

    if source == target:
        return True

    visited: List[bool] = [False] * graph.num_vertices
    visited[source] = True
    queue: Deque[int] = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.out_arcs(u):
            if visited[v]:
                continue
            if v == target:
                return True
            visited[v] = True
            queue.append(v)

    return False


def find_minimum_weighted_path(graph: GraphStore, source: int, target: int) -> List[int]:
    """Compute a minimum-weight path from ``source`` to ``target``.

    Parameters
    ----------
    graph:
        Store as produced by ``build_graph``.
    source:
        Start vertex.
    target:
        End vertex.

    Returns
    -------
    list[int]
        Vertices from ``source`` to ``target`` inclusive. ``[source]`` when
        both ends coincide.

    Raises
    ------
    NoPathError
        If ``target`` cannot be reached from ``source``.

    Only correct for non-negative weights. The frontier is ordered by
    ``(distance, vertex)`` so ties are broken by the smaller vertex id.
    """
    graph.check_vertex(source)
    graph.check_vertex(target)

    if source == target:
        return [source]

    distances: List[float] = [math.inf] * graph.num_vertices
    previous: List[Optional[int]] = [None] * graph.num_vertices
    distances[source] = 0.0

    frontier: List[Tuple[float, int]] = [(0.0, source)]

    while frontier:
        distance, u = heapq.heappop(frontier)

        # Stale entry superseded by a later relaxation.
        if distance > distances[u]:
            continue

        for v, weight in graph.out_arcs(u).items():
            candidate = distance + weight
            if candidate < distances[v]:
                distances[v] = candidate
                previous[v] = u
                heapq.heappush(frontier, (candidate, v))

    if previous[target] is None:
        logger.debug(
            "Target unreachable",
            extra={"source": source, "target": target},
        )
        raise NoPathError(
            f"No path from {source} to {target}",
            source=source,
            target=target,
        )

    path: List[int] = [target]
    current = target
    while current != source:
        current = previous[current]  # type: ignore[assignment]
        path.append(current)

    path.reverse()
    return path


def shortest_path_result(graph: GraphStore, source: int, target: int) -> PathResult:
    """Return the minimum-weight path together with its total weight."""
    path = find_minimum_weighted_path(graph, source, target)
    return PathResult(path=tuple(path), total_weight=get_path_weight(graph, path))
