"""Graph construction from an ordered sequence of arcs."""

from __future__ import annotations

import logging
from typing import Iterable, Tuple, Union

from ..domain.models import Arc
from .store import GraphStore

logger = logging.getLogger(__name__)

ArcLike = Union[Arc, Tuple[int, int, float]]


def build_graph(num_vertices: int, arcs: Iterable[ArcLike]) -> GraphStore:
    """Populate a GraphStore from arcs in input order, then seal it.

    Parameters
    ----------
    num_vertices:
        Number of vertices; valid indices are ``[0, num_vertices)``.
    arcs:
        ``Arc`` instances or ``(source, target, weight)`` triples.

    Returns
    -------
    GraphStore
        The populated, sealed store.
    """
    store = GraphStore(num_vertices)

    for arc in arcs:
        if isinstance(arc, Arc):
            store._insert_arc(arc.source, arc.target, arc.weight)
        else:
            source, target, weight = arc
            store._insert_arc(source, target, weight)

    store._seal()
    logger.debug(
        "Graph built",
        extra={"vertices": store.num_vertices, "arcs": store.num_arcs},
    )
    return store
