"""Object-style facade over a sealed GraphStore."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Union

from ..domain.models import PathResult
from . import queries, search
from .builder import ArcLike, build_graph
from .store import GraphStore


class WeightedDigraph:
    """Immutable, edge-weighted directed graph.

    Build it once with ``from_file`` or ``from_arcs``, then query it. The
    instance exposes no way to add or remove arcs.

    Example:
        graph = WeightedDigraph.from_arcs(3, [(0, 1, 2.0), (1, 2, 3.0)])
        graph.get_path_weight([0, 1, 2])  # 5.0
    """

    __slots__ = ("_store",)

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    @classmethod
    def from_arcs(cls, num_vertices: int, arcs: Iterable[ArcLike]) -> WeightedDigraph:
        return cls(build_graph(num_vertices, arcs))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> WeightedDigraph:
        """Build the graph from a text description on disk.

        Raises:
            GraphLoadError: If the file cannot be opened or parsed.
        """
        from ..io.digraph_text import read_digraph_file

        return cls(read_digraph_file(path))

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def num_vertices(self) -> int:
        return self._store.num_vertices

    @property
    def num_arcs(self) -> int:
        return self._store.num_arcs

    def out_arcs(self, vertex: int) -> Mapping[int, float]:
        return self._store.out_arcs(vertex)

    def get_out_degree(self, vertex: int) -> int:
        return queries.get_out_degree(self._store, vertex)

    def get_arc_weight(self, source: int, target: int) -> float:
        return queries.get_arc_weight(self._store, source, target)

    def get_path_weight(self, path: Sequence[int]) -> float:
        return queries.get_path_weight(self._store, path)

    def are_connected(self, source: int, target: int) -> bool:
        return queries.are_connected(self._store, source, target)

    def does_path_exist(self, source: int, target: int) -> bool:
        return search.does_path_exist(self._store, source, target)

    def is_path_valid(self, path: Sequence[int]) -> bool:
        return queries.is_path_valid(self._store, path)

    def find_minimum_weighted_path(self, source: int, target: int) -> List[int]:
        return search.find_minimum_weighted_path(self._store, source, target)

    def shortest_path(self, source: int, target: int) -> PathResult:
        return search.shortest_path_result(self._store, source, target)

    def __repr__(self) -> str:
        return f"WeightedDigraph(num_vertices={self.num_vertices}, num_arcs={self.num_arcs})"
