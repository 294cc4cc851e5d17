"""Tests for the digraph query service with in-memory fakes."""

import math
from dataclasses import dataclass

import pytest

from weighted_digraph.adapters.graph import DijkstraPathSolver
from weighted_digraph.domain.errors import EmptyPathError, NoPathError
from weighted_digraph.graph import GraphStore, build_graph
from weighted_digraph.services import DigraphQueryService


@dataclass
class FakeRepository:
    graph: GraphStore
    loads: int = 0

    def load(self) -> GraphStore:
        self.loads += 1
        return self.graph


@pytest.fixture
def repository():
    return FakeRepository(build_graph(4, [(0, 1, 1.0), (0, 2, 4.0), (1, 2, 1.0), (0, 1, 6.0)]))


@pytest.fixture
def service(repository):
    return DigraphQueryService(graph_repository=repository, path_solver=DijkstraPathSolver())


def test_graph_loaded_once(service, repository):
    service.out_degree(0)
    service.arc_weight(0, 1)
    service.summary()

    assert repository.loads == 1


def test_summary_reports_insertion_count(service):
    assert service.summary() == {"vertices": 4, "arcs": 4}


def test_local_queries(service):
    assert service.out_degree(0) == 2
    assert service.arc_weight(0, 1) == 1.0
    assert service.arc_weight(2, 0) == math.inf
    assert service.path_weight([0, 1, 2]) == 2.0
    assert service.path_weight([0, 3]) == math.inf
    assert service.are_connected(3, 3)
    assert not service.are_connected(0, 3)
    assert service.is_path_valid([0, 1, 2])
    assert not service.is_path_valid([2, 1])


def test_reachability(service):
    assert service.does_path_exist(0, 2)
    assert not service.does_path_exist(2, 0)
    assert not service.does_path_exist(0, 3)


def test_shortest_path(service):
    result = service.shortest_path(0, 2)

    assert result.path == (0, 1, 2)
    assert result.total_weight == 2.0


def test_shortest_path_unreachable(service):
    with pytest.raises(NoPathError):
        service.shortest_path(0, 3)


def test_path_weight_empty(service):
    with pytest.raises(EmptyPathError):
        service.path_weight([])
