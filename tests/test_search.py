import pytest

from weighted_digraph.domain.errors import NoPathError, VertexOutOfRangeError
from weighted_digraph.graph import (
    build_graph,
    does_path_exist,
    find_minimum_weighted_path,
    shortest_path_result,
)


def test_does_path_exist_follows_chain():
    graph = build_graph(3, [(0, 1, 2.0), (1, 2, 3.0)])

    assert does_path_exist(graph, 0, 2)
    assert does_path_exist(graph, 0, 1)
    assert not does_path_exist(graph, 2, 0)


def test_does_path_exist_from_vertex_to_itself():
    graph = build_graph(2, [(0, 1, 1.0)])
    assert does_path_exist(graph, 1, 1)


def test_does_path_exist_through_cycle():
    graph = build_graph(4, [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0), (2, 3, 1.0)])

    assert does_path_exist(graph, 1, 3)
    assert does_path_exist(graph, 3, 3)
    assert not does_path_exist(graph, 3, 0)


def test_does_path_exist_disconnected_components():
    graph = build_graph(4, [(0, 1, 1.0), (2, 3, 1.0)])

    assert not does_path_exist(graph, 0, 3)
    assert does_path_exist(graph, 2, 3)


def test_does_path_exist_rejects_unknown_vertex():
    graph = build_graph(2, [])
    with pytest.raises(VertexOutOfRangeError):
        does_path_exist(graph, 0, 2)


def test_minimum_path_prefers_cheaper_detour():
    graph = build_graph(3, [(0, 1, 1.0), (0, 2, 4.0), (1, 2, 1.0)])

    assert find_minimum_weighted_path(graph, 0, 2) == [0, 1, 2]


def test_minimum_path_to_self_is_single_vertex():
    graph = build_graph(3, [(0, 1, 1.0)])
    for vertex in range(3):
        assert find_minimum_weighted_path(graph, vertex, vertex) == [vertex]


def test_minimum_path_direct_arc():
    graph = build_graph(2, [(0, 1, 10.0)])
    assert find_minimum_weighted_path(graph, 0, 1) == [0, 1]


def test_minimum_path_classic_example():
    graph = build_graph(
        6,
        [
            (0, 1, 7.0),
            (0, 2, 9.0),
            (0, 5, 14.0),
            (1, 2, 10.0),
            (1, 3, 15.0),
            (2, 3, 11.0),
            (2, 5, 2.0),
            (3, 4, 6.0),
            (5, 4, 9.0),
        ],
    )

    result = shortest_path_result(graph, 0, 4)

    assert list(result.path) == [0, 2, 5, 4]
    assert result.total_weight == 20.0


def test_minimum_path_tie_broken_by_vertex_id():
    # Two equal-weight routes to 3, arc to 2 inserted first; vertex 1 still settles first.
    graph = build_graph(4, [(0, 2, 1.0), (0, 1, 1.0), (2, 3, 1.0), (1, 3, 1.0)])
    assert find_minimum_weighted_path(graph, 0, 3) == [0, 1, 3]


def test_minimum_path_unreachable_raises():
    graph = build_graph(3, [(0, 1, 1.0)])

    with pytest.raises(NoPathError) as excinfo:
        find_minimum_weighted_path(graph, 0, 2)

    assert excinfo.value.source == 0
    assert excinfo.value.target == 2


def test_minimum_path_zero_weight_arcs():
    graph = build_graph(3, [(0, 1, 0.0), (1, 2, 0.0), (0, 2, 1.0)])

    result = shortest_path_result(graph, 0, 2)

    assert list(result.path) == [0, 1, 2]
    assert result.total_weight == 0.0
