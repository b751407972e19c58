import math

import pytest

from wordgraph.adapters.collections import FifoQueue
from wordgraph.graph import Graph, dijkstra, path_weight, pop_min, shortest_path


def _build(names, edges):
    graph = Graph(capacity=len(names))
    for name in names:
        graph.add_vertex(name)
    for src, dest, weight in edges:
        graph.add_edge(graph.name_to_id(src), graph.name_to_id(dest), weight)
    return graph


def test_shortest_path_direct_edge():
    graph = _build("AB", [("A", "B", 10)])

    assert shortest_path(graph, 0, 1) == [0, 1]


def test_shortest_path_prefers_lighter_detour():
    # A can reach C directly, but A->B->C is shorter
    graph = _build("ABC", [("A", "B", 3), ("A", "C", 10), ("B", "C", 4)])

    path = shortest_path(graph, 0, 2)

    assert path == [0, 1, 2]
    assert path_weight(graph, path) == 7


def test_shortest_path_uses_minimum_multi_edge():
    graph = _build(
        "ABC",
        [("A", "B", 3), ("A", "C", 10), ("B", "C", 4), ("A", "C", 6)],
    )

    path = shortest_path(graph, 0, 2)

    assert path == [0, 2]
    assert path_weight(graph, path) == 6


def test_shortest_path_ladder_scenario():
    graph = _build(
        ["cat", "bat", "bad", "zzz"],
        [("cat", "bat", 1), ("bat", "bad", 1)],
    )
    cat, bad, zzz = (graph.name_to_id(w) for w in ("cat", "bad", "zzz"))

    path = shortest_path(graph, cat, bad)

    assert [graph.id_to_name(v) for v in path] == ["cat", "bat", "bad"]
    assert shortest_path(graph, cat, zzz) == []


def test_shortest_path_to_self():
    graph = _build("AB", [("A", "B", 1)])

    assert shortest_path(graph, 0, 0) == [0]
    assert shortest_path(graph, 1, 1) == [1]


def test_shortest_path_ignores_edge_direction_backwards():
    graph = _build("AB", [("A", "B", 1)])

    assert shortest_path(graph, 1, 0) == []


def test_shortest_path_invalid_endpoints():
    graph = _build("AB", [("A", "B", 1)])

    assert shortest_path(graph, 0, 2) is None
    assert shortest_path(graph, -1, 1) is None


def test_unreachable_is_empty_not_none():
    graph = _build("AB", [])

    path = shortest_path(graph, 0, 1)

    assert path is not None
    assert path == []


def test_dijkstra_distances_and_predecessors():
    graph = _build(
        "ABCDE",
        [
            ("A", "B", 2),
            ("A", "C", 5),
            ("B", "C", 1),
            ("C", "D", 2),
            ("B", "D", 7),
            ("D", "A", 1),
        ],
    )

    distance, predecessor = dijkstra(graph, 0)

    assert distance[:4] == [0, 2, 3, 5]
    assert math.isinf(distance[4])
    assert predecessor == [None, 0, 1, 2, None]


def test_path_weight_matches_computed_distance():
    graph = _build(
        "ABCDEF",
        [
            ("A", "B", 7),
            ("A", "C", 9),
            ("A", "F", 14),
            ("B", "C", 10),
            ("B", "D", 15),
            ("C", "D", 11),
            ("C", "F", 2),
            ("D", "E", 6),
            ("E", "F", 9),
            ("F", "E", 9),
            ("C", "F", 1),
        ],
    )
    distance, _ = dijkstra(graph, 0)

    for dest in range(graph.num_vertices):
        path = shortest_path(graph, 0, dest)
        assert path[0] == 0
        assert path[-1] == dest
        assert path_weight(graph, path) == distance[dest]


def test_dijkstra_invalid_source():
    graph = _build("A", [])

    assert dijkstra(graph, 3) is None


def test_pop_min_returns_smallest_and_keeps_order():
    queue = FifoQueue.of([0, 1, 2, 3])

    assert pop_min(queue, [5, 1, 4, 0]) == 3
    assert [queue.dequeue() for _ in range(len(queue))] == [0, 1, 2]


def test_pop_min_tie_goes_to_front_of_queue():
    queue = FifoQueue.of([2, 0, 1])

    assert pop_min(queue, [1, 1, 3]) == 0
    assert [queue.dequeue() for _ in range(len(queue))] == [2, 1]


def test_pop_min_empty_queue():
    with pytest.raises(IndexError):
        pop_min(FifoQueue(), [])
