import numpy as np
import pytest

from roadnet.domain.models import MAX_WEIGHT, NO_EDGE, NOT_FOUND, UNREACHABLE
from roadnet.graph import all_shortest_distances, build_network, parse_edge_records, shortest_distance
from roadnet.graph.parser import parse_edge_text


@pytest.fixture
def network(data_dir):
    text = (data_dir / "network.txt").read_text(encoding="utf-8")
    return build_network(parse_edge_text(text))


@pytest.mark.parametrize(
    "source,target,expected",
    [
        ("A", "B", 3),
        ("A", "C", 1),
        ("A", "D", 8),
        ("D", "B", 6),
        ("E", "B", 8),
        ("B", "A", 8),
    ],
)
def test_shortest_distance(network, source, target, expected):
    assert shortest_distance(network, source, target) == expected


def test_unreachable_target(network):
    assert shortest_distance(network, "A", "E") == UNREACHABLE


def test_same_source_and_target_is_zero(network):
    assert shortest_distance(network, "C", "C") == 0


def test_unknown_labels_are_not_found(network):
    assert shortest_distance(network, "X", "Y") == NOT_FOUND
    assert shortest_distance(network, "A", "Y") == NOT_FOUND
    assert shortest_distance(network, "X", "A") == NOT_FOUND
    assert NOT_FOUND != UNREACHABLE


def test_no_network_is_not_found():
    assert shortest_distance(None, "A", "B") == NOT_FOUND
    assert all_shortest_distances(None) is None


def test_asymmetric_single_edge():
    state = build_network(parse_edge_records(["A,B,5"]))
    assert shortest_distance(state, "A", "B") == 5
    assert shortest_distance(state, "B", "A") == UNREACHABLE

    shortest = all_shortest_distances(state)
    assert shortest[0, 1] == 5
    assert shortest[1, 0] == NO_EDGE


def test_all_pairs_values(network):
    shortest = all_shortest_distances(network)
    index = network.index
    a, b, d, e = (index.position(v) for v in "ABDE")

    assert shortest[a, b] == 3
    assert shortest[a, d] == 8
    assert shortest[e, b] == 8
    assert shortest[a, e] == NO_EDGE
    assert shortest[a, a] == 11


def test_all_pairs_never_exceeds_direct(network):
    shortest = all_shortest_distances(network)
    assert np.all(shortest <= network.distances)


def test_all_pairs_agrees_with_dijkstra(network):
    shortest = all_shortest_distances(network)
    labels = network.vertices
    for i, source in enumerate(labels):
        for j, target in enumerate(labels):
            if i == j or shortest[i, j] == NO_EDGE:
                continue
            assert shortest_distance(network, source, target) == shortest[i, j]


def test_all_pairs_returns_fresh_copy(network):
    before = network.distances.copy()
    first = all_shortest_distances(network)
    first[:] = 0
    second = all_shortest_distances(network)

    assert np.array_equal(network.distances, before)
    assert not np.array_equal(first, second)
    assert first is not network.distances


def test_single_vertex_all_pairs_keeps_diagonal_sentinel():
    state = build_network(parse_edge_records(["Solo,Solo,2"]))
    shortest = all_shortest_distances(state)
    assert shortest.shape == (1, 1)
    assert shortest[0, 0] == NO_EDGE


def test_sentinel_is_never_summed():
    # B is a sink and D a source: relaxing through them must not wrap around.
    state = build_network(parse_edge_records(["A,B,1", "D,B,1", "D,A,2"]))
    shortest = all_shortest_distances(state)

    assert np.all(shortest >= 0)
    b, d = state.index.position("B"), state.index.position("D")
    assert shortest[b, d] == NO_EDGE
    assert shortest[d, b] == 1


def test_heaviest_weights_do_not_wrap_around():
    state = build_network(
        parse_edge_records([f"A,B,{MAX_WEIGHT}", f"B,C,{MAX_WEIGHT}", f"C,D,{MAX_WEIGHT}"])
    )

    assert shortest_distance(state, "A", "C") == 2 * MAX_WEIGHT
    assert shortest_distance(state, "A", "D") == 3 * MAX_WEIGHT

    shortest = all_shortest_distances(state)
    assert shortest[0, 2] == 2 * MAX_WEIGHT
    assert shortest[0, 3] == 3 * MAX_WEIGHT
    assert np.all(shortest > 0)
