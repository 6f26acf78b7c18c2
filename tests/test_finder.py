import random

import pytest

from grinminer.finder import Graph, Solution


def edge_buffer(edges):
    buf = [0, len(edges), 0, 0]
    for node1, node2, nonce in edges:
        buf += [node1, node2, nonce, 0]
    return buf


def cycle_edges(length, first_nonce=100):
    """Edges (c_i, n_i) where c_{i+1} == n_i ^ 1, closing back on c_0."""
    ns = [1000 + 2 * i for i in range(length)]
    cs = [ns[i - 1] ^ 1 for i in range(length)]
    return [(c, n, first_nonce + i) for i, (c, n) in enumerate(zip(cs, ns))]


def test_finds_single_42_cycle():
    edges = cycle_edges(42)
    sols = Graph.search(edge_buffer(edges))
    assert len(sols) == 1
    assert sols[0].nonces == [nonce for _, _, nonce in edges]


def test_cycle_found_regardless_of_edge_order():
    edges = cycle_edges(42)
    shuffled = edges[:]
    random.Random(7).shuffle(shuffled)
    sols = Graph.search(edge_buffer(shuffled))
    assert len(sols) == 1
    assert sols[0].nonces == sorted(nonce for _, _, nonce in edges)
    assert len(sols[0].nonces) == 42


def test_short_cycle_is_not_a_solution():
    assert Graph.search(edge_buffer(cycle_edges(10))) == []


def test_long_cycle_is_not_a_solution():
    assert Graph.search(edge_buffer(cycle_edges(50))) == []


def test_dangling_edges_do_not_add_solutions():
    edges = cycle_edges(42) + [(5000, 5002, 7), (5003, 5004, 8)]
    sols = Graph.search(edge_buffer(edges))
    assert [s.nonces for s in sols] == [list(range(100, 142))]


def test_empty_edge_list():
    assert Graph.search([0, 0, 0, 0]) == []


def test_buffer_too_short_raises():
    with pytest.raises(ValueError):
        Graph.search([0, 3, 0, 0, 1, 2, 3, 0])
    with pytest.raises(ValueError):
        Graph.search([0])


def test_graph_counts():
    graph = Graph(cycle_edges(42))
    assert graph.node_count() == 84
    assert graph.edge_count() == 42


def test_solution_is_plain_data():
    sol = Solution([3, 1])
    assert sol == Solution([3, 1])
    assert Solution().nonces == []