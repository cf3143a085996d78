import random

import pytest

from mstrepair.graph import Edge, Graph
from mstrepair.kruskal import kruskal, total_weight
from mstrepair.components import analyze_components
from mstrepair.nx_utils import is_connected
from mstrepair.pipeline import Status, edge_at, heaviest_edge, run_pipeline


def run(graph, **kwargs):
    lines = []
    result = run_pipeline(graph, out=lines.append, **kwargs)
    return result, lines


def test_square_scenario(square_graph):
    result, lines = run(square_graph)

    assert result.status is Status.REPAIRED
    assert result.mst == [Edge(0, 1, 1), Edge(1, 2, 2), Edge(2, 3, 3)]
    assert result.mst_weight == 6
    assert result.removed == Edge(2, 3, 3)
    assert result.components.members == [{0, 1, 2}, {3}]
    assert result.replacement == Edge(3, 0, 4)
    assert result.forest == [Edge(0, 1, 1), Edge(1, 2, 2), Edge(3, 0, 4)]
    assert result.final_weight == 7

    assert lines == [
        'read: 4 vertices, 5 edges.',
        '=== original graph ===',
        '  (0 — 1, w=1)',
        '  (1 — 2, w=2)',
        '  (2 — 3, w=3)',
        '  (3 — 0, w=4)',
        '  (0 — 2, w=5)',
        '',
        '=== MST ===',
        '  (0 — 1, w=1)',
        '  (1 — 2, w=2)',
        '  (2 — 3, w=3)',
        'total MST weight: 6',
        '',
        '=== removed edge ===',
        'removed: (2 — 3, w=3)',
        '',
        '=== connected components after removal ===',
        'component 0: [0, 1, 2]',
        'component 1: [3]',
        '',
        '=== replacement edge ===',
        'adding: (3 — 0, w=4)',
        '',
        '=== new MST ===',
        '  (0 — 1, w=1)',
        '  (1 — 2, w=2)',
        '  (3 — 0, w=4)',
        'new total MST weight: 7',
    ]


def test_isolated_vertex_halts_after_mst(make_graph):
    g = make_graph((0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4), (4, 4, 1))
    assert g.n_vertices == 5

    result, lines = run(g)
    assert result.status is Status.DISCONNECTED
    assert result.removed is None
    assert result.final_weight is None
    assert lines[-1] == 'the graph is not connected, no MST exists.'
    assert not any('removed' in line or 'replacement' in line for line in lines)


def test_empty_graph_is_disconnected(make_graph):
    result, lines = run(make_graph())
    assert result.status is Status.DISCONNECTED
    assert lines[0] == 'read: 0 vertices, 0 edges.'


def test_single_vertex_self_loop_is_disconnected(make_graph):
    g = make_graph((0, 0, 5), declared_vertices=1)
    assert g.n_vertices == 1

    result, lines = run(g)
    assert result.status is Status.DISCONNECTED
    assert result.mst == []
    assert result.removed is None
    assert lines[-1] == 'the graph is not connected, no MST exists.'


def test_bridge_is_unrepairable(make_graph):
    g = make_graph((0, 1, 1), (1, 2, 2), (2, 0, 3), (2, 3, 9))
    result, lines = run(g)

    assert result.status is Status.UNREPAIRABLE
    assert result.removed == Edge(2, 3, 9)
    assert result.replacement is None
    # forest stays in its reduced state
    assert result.forest == [Edge(0, 1, 1), Edge(1, 2, 2)]
    assert lines[-1] == 'no replacement edge was found, the graph is broken beyond repair.'
    assert not any('new MST' in line for line in lines)


def test_custom_failure_policy(square_graph):
    result, _ = run(square_graph, fail_edge=edge_at(0))
    assert result.removed == Edge(0, 1, 1)
    assert result.replacement == Edge(3, 0, 4)
    assert result.forest == [Edge(1, 2, 2), Edge(2, 3, 3), Edge(3, 0, 4)]


def test_failure_policy_out_of_range(square_graph):
    with pytest.raises(IndexError):
        run(square_graph, fail_edge=edge_at(3))


def test_heaviest_edge_is_last():
    forest = [Edge(0, 1, 1), Edge(1, 2, 4)]
    assert heaviest_edge(forest) == 1


def test_does_not_touch_graph(square_graph):
    before = square_graph.edges
    run(square_graph)
    assert square_graph.edges == before


def test_running_twice_is_identical(square_graph):
    assert run(square_graph)[1] == run(square_graph)[1]


@pytest.mark.parametrize('seed', range(20))
def test_repair_is_cheapest_reconnection(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 8)
    edges = [Edge(i, i + 1, rng.randint(1, 20)) for i in range(n - 1)]
    edges += [Edge(rng.randrange(n), rng.randrange(n), rng.randint(1, 20)) for _ in range(n)]
    g = Graph.from_edges(edges)
    assert is_connected(g)

    result, _ = run(g)
    assert len(result.components) == 2
    crossing = [e for e in g.edges
                if e != result.removed
                and result.components.index_of(e.u) != result.components.index_of(e.v)]
    if not crossing:
        assert result.status is Status.UNREPAIRABLE
        return

    assert result.status is Status.REPAIRED
    assert result.replacement.weight == min(e.weight for e in crossing)
    assert len(analyze_components(n, result.forest)) == 1
    assert result.forest == sorted(result.forest, key=lambda e: e.weight)
    assert total_weight(result.forest) >= total_weight(kruskal(g.edges, n))
