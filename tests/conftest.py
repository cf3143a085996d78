import pytest

from mstrepair.graph import Edge, Graph


def _make_graph(*triples, declared_vertices=None) -> Graph:
    return Graph.from_edges([Edge(*t) for t in triples], declared_vertices=declared_vertices)


@pytest.fixture
def make_graph():
    return _make_graph


@pytest.fixture
def square_graph():
    return _make_graph((0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4), (0, 2, 5),
                       declared_vertices=4)
