from typing import Iterable

from mstrepair.graph import Edge
from mstrepair.unionfind import UnionFind


def total_weight(edges: Iterable[Edge]) -> int:
    return sum(e.weight for e in edges)


def kruskal(edges: Iterable[Edge], n_vertices: int) -> list[Edge]:
    '''
    Minimum spanning forest by Kruskal's algorithm.

    Edges of equal weight are taken in input order (sorted() is stable).
    Fewer than n_vertices - 1 edges in the result means the graph is not
    connected.
    '''
    uf = UnionFind(n_vertices)
    mst = []

    for edge in sorted(edges, key=lambda e: e.weight):
        if uf.union(edge.u, edge.v):
            mst.append(edge)
            if len(mst) == n_vertices - 1:
                break

    return mst


def is_spanning_tree(forest: list[Edge], n_vertices: int) -> bool:
    # an empty forest has no edge to fail, even when n_vertices is 1
    return len(forest) > 0 and len(forest) == n_vertices - 1
