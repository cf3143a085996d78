import networkx as nx
import random

from typing import Any, Callable, Iterable

from mstrepair.gconverter import to_bin
from mstrepair.graph import Edge, Graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)


def write_edges(edges: Iterable[Edge], nvertices: int, fname: str, binary: bool=False) -> None:
    edges = list(edges)
    if binary:
        with open(fname, 'wb') as f:
            for num in (nvertices, len(edges), *(n for e in edges for n in e)):
                f.write(to_bin(num))
    else:
        with open(fname, 'w') as f:
            f.write(f'{nvertices} {len(edges)}\n')
            for e in edges:
                f.write(f'{e.u} {e.v} {e.weight}\n')


def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    # Convert node names to index
    edges = [Edge(nodename_to_idx(a), nodename_to_idx(b), decide_weight(a, b))
             for a, b in g.edges]
    write_edges(edges, g.number_of_nodes(), fname, binary=binary)


def reference_mst_weight(graph: Graph) -> int:
    '''
    MST (forest) weight according to networkx, for cross-checking kruskal().
    '''
    mst = nx.minimum_spanning_tree(graph.to_networkx(), algorithm='kruskal')
    return sum(w for _u, _v, w in mst.edges(data='weight'))


def is_connected(graph: Graph) -> bool:
    g = graph.to_networkx()
    return g.number_of_nodes() > 0 and nx.is_connected(g)
