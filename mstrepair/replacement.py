from typing import Iterable, Optional

from mstrepair.components import Components
from mstrepair.graph import Edge


def find_replacement_edge(edges: Iterable[Edge],
                          removed: Edge,
                          components: Components) -> Optional[Edge]:
    '''
    Cheapest edge joining two different components, or None.

    The removed edge is skipped by value, so an identical parallel copy of it
    is skipped too. On equal weights the earliest edge wins.
    '''
    best = None

    for edge in edges:
        if edge == removed:
            continue

        c1 = components.index_of(edge.u)
        c2 = components.index_of(edge.v)
        if c1 != c2 and (best is None or edge.weight < best.weight):
            best = edge

    return best
