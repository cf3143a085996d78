import logging

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from mstrepair.components import Components, analyze_components
from mstrepair.graph import Edge, Graph
from mstrepair.kruskal import is_spanning_tree, kruskal, total_weight
from mstrepair.replacement import find_replacement_edge

logger = logging.getLogger(__name__)

# Picks the index of the forest edge that fails
FailurePolicy = Callable[[list[Edge]], int]


def heaviest_edge(forest: list[Edge]) -> int:
    # the forest is sorted ascending, so the last edge is the heaviest
    return len(forest) - 1


def edge_at(index: int) -> FailurePolicy:
    return lambda _forest: index


class Status(Enum):
    REPAIRED = 'repaired'
    DISCONNECTED = 'disconnected'
    UNREPAIRABLE = 'unrepairable'


@dataclass
class RepairResult:
    status: Status
    mst: list[Edge]
    removed: Optional[Edge] = None
    components: Optional[Components] = None
    replacement: Optional[Edge] = None
    forest: list[Edge] = field(default_factory=list)

    @property
    def mst_weight(self) -> int:
        return total_weight(self.mst)

    @property
    def final_weight(self) -> Optional[int]:
        if self.status is not Status.REPAIRED:
            return None
        return total_weight(self.forest)


def print_edges(edges: list[Edge], out: Callable[[str], None]) -> None:
    for e in edges:
        out(f'  {e}')


def run_pipeline(graph: Graph,
                 out: Callable[[str], None]=print,
                 fail_edge: FailurePolicy=heaviest_edge) -> RepairResult:
    '''
    Build the MST, fail one of its edges, and look for the cheapest edge
    that reconnects the two halves. Every report line goes through `out`.
    '''
    n = graph.n_vertices
    declared = graph.declared_vertices if graph.declared_vertices is not None else n
    out(f'read: {declared} vertices, {graph.n_edges} edges.')

    out('=== original graph ===')
    print_edges(list(graph.edges), out)

    mst = kruskal(graph.edges, n)
    out('')
    out('=== MST ===')
    print_edges(mst, out)
    out(f'total MST weight: {total_weight(mst)}')

    if not is_spanning_tree(mst, n):
        logger.info('MST has %d edges, %d needed', len(mst), max(n - 1, 0))
        out('the graph is not connected, no MST exists.')
        return RepairResult(Status.DISCONNECTED, mst, forest=list(mst))

    forest = list(mst)
    idx = fail_edge(forest)
    if not 0 <= idx < len(forest):
        raise IndexError(f'failure policy chose edge {idx}, forest has {len(forest)}')
    removed = forest.pop(idx)
    out('')
    out('=== removed edge ===')
    out(f'removed: {removed}')

    components = analyze_components(n, forest)
    logger.debug('%d components after removing %s', len(components), removed)
    out('')
    out('=== connected components after removal ===')
    for i, members in enumerate(components):
        out(f'component {i}: {sorted(members)}')

    replacement = find_replacement_edge(graph.edges, removed, components)
    if replacement is None:
        out('')
        out('no replacement edge was found, the graph is broken beyond repair.')
        return RepairResult(Status.UNREPAIRABLE, mst, removed, components, forest=forest)

    out('')
    out('=== replacement edge ===')
    out(f'adding: {replacement}')
    forest.append(replacement)
    forest.sort(key=lambda e: e.weight)

    out('')
    out('=== new MST ===')
    print_edges(forest, out)
    out(f'new total MST weight: {total_weight(forest)}')
    return RepairResult(Status.REPAIRED, mst, removed, components, replacement, forest)
