import logging

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import networkx as nx

from mstrepair.errors import GraphReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    u: int
    v: int
    weight: int

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        return Edge(*[int(token) for token in parts])

    def __iter__(self) -> Iterator[int]:
        return iter((self.u, self.v, self.weight))

    def __str__(self):
        return f'({self.u} — {self.v}, w={self.weight})'


def vertex_count(edges: Iterable[Edge]) -> int:
    '''
    Number of vertices implied by the edge endpoints, 1 + the largest id.
    '''
    return max((max(e.u, e.v) for e in edges), default=-1) + 1


@dataclass(frozen=True)
class Graph:
    edges: tuple[Edge, ...]
    n_vertices: int
    declared_vertices: Optional[int] = None

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], declared_vertices: Optional[int]=None) -> 'Graph':
        edges = tuple(edges)
        n = vertex_count(edges)
        # the header's vertex count is informational only
        if declared_vertices is not None and declared_vertices != n:
            logger.debug('declared %d vertices but edges imply %d', declared_vertices, n)
        return cls(edges, n, declared_vertices)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def to_networkx(self) -> nx.MultiGraph:
        g = nx.MultiGraph()
        g.add_nodes_from(range(self.n_vertices))
        for edge in self.edges:
            g.add_edge(edge.u, edge.v, weight=edge.weight)
        return g


def _from_numbers(nums: list[int], fname: str) -> Graph:
    if len(nums) < 2:
        raise GraphReadError(f'{fname}: missing "<nvertices> <nedges>" header')

    nvertices, nedges = nums[0], nums[1]
    body = nums[2:]
    if nedges < 0 or len(body) < 3 * nedges:
        raise GraphReadError(f'{fname}: expected {nedges} edges, found {len(body) // 3}')

    edges = [Edge(*body[3*i:3*i + 3]) for i in range(nedges)]
    for edge in edges:
        if edge.u < 0 or edge.v < 0:
            raise GraphReadError(f'{fname}: negative vertex id in edge {edge}')

    logger.info('read %d vertices, %d edges from %s', nvertices, nedges, fname)
    return Graph.from_edges(edges, declared_vertices=nvertices)


def read_graph(fname: str) -> Graph:
    '''
    File format:

    <nvertices> <nedges>
    <v1> <v2> <w>
    ...
    '''
    try:
        with open(fname, 'r') as f:
            tokens = f.read().split()
    except FileNotFoundError as e:
        raise GraphReadError(f'file {fname} not found!') from e
    except OSError as e:
        raise GraphReadError(f'file {fname} could not be read: {e}') from e

    try:
        nums = [int(token) for token in tokens]
    except ValueError as e:
        raise GraphReadError(f'{fname}: {e}') from e

    return _from_numbers(nums, fname)


def read_graph_binary(fname: str) -> Graph:
    '''
    Same layout as read_graph, every number a 4-byte little-endian int.
    '''
    try:
        with open(fname, 'rb') as f:
            data = f.read()
    except FileNotFoundError as e:
        raise GraphReadError(f'file {fname} not found!') from e
    except OSError as e:
        raise GraphReadError(f'file {fname} could not be read: {e}') from e

    if len(data) % 4:
        raise GraphReadError(f'{fname}: size {len(data)} is not a multiple of 4 bytes')

    nums = [int.from_bytes(data[i:i + 4], byteorder='little', signed=True)
            for i in range(0, len(data), 4)]
    return _from_numbers(nums, fname)
