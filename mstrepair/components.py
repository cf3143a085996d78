from dataclasses import dataclass, field
from typing import Iterable, Iterator

from mstrepair.graph import Edge
from mstrepair.unionfind import UnionFind


@dataclass
class Components:
    # union-find root -> dense component index, in order of discovery
    comp_id: dict[int, int] = field(default_factory=dict)
    members: list[set[int]] = field(default_factory=list)
    # vertex -> component index
    index: list[int] = field(default_factory=list, repr=False)

    def index_of(self, vertex: int) -> int:
        return self.index[vertex]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[set[int]]:
        return iter(self.members)


def analyze_components(n_vertices: int, forest: Iterable[Edge]) -> Components:
    uf = UnionFind(n_vertices)
    for edge in forest:
        uf.union(edge.u, edge.v)

    comps = Components()
    for i in range(n_vertices):
        root = uf.find(i)
        if root not in comps.comp_id:
            comps.comp_id[root] = len(comps.members)
            comps.members.append(set())
        comps.members[comps.comp_id[root]].add(i)
        comps.index.append(comps.comp_id[root])

    return comps
