from mstrepair.components import Components, analyze_components
from mstrepair.errors import GraphReadError, MstRepairError
from mstrepair.graph import Edge, Graph, read_graph, read_graph_binary, vertex_count
from mstrepair.kruskal import kruskal, total_weight
from mstrepair.pipeline import RepairResult, Status, edge_at, heaviest_edge, run_pipeline
from mstrepair.replacement import find_replacement_edge
from mstrepair.unionfind import UnionFind
