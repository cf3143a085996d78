import argparse
import random

import numpy as np

from mstrepair.graph import Edge
from mstrepair.nx_utils import write_edges


def random_adjacency(nvertices: int,
                     density: float=0.5,
                     min_weight: int=1,
                     max_weight: int=100,
                     seed=None) -> np.ndarray:
    '''
    Upper-triangular weight matrix of a random simple graph; 0 means no edge.
    '''
    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)
    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    for _ in range(total_edges):
        # keep trying until an unoccupied spot is found
        while True:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                break

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix


def write_adjacency(adj_matrix: np.ndarray, fname: str, binary: bool=False) -> int:
    rows, cols = np.nonzero(np.triu(adj_matrix, k=1))
    edges = [Edge(int(i), int(j), int(adj_matrix[i, j])) for i, j in zip(rows, cols)]
    write_edges(edges, adj_matrix.shape[0], fname, binary=binary)
    return len(edges)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate random weighted graphs')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    adj_matrix = random_adjacency(args.nvertices, args.density,
                                  args.min_weight, args.max_weight, args.seed)
    total_edges = write_adjacency(adj_matrix, args.outfile, binary=args.binary)

    if not args.quiet:
        print(f'Generated a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)
