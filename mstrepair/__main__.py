import argparse
import logging
import sys

from mstrepair.errors import GraphReadError
from mstrepair.graph import read_graph, read_graph_binary
from mstrepair.pipeline import edge_at, heaviest_edge, run_pipeline

logger = logging.getLogger('mstrepair')


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='mstrepair',
                                     description='Build an MST, fail one of its edges and repair it')
    parser.add_argument('infile', nargs='?', default='input.txt')
    parser.add_argument('-b', '--binary',
                        action='store_true',
                        help='read the graph as 4-byte little-endian ints')
    parser.add_argument('--fail-index',
                        default=None,
                        help='index into the sorted MST of the edge that fails (default: the heaviest)',
                        type=int)
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.binary:
            graph = read_graph_binary(args.infile)
        else:
            graph = read_graph(args.infile)
    except GraphReadError as e:
        logger.error('%s', e)
        return 1

    policy = heaviest_edge if args.fail_index is None else edge_at(args.fail_index)
    try:
        run_pipeline(graph, fail_edge=policy)
    except IndexError as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
