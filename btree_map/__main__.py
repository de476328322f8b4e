import argparse
import logging

from btree_map.b_tree import BTreeMap, InvalidDegree

SAMPLES = [
    (10, 'Ten'),
    (20, 'Twenty'),
    (5, 'Five'),
    (6, 'Six'),
    (12, 'Twelve'),
]


def lookup(tree, key):
    value = tree.search(key)
    if value is None:
        print('Not found')
    else:
        print('Found: {}'.format(value))


def main(argv=None):
    parser = argparse.ArgumentParser(prog='btree_map', description='Build a small B-tree map and look up two keys')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log splits and root growth')
    parser.add_argument('--min-degree', type=int, default=2, help='Minimum degree of the tree')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(message)s')

    try:
        tree = BTreeMap(args.min_degree)
    except InvalidDegree as e:
        parser.error(str(e))
    for key, value in SAMPLES:
        tree.insert(key, value)

    if args.verbose:
        print(tree)
    lookup(tree, 10)
    lookup(tree, 7)
    return tree


if __name__ == '__main__':
    main()
