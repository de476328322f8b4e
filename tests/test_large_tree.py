import random
import unittest

from btree_map import BTreeMap
from tests.tree_checks import check_invariants


class TestLargeTree(unittest.TestCase):
    def test_large(self):
        for degree in (2, 4, 16):
            tree = BTreeMap(degree)
            keys = list(range(10000))
            random.Random(degree).shuffle(keys)
            for k in keys:
                tree.insert(k, str(k))
            check_invariants(self, tree)
            self.assertEqual(10000, len(tree))
            self.assertEqual('5043', tree.search(5043))
            self.assertIsNone(tree.search(10000))
            self.assertEqual(list(range(10000)), list(tree))
