from btree_map.b_tree import InteriorNode, LeafNode


def check_invariants(test, tree):
    """Walk the whole tree and assert every structural B-tree property."""
    if tree.root is None:
        test.assertEqual(0, len(tree))
        return
    t = tree.min_degree
    leaf_depths = set()
    count = _check_node(test, tree.root, t, None, None, 1, True, leaf_depths)
    test.assertEqual(1, len(leaf_depths), 'Leaves at depths {}'.format(sorted(leaf_depths)))
    test.assertEqual({tree.height}, leaf_depths)
    test.assertEqual(len(tree), count)


def _check_node(test, node, t, low, high, depth, is_root, leaf_depths):
    keys = node.keys
    test.assertEqual(len(keys), len(node.values))
    for i in range(1, len(keys)):
        test.assertLess(keys[i - 1], keys[i])
    test.assertLessEqual(len(keys), 2 * t - 1)
    test.assertGreaterEqual(len(keys), 1 if is_root else t - 1)
    if low is not None:
        test.assertGreater(keys[0], low)
    if high is not None:
        test.assertLess(keys[-1], high)

    if node.is_leaf:
        test.assertIsInstance(node, LeafNode)
        test.assertEqual([], node.children)
        leaf_depths.add(depth)
        return len(keys)

    test.assertIsInstance(node, InteriorNode)
    test.assertEqual(len(keys) + 1, len(node.children))
    bounds = [low] + keys + [high]
    count = len(keys)
    for i, child in enumerate(node.children):
        test.assertEqual(t, child.min_degree)
        count += _check_node(test, child, t, bounds[i], bounds[i + 1], depth + 1, False, leaf_depths)
    return count
