import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_MIN_DEGREE = 2

_MISSING = object()


class InvalidDegree(ValueError):
    def __init__(self, min_degree):
        self.min_degree = min_degree
        message = 'Minimum degree must be at least 2, got {}'.format(min_degree)
        super(InvalidDegree, self).__init__(message)


# https://www.cs.usfca.edu/~galles/visualization/BTree.html
# A B-tree of minimum degree t maintains the following invariants:
# * Keys within a node are strictly increasing and each key has exactly one value.
# * A leaf has no children, an internal node has one more child than it has keys.
# * For an internal node with key k[i], every key in child i is less than k[i]
#   and every key in child i + 1 is greater than k[i].
# * All leaves are at the same distance from the root.
# * Every node holds at most 2t - 1 keys, every non-root node at least t - 1.
# Full children are split before the insert descends into them, so a split
# never has to travel back up the tree. The root only grows on top.


class Node:
    is_leaf = False

    def __init__(self, min_degree):
        self.min_degree = min_degree
        self.keys = []
        self.values = []
        self.children = []

    def is_full(self):
        return len(self.keys) == 2 * self.min_degree - 1

    def find_position(self, key):
        """Index of the first key >= key, or len(keys) if there is none."""
        for i, k in enumerate(self.keys):
            if k >= key:
                return i
        return len(self.keys)

    def search(self, key):
        pos = self.find_position(key)
        if pos < len(self.keys) and self.keys[pos] == key:
            return self, pos
        if self.is_leaf:
            return None
        return self.children[pos].search(key)

    def iter_items(self):
        for i, key in enumerate(self.keys):
            if not self.is_leaf:
                for item in self.children[i].iter_items():
                    yield item
            yield key, self.values[i]
        if not self.is_leaf:
            for item in self.children[-1].iter_items():
                yield item

    def reversed_items(self):
        if not self.is_leaf:
            for item in self.children[-1].reversed_items():
                yield item
        for i in range(len(self.keys) - 1, -1, -1):
            yield self.keys[i], self.values[i]
            if not self.is_leaf:
                for item in self.children[i].reversed_items():
                    yield item

    def print(self, level):
        strs = []
        pad = ''.ljust(level * 3, ' ')
        strs.append('{}{}:{}={}'.format(pad, level, type(self).__name__, self.keys))
        for child in self.children:
            strs.extend(child.print(level + 1))
        return strs

    def __repr__(self):
        return '{}: {}'.format(type(self).__name__, self.keys)


class LeafNode(Node):
    is_leaf = True

    def insert_non_full(self, key, value):
        """Insert into this leaf, returning False if an existing key was overwritten."""
        pos = self.find_position(key)
        if pos < len(self.keys) and self.keys[pos] == key:
            self.values[pos] = value
            return False
        self.keys[pos:pos] = [key]
        self.values[pos:pos] = [value]
        return True


class InteriorNode(Node):

    def insert_non_full(self, key, value):
        """
        Insert into the subtree rooted here. This node must not be full; any
        full child on the way down is split before it is entered.
        """
        pos = self.find_position(key)
        if pos < len(self.keys) and self.keys[pos] == key:
            self.values[pos] = value
            return False

        if self.children[pos].is_full():
            self.split_child(pos)
            # The child's median now sits at keys[pos]
            if key == self.keys[pos]:
                self.values[pos] = value
                return False
            if key > self.keys[pos]:
                pos += 1
        return self.children[pos].insert_non_full(key, value)

    def split_child(self, index):
        """
        Split the full child at index around its median. The child keeps the
        lower t - 1 keys, a new sibling at index + 1 takes the upper t - 1 keys
        and the median moves up into this node at index.
        """
        if self.is_full():
            raise Exception('Cannot split a child of a full node: {}'.format(self.keys))
        child = self.children[index]
        if not child.is_full():
            raise Exception('Cannot split child {} with {} keys'.format(index, len(child.keys)))

        t = self.min_degree
        sibling = type(child)(t)
        sibling.keys = child.keys[t:]
        sibling.values = child.values[t:]
        if not child.is_leaf:
            sibling.children = child.children[t:]
            child.children = child.children[:t]

        median_key = child.keys[t - 1]
        median_value = child.values[t - 1]
        child.keys = child.keys[:t - 1]
        child.values = child.values[:t - 1]

        self.keys[index:index] = [median_key]
        self.values[index:index] = [median_value]
        self.children[index + 1:index + 1] = [sibling]
        logger.debug('Split %s at %s, promoted key %s', type(child).__name__, index, median_key)


class BTreeMap(Mapping):
    """
    Ordered map stored in a B-tree of the given minimum degree.

    Inserting a key that is already present overwrites its value. There is
    no deletion.
    """

    def __init__(self, min_degree=DEFAULT_MIN_DEGREE):
        if min_degree < 2:
            raise InvalidDegree(min_degree)
        self._min_degree = min_degree
        self._root = None
        self._size = 0

    @property
    def min_degree(self):
        return self._min_degree

    @property
    def root(self):
        return self._root

    @property
    def height(self):
        height = 0
        node = self._root
        while node is not None:
            height += 1
            node = node.children[0] if not node.is_leaf else None
        return height

    def insert(self, key, value):
        if self._root is None:
            logger.debug('Creating leaf root for key %s', key)
            self._root = LeafNode(self._min_degree)
        elif self._root.is_full():
            new_root = InteriorNode(self._min_degree)
            new_root.children.append(self._root)
            new_root.split_child(0)
            self._root = new_root
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug('Grew root to %s, height is now %s', new_root.keys, self.height)

        if self._root.insert_non_full(key, value):
            self._size += 1

    def search(self, key, default=None):
        if self._root is None:
            return default
        found = self._root.search(key)
        if found is None:
            return default
        node, index = found
        return node.values[index]

    def __getitem__(self, key):
        value = self.search(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __contains__(self, item):
        try:
            self.__getitem__(item)
            return True
        except KeyError:
            return False

    def __len__(self):
        return self._size

    def __iter__(self):
        if self._root is None:
            return
        for key, _ in self._root.iter_items():
            yield key

    def items_in_order(self):
        if self._root is None:
            return
        for item in self._root.iter_items():
            yield item

    def __reversed__(self):
        if self._root is None:
            return
        for key, _ in self._root.reversed_items():
            yield key

    def __eq__(self, other):
        if isinstance(other, BTreeMap):
            return len(self) == len(other) and list(self.items_in_order()) == list(other.items_in_order())
        return super(BTreeMap, self).__eq__(other)

    __hash__ = None

    def __repr__(self):
        if self._root is None:
            return '<empty>'
        return '\n'.join(self._root.print(0))
