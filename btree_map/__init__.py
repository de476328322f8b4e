from btree_map.b_tree import BTreeMap, InvalidDegree, DEFAULT_MIN_DEGREE

__all__ = ['BTreeMap', 'InvalidDegree', 'DEFAULT_MIN_DEGREE']
