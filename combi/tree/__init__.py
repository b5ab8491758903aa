# combi/tree/__init__.py
"""Persistent (immutable) binary search tree."""

from .bst import (
    Leaf, Node, BinarySearchTree, LEAF,
    empty, singleton, from_iterable,
    is_empty, contains, count, height, iter_elements, elements, reduce, is_valid_bst,
    insert,
)
