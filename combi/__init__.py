# combi/__init__.py
"""combi: composable parsing and persistent data-structure primitives.

Subpackages (independent of each other):
- combi.parsing : backtracking parser combinators + arithmetic grammar
- combi.tree    : persistent binary search tree
- combi.trie    : persistent trie with prefix completion
"""

from . import parsing, tree, trie

__version__ = "0.1.0"
