# combi/trie/__init__.py
"""Persistent trie with prefix completion."""

from .trie import (
    Trie, EMPTY,
    empty, from_key, build,
    lookup, lookup_subtrie, elements, complete, inserting,
    build_words, complete_word, words,
)
