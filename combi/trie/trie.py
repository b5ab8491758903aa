# combi/trie/trie.py
"""영속(persistent) 트라이 + 접두사 자동완성.

노드 = (is_element, children)
- is_element : 루트에서 이 노드까지의 경로가 저장된 키인지 여부
- children   : 키 원소 하나 → 자식 Trie (읽기 전용 매핑)

`inserting`은 삽입 경로의 노드만 새로 만들고, 형제 자식들은 그대로 공유합니다.
`elements`의 순서는 매핑 순회 순서(=삽입 순서)를 따르며 계약상 정해져 있지 않습니다.
결정적인 출력이 필요하면 호출하는 쪽에서 정렬하세요.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

_NO_CHILDREN: Mapping[Hashable, "Trie"] = MappingProxyType({})


@dataclass(frozen=True)
class Trie:
    is_element: bool = False
    children: Mapping[Hashable, "Trie"] = field(default_factory=lambda: _NO_CHILDREN)
    _hash: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))
        # 자식 해시는 생성 시점에 이미 계산돼 있으므로 깊이와 무관하게 O(자식 수)
        h = hash((self.is_element, frozenset((k, hash(c)) for k, c in self.children.items())))
        object.__setattr__(self, "_hash", h)

    def __hash__(self) -> int:
        return self._hash


EMPTY = Trie()


def _with_children(is_element: bool, children: dict) -> Trie:
    return Trie(is_element, MappingProxyType(children))


# ---- constructors ----

def empty() -> Trie:
    return EMPTY


def from_key(key: Sequence[Hashable]) -> Trie:
    """A trie holding exactly one key."""
    node = Trie(True)
    for k in reversed(key):
        node = _with_children(False, {k: node})
    return node


def build(keys: Iterable[Sequence[Hashable]]) -> Trie:
    t = EMPTY
    for key in keys:
        t = inserting(t, key)
    return t


# ---- lookup ----

def lookup_subtrie(trie: Trie, prefix: Sequence[Hashable]) -> Optional[Trie]:
    """Subtrie reached after consuming all of `prefix`, or None if any step misses."""
    cur = trie
    for k in prefix:
        nxt = cur.children.get(k)
        if nxt is None:
            return None
        cur = nxt
    return cur


def lookup(trie: Trie, key: Sequence[Hashable]) -> bool:
    sub = lookup_subtrie(trie, key)
    return sub is not None and sub.is_element


def elements(trie: Trie) -> List[Tuple[Hashable, ...]]:
    """Every stored key under this node, as tuples."""
    out: List[Tuple[Hashable, ...]] = []
    # (node, path from `trie` to node); explicit stack keeps long keys off the call stack
    stack: List[Tuple[Trie, Tuple[Hashable, ...]]] = [(trie, ())]
    while stack:
        node, prefix = stack.pop()
        if node.is_element:
            out.append(prefix)
        for k, child in reversed(list(node.children.items())):
            stack.append((child, prefix + (k,)))
    return out


def complete(trie: Trie, prefix: Sequence[Hashable]) -> List[Tuple[Hashable, ...]]:
    """Suffixes that complete `prefix` into a stored key ([] if none)."""
    sub = lookup_subtrie(trie, prefix)
    if sub is None:
        return []
    return elements(sub)


# ---- update ----

def inserting(trie: Trie, key: Sequence[Hashable]) -> Trie:
    """Return a new trie that also holds `key`; `trie` is left untouched.

    Walks down the existing path, then rebuilds only the nodes on it from the
    bottom up; every sibling subtrie is shared with `trie`.
    """
    path: List[Tuple[Trie, Hashable]] = []  # (node, element taken from it)
    cur = trie
    i = 0
    while i < len(key):
        nxt = cur.children.get(key[i])
        if nxt is None:
            break
        path.append((cur, key[i]))
        cur = nxt
        i += 1

    if i < len(key):
        new_child = from_key(key[i + 1:])
        children = dict(cur.children)
        children[key[i]] = new_child
        new = _with_children(cur.is_element, children)
    elif cur.is_element:
        return trie
    else:
        new = Trie(True, cur.children)

    for node, k in reversed(path):
        children = dict(node.children)
        children[k] = new
        new = _with_children(node.is_element, children)
    return new


# ---- 문자열 전용 헬퍼 ----

def build_words(words: Iterable[str]) -> Trie:
    return build(tuple(w) for w in words)


def complete_word(prefix: str, trie: Trie) -> List[str]:
    """Full words (prefix + stored suffix) that start with `prefix`."""
    return [prefix + "".join(rest) for rest in complete(trie, tuple(prefix))]


def words(trie: Trie) -> List[str]:
    return ["".join(k) for k in elements(trie)]
