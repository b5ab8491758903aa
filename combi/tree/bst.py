# combi/tree/bst.py
"""영속(persistent) 이진 탐색 트리.

- 두 가지 모양만 존재: `Leaf`(빈 트리), `Node(left, value, right)`
- 모든 노드는 불변(frozen). `insert`는 **루트→삽입 위치 경로만** 새로 만들고
  나머지 서브트리는 참조로 공유합니다(structural sharing).
- 중복 값 삽입은 no-op: 같은 트리를 그대로 돌려줍니다.
- 삭제/재균형은 지원하지 않습니다. 정렬된 순서로 넣으면 깊이가 O(n)이 됩니다.

재귀 한도를 피하기 위해 insert/contains/count/순회는 반복문으로 작성했습니다.
`reduce`만 구조적 fold라서 재귀로 둡니다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

A = TypeVar("A")


@dataclass(frozen=True)
class Leaf:
    pass


@dataclass(frozen=True)
class Node:
    left: "BinarySearchTree"
    value: Any
    right: "BinarySearchTree"


BinarySearchTree = Union[Leaf, Node]

LEAF = Leaf()


# ---- constructors ----

def empty() -> BinarySearchTree:
    return LEAF


def singleton(x: Any) -> BinarySearchTree:
    return Node(LEAF, x, LEAF)


def from_iterable(xs: Iterable[Any]) -> BinarySearchTree:
    t: BinarySearchTree = LEAF
    for x in xs:
        t = insert(t, x)
    return t


# ---- queries ----

def is_empty(tree: BinarySearchTree) -> bool:
    return isinstance(tree, Leaf)


def contains(tree: BinarySearchTree, x: Any) -> bool:
    cur = tree
    while isinstance(cur, Node):
        if x == cur.value:
            return True
        cur = cur.left if x < cur.value else cur.right
    return False


def count(tree: BinarySearchTree) -> int:
    n = 0
    stack: List[BinarySearchTree] = [tree]
    while stack:
        t = stack.pop()
        if isinstance(t, Node):
            n += 1
            stack.append(t.left)
            stack.append(t.right)
    return n


def height(tree: BinarySearchTree) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for a leaf)."""
    best = 0
    stack: List[Tuple[BinarySearchTree, int]] = [(tree, 0)]
    while stack:
        t, d = stack.pop()
        if isinstance(t, Node):
            stack.append((t.left, d + 1))
            stack.append((t.right, d + 1))
        elif d > best:
            best = d
    return best


def iter_elements(tree: BinarySearchTree) -> Iterator[Any]:
    """In-order traversal, produced lazily (ascending order for a valid BST)."""
    stack: List[Node] = []
    cur = tree
    while stack or isinstance(cur, Node):
        while isinstance(cur, Node):
            stack.append(cur)
            cur = cur.left
        node = stack.pop()
        yield node.value
        cur = node.right


def elements(tree: BinarySearchTree) -> List[Any]:
    return list(iter_elements(tree))


def reduce(tree: BinarySearchTree, leaf: A, node: Callable[[A, Any, A], A]) -> A:
    """Fold over the tree shape: `leaf` replaces every Leaf, `node` combines
    the folded left subtree, the stored value and the folded right subtree."""
    if isinstance(tree, Leaf):
        return leaf
    return node(reduce(tree.left, leaf, node), tree.value, reduce(tree.right, leaf, node))


def is_valid_bst(tree: BinarySearchTree) -> bool:
    """Check the ordering invariant over the whole tree (test oracle only)."""
    # (subtree, lower bound, upper bound); None means unbounded
    stack: List[Tuple[BinarySearchTree, Optional[Tuple[Any]], Optional[Tuple[Any]]]] = [(tree, None, None)]
    while stack:
        t, lo, hi = stack.pop()
        if isinstance(t, Leaf):
            continue
        v = t.value
        if lo is not None and not (lo[0] < v):
            return False
        if hi is not None and not (v < hi[0]):
            return False
        # bounds are boxed so a stored None value is still a real bound
        stack.append((t.left, lo, (v,)))
        stack.append((t.right, (v,), hi))
    return True


# ---- update ----

def insert(tree: BinarySearchTree, x: Any) -> BinarySearchTree:
    """Return a new tree containing `x`; `tree` itself is left untouched.

    Only the nodes on the search path are rebuilt; every other subtree is
    shared with the input tree.
    """
    path: List[Tuple[Node, bool]] = []  # (node, went_left)
    cur = tree
    while isinstance(cur, Node):
        if x < cur.value:
            path.append((cur, True))
            cur = cur.left
        elif x > cur.value:
            path.append((cur, False))
            cur = cur.right
        else:
            return tree

    new: BinarySearchTree = singleton(x)
    for node, went_left in reversed(path):
        if went_left:
            new = Node(new, node.value, node.right)
        else:
            new = Node(node.left, node.value, new)
    return new
