from __future__ import annotations

__all__ = [
    "BinaryTree",
    "Empty",
    "Node",
    "empty",
    "decompose",
    "recompose",
    "in_order",
    "is_search_tree",
    "render",
]

from abc import abstractmethod
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Generic, Iterator

from .._ordering import Element
from ._exceptions import EmptyTreeError


class BinaryTree(Generic[Element]):
    """An immutable binary tree of labels.

    A tree is either `Empty` or a `Node` holding a root label and two subtrees. Trees are never
    modified; operations that change a tree build a new one, sharing the subtrees that did not
    change.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()

    @property
    @abstractmethod
    def height(self) -> int:
        raise NotImplementedError()

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Element]:
        return in_order(self)


@dataclass(frozen=True, slots=True)
class Empty(BinaryTree[Element]):
    @property
    def size(self) -> int:
        return 0

    @property
    def height(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Node(BinaryTree[Element]):
    root: Element
    left: BinaryTree[Element]
    right: BinaryTree[Element]
    _size: int = field(init=False, repr=False, compare=False)
    _height: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_size", self.left.size + self.right.size + 1)
        object.__setattr__(self, "_height", max(self.left.height, self.right.height) + 1)

    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return self._height


def empty() -> Empty:
    return Empty()


def decompose(
    tree: BinaryTree[Element], /
) -> tuple[Element, BinaryTree[Element], BinaryTree[Element]]:
    """Split a non-empty tree into its root label and its left and right subtrees.

    Raises:
        EmptyTreeError: If `tree` is empty.
    """
    match tree:
        case Node(root, left, right):
            return root, left, right
        case Empty():
            raise EmptyTreeError()
        case _:
            raise NotImplementedError(f"Unsupported tree type: {type(tree)}")


def recompose(
    root: Element, left: BinaryTree[Element], right: BinaryTree[Element], /
) -> Node[Element]:
    """Build a non-empty tree from a root label and two subtrees."""
    return Node(root, left, right)


def in_order(tree: BinaryTree[Element], /) -> Iterator[Element]:
    # Explicit stack so that iterating a deep tree does not nest generators
    pending: list[Node[Element]] = []
    current = tree
    while True:
        while isinstance(current, Node):
            pending.append(current)
            current = current.left
        if len(pending) == 0:
            return
        node = pending.pop()
        yield node.root
        current = node.right


def is_search_tree(tree: BinaryTree[Element], /) -> bool:
    """Whether the labels of `tree` are strictly ascending in order."""
    return all(smaller < larger for smaller, larger in pairwise(in_order(tree)))


def render(tree: BinaryTree, /) -> str:
    """Draw a tree as an indented outline.

    Each node is a line holding the `repr` of its label. The children of a node follow it one
    level deeper, labelled `L:` and `R:`. An empty subtree is drawn as `.`, and the children of a
    leaf are omitted.
    """
    return "\n".join(_render_lines(tree))


def _render_lines(tree: BinaryTree) -> Iterator[str]:
    # Explicit stack of (subtree, depth, label) so that drawing a deep tree does not recurse
    pending: list[tuple[BinaryTree, int, str]] = [(tree, 0, "")]
    while len(pending) > 0:
        subtree, depth, label = pending.pop()
        indent = "  " * depth
        match subtree:
            case Empty():
                yield f"{indent}{label}."
            case Node(root, left, right):
                yield f"{indent}{label}{root!r}"
                if not (left.is_empty and right.is_empty):
                    pending.append((right, depth + 1, "R: "))
                    pending.append((left, depth + 1, "L: "))
