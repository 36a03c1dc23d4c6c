from __future__ import annotations

__all__ = ["TreeSet"]

import logging
from typing import Iterable, Iterator, MutableSet

from ._exceptions import (
    DuplicateElementError,
    EmptySetError,
    MissingElementError,
    SelfTransferError,
)
from ._ordering import Element
from .tree import BinaryTree, decompose, empty, recompose

logger = logging.getLogger(__name__)


# A step down from a node: its root and the sibling subtree kept aside, and whether the walk
# continued into the right subtree
_Step = tuple[Element, BinaryTree[Element], bool]


def _rebuild(path: list[_Step], subtree: BinaryTree[Element]) -> BinaryTree[Element]:
    # Recompose from the deepest step back up to the root of the original tree
    for root, sibling, went_right in reversed(path):
        if went_right:
            subtree = recompose(root, sibling, subtree)
        else:
            subtree = recompose(root, subtree, sibling)
    return subtree


def _is_in_tree(tree: BinaryTree[Element], x: Element) -> bool:
    while not tree.is_empty:
        root, left, right = decompose(tree)
        if root == x:
            return True
        elif x < root:
            tree = left
        else:
            tree = right
    return False


def _insert_in_tree(tree: BinaryTree[Element], x: Element) -> BinaryTree[Element]:
    path: list[_Step] = []
    while not tree.is_empty:
        root, left, right = decompose(tree)
        if root == x:
            raise DuplicateElementError(x)
        elif root < x:
            path.append((root, left, True))
            tree = right
        else:
            path.append((root, right, False))
            tree = left

    return _rebuild(path, recompose(x, empty(), empty()))


def _remove_smallest(tree: BinaryTree[Element]) -> tuple[Element, BinaryTree[Element]]:
    """Remove the left-most label of a non-empty tree.

    Returns:
        The smallest label and the tree without it.
    """
    path: list[_Step] = []
    root, left, right = decompose(tree)
    while not left.is_empty:
        path.append((root, right, False))
        root, left, right = decompose(left)

    # The root is the minimum, so its right subtree takes its place
    return root, _rebuild(path, right)


def _remove_from_tree(
    tree: BinaryTree[Element], x: Element
) -> tuple[Element, BinaryTree[Element]]:
    """Remove the label equal to `x` from a tree.

    When the label is on an interior node, its in-order successor (the minimum of the right
    subtree) is promoted into its place. When the node has no right subtree, its left subtree
    takes its place.

    Returns:
        The stored label that was equal to `x` and the tree without it.

    Raises:
        MissingElementError: If no label in `tree` is equal to `x`.
    """
    path: list[_Step] = []
    while not tree.is_empty:
        root, left, right = decompose(tree)
        if root == x:
            if right.is_empty:
                return root, _rebuild(path, left)
            else:
                successor, right = _remove_smallest(right)
                return root, _rebuild(path, recompose(successor, left, right))
        elif root < x:
            path.append((root, left, True))
            tree = right
        else:
            path.append((root, right, False))
            tree = left

    raise MissingElementError(x)


class TreeSet(MutableSet[Element]):
    """A set of totally ordered elements stored in a binary search tree.

    Iteration is in ascending order. The tree is not rebalanced, so its shape, and the cost of
    every operation, depends on the order in which elements were added.

    Operations that mutate the set replace the owned tree with a new one only after the new tree
    has been fully built. An operation that fails leaves the set unchanged, and an iterator
    created before a mutation keeps walking the tree it started on.

    All elements must be mutually comparable. Looking up a value of another type, including
    through `discard` or the `Set` comparisons, raises whatever `TypeError` the comparison raises.
    """

    def __init__(self, *items: Element):
        self._tree: BinaryTree[Element] = empty()
        for item in items:
            self.add(item)

    @classmethod
    def _from_iterable(cls, iterable: Iterable[Element]) -> TreeSet[Element]:
        # Used by the Set operators, which may produce the same element more than once
        tree_set = cls()
        tree_set |= iterable
        return tree_set

    @property
    def tree(self) -> BinaryTree[Element]:
        return self._tree

    @property
    def height(self) -> int:
        return self._tree.height

    def __len__(self) -> int:
        return self._tree.size

    def __contains__(self, x: object) -> bool:
        return _is_in_tree(self._tree, x)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._tree)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(element) for element in self)})"

    def __ior__(self, other: Iterable[Element]) -> TreeSet[Element]:
        for element in other:
            if element not in self:
                self.add(element)
        return self

    def add(self, x: Element, /) -> None:
        """Add an element that is not already in the set.

        Raises:
            DuplicateElementError: If an element equal to `x` is already in the set.
        """
        self._tree = _insert_in_tree(self._tree, x)
        logger.debug("Added %r, size is now %d", x, len(self))

    def remove(self, x: Element, /) -> Element:
        """Remove an element that is in the set.

        Returns:
            The stored element equal to `x`.

        Raises:
            MissingElementError: If no element equal to `x` is in the set.
        """
        removed, self._tree = _remove_from_tree(self._tree, x)
        logger.debug("Removed %r, size is now %d", removed, len(self))
        return removed

    def remove_any(self) -> Element:
        """Remove and return some element of a non-empty set.

        The element removed is always the smallest one.

        Raises:
            EmptySetError: If the set is empty.
        """
        if self._tree.is_empty:
            raise EmptySetError()

        removed, self._tree = _remove_smallest(self._tree)
        logger.debug("Removed smallest %r, size is now %d", removed, len(self))
        return removed

    def pop(self) -> Element:
        return self.remove_any()

    def discard(self, x: Element, /) -> None:
        if x in self:
            self.remove(x)

    def clear(self) -> None:
        logger.debug("Cleared %d elements", len(self))
        self._tree = empty()

    def new_instance(self) -> TreeSet[Element]:
        """Make a new empty set of the same type as this one."""
        return type(self)()

    def transfer_from(self, source: TreeSet[Element], /) -> None:
        """Move the contents of `source` into this set, leaving `source` empty.

        Whatever this set held before is discarded.

        Raises:
            SelfTransferError: If `source` is this set.
            TypeError: If `source` is not a `TreeSet`.
        """
        if source is self:
            raise SelfTransferError()
        if not isinstance(source, TreeSet):
            raise TypeError(f"Expected source to be a TreeSet, but got {type(source).__name__}")

        self._tree = source._tree
        source._tree = empty()
        logger.debug("Transferred %d elements", len(self))
