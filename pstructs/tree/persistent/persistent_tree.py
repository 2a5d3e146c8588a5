from __future__ import annotations

from collections import namedtuple
from typing import Any, Generic, Iterable, List, Optional, Tuple, TypeVar

import numpy as np

from pstructs import config as ps_config
from pstructs.exceptions import IncomparableItemsError, InvariantViolationError
from pstructs.logging import get_logger
from pstructs.tree.ordering import Comparator, Ordering, natural_order

T = TypeVar("T")

# Nodes are never mutated once built; `left` and `right` are nodes or None.
_Node = namedtuple("_Node", ["item", "left", "right"])

_UNBOUNDED = object()


class PersistentTree(Generic[T]):
    """
    Immutable binary search tree with structural sharing.

    Every update returns a new tree. Only the nodes on the path from the
    root to the updated position are rebuilt; all other nodes are shared
    between the old and the new version, so older versions stay valid and
    cheap to keep around.

    Parameters
    ----------
    comparator : Comparator, optional
        Three-way comparison ``(a, b) -> Ordering | int | None`` where None
        means the values are unordered. Defaults to ``natural_order``.
        ``insert`` calls it as ``comparator(item, node_item)``, ``find``
        and ``delete`` as ``comparator(node_item, key)``, so lookup keys
        do not have to be items.
    """

    __slots__ = ("_root", "_comparator")

    def __init__(self, comparator: Optional[Comparator] = None) -> None:
        self._root: Optional[_Node] = None
        self._comparator: Comparator = (
            natural_order if comparator is None else comparator
        )

    @classmethod
    def make_leaf(
        cls, item: T, comparator: Optional[Comparator] = None
    ) -> PersistentTree[T]:
        tree = cls(comparator)
        tree._root = _Node(item, None, None)
        return tree

    @classmethod
    def from_items(
        cls, items: Iterable[T], comparator: Optional[Comparator] = None
    ) -> PersistentTree[T]:
        """Insert `items` one after the other into an empty tree."""
        tree = cls(comparator)
        for item in items:
            tree = tree.insert(item)
        return tree

    def is_empty(self) -> bool:
        return self._root is None

    def item(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.item

    def left(self) -> Optional[PersistentTree[T]]:
        """Left subtree, or None when this tree is empty."""
        if self._root is None:
            return None
        return self._spawn(self._root.left)

    def right(self) -> Optional[PersistentTree[T]]:
        """Right subtree, or None when this tree is empty."""
        if self._root is None:
            return None
        return self._spawn(self._root.right)

    def find(self, key: Any) -> Optional[T]:
        """
        Look up the item that compares equal to `key`.

        Parameters
        ----------
        key : Any
            An item, or any value the comparator can order items against.

        Returns
        -------
        Optional[T]
            The stored item, or None when no item matches or a comparison
            on the search path is unordered.
        """
        node = self._lookup(key)
        if node is None:
            return None
        return node.item

    def find_multiple(self, keys: Iterable[Any]) -> List[Optional[T]]:
        return [self.find(key) for key in keys]

    def contains_multiple(self, keys: Iterable[Any]) -> np.ndarray:
        return np.array(
            [self._lookup(key) is not None for key in keys], dtype=bool
        )

    def insert(self, item: T) -> PersistentTree[T]:
        """
        Return a new tree holding `item`.

        An item comparing equal to an existing one replaces that node's
        payload while both of its subtrees stay shared. Otherwise a new
        leaf is attached below the search path. `self` is left untouched.

        Parameters
        ----------
        item : T
            The item to insert.

        Returns
        -------
        PersistentTree[T]
            The new version of the tree.

        Raises
        ------
        IncomparableItemsError
            If `item` is unordered against an item on the search path.
        """
        path: List[Tuple[_Node, bool]] = []
        node = self._root
        while node is not None:
            order = self._compare(item, node.item)
            if order is None:
                raise IncomparableItemsError(
                    f"Cannot order {item!r} against {node.item!r}"
                )
            if order is Ordering.EQUAL:
                replacement = _Node(item, node.left, node.right)
                return self._finish(self._rebuild(path, replacement))
            went_left = order is Ordering.LESS
            path.append((node, went_left))
            node = node.left if went_left else node.right

        return self._finish(self._rebuild(path, _Node(item, None, None)))

    def delete(self, key: Any) -> Optional[PersistentTree[T]]:
        """
        Return a new tree without the item matching `key`.

        A matching node with a single child is replaced by that child. A
        matching node with two children takes the item of its in-order
        successor (the smallest item of its right subtree), and the
        successor is removed from the right subtree.

        Parameters
        ----------
        key : Any
            An item, or any value the comparator can order items against.

        Returns
        -------
        Optional[PersistentTree[T]]
            The new version of the tree, or None when no item matches or a
            comparison on the search path is unordered.
        """
        path: List[Tuple[_Node, bool]] = []
        node = self._root
        while node is not None:
            order = self._compare(node.item, key)
            if order is None:
                get_logger("tree.persistent").debug(
                    "delete: key %r is unordered against %r", key, node.item
                )
                return None
            if order is Ordering.EQUAL:
                break
            went_left = order is Ordering.GREATER
            path.append((node, went_left))
            node = node.left if went_left else node.right

        if node is None:
            return None

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor, right = self._detach_smallest(node.right)
            replacement = _Node(successor, node.left, right)
        return self._finish(self._rebuild(path, replacement))

    def _lookup(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            order = self._compare(node.item, key)
            if order is Ordering.EQUAL:
                return node
            if order is Ordering.GREATER:
                node = node.left
            elif order is Ordering.LESS:
                node = node.right
            else:
                return None
        return None

    def _compare(self, left: Any, right: Any) -> Optional[Ordering]:
        return Ordering.from_result(self._comparator(left, right))

    @staticmethod
    def _rebuild(
        path: List[Tuple[_Node, bool]], subtree: Optional[_Node]
    ) -> Optional[_Node]:
        # Copy the nodes of `path` bottom-up, hanging `subtree` where the
        # walk left off; siblings off the path are shared.
        for node, went_left in reversed(path):
            if went_left:
                subtree = _Node(node.item, subtree, node.right)
            else:
                subtree = _Node(node.item, node.left, subtree)
        return subtree

    @classmethod
    def _detach_smallest(cls, node: _Node) -> Tuple[Any, Optional[_Node]]:
        path: List[Tuple[_Node, bool]] = []
        while node.left is not None:
            path.append((node, True))
            node = node.left
        return node.item, cls._rebuild(path, node.right)

    def _spawn(self, root: Optional[_Node]) -> PersistentTree[T]:
        tree = type(self)(self._comparator)
        tree._root = root
        return tree

    def _finish(self, root: Optional[_Node]) -> PersistentTree[T]:
        tree = self._spawn(root)
        if ps_config.runtime_config().check_invariants and not tree._validate():
            raise InvariantViolationError("Tree violates the search order")
        return tree

    def _validate(self) -> bool:
        """Check the search order of every node against its ancestors."""
        if self._root is None:
            return True
        stack = [(self._root, _UNBOUNDED, _UNBOUNDED)]
        while stack:
            node, lower, upper = stack.pop()
            if (
                lower is not _UNBOUNDED
                and self._compare(node.item, lower) is not Ordering.GREATER
            ):
                return False
            if (
                upper is not _UNBOUNDED
                and self._compare(node.item, upper) is not Ordering.LESS
            ):
                return False
            if node.left is not None:
                stack.append((node.left, lower, node.item))
            if node.right is not None:
                stack.append((node.right, node.item, upper))
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentTree):
            return NotImplemented
        stack = [(self._root, other._root)]
        while stack:
            mine, theirs = stack.pop()
            if mine is theirs:
                continue
            if mine is None or theirs is None:
                return False
            if not mine.item == theirs.item:
                return False
            stack.append((mine.left, theirs.left))
            stack.append((mine.right, theirs.right))
        return True

    def __repr__(self) -> str:
        if self._root is None:
            return "PersistentTree()"
        return f"PersistentTree(item={self._root.item!r})"
