#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
complete_binary_tree.py
-----------------------

A linked, left‑complete binary tree with O(1) insertion at the next free
slot and O(1) removal of the last slot.  It is the storage layer for
:class:`adaptable_heap.AdaptableHeap`, but it knows nothing about keys or
ordering.

Features
~~~~~~~~
* `tree.add(element)`      – attach a new last node, returns its `Position`
* `tree.remove()`          – detach the last node, returns its element
* `tree.get_last()`        – position of the last node
* navigation: `root`, `parent`, `left`, `right`, `children`,
  `has_left`, `has_right`, `is_root`, `is_internal`, `is_external`
* element access: `element_at`, `replace_element`, `swap_elements`
* level‑order iteration (`for element in tree`, `tree.positions()`)
* `tree.validate()` – sanity‑check shape, links and bookkeeping
* `TreeView(tree)` – read‑only facade for renderers / visualisers

The trick that keeps `add` and `remove` constant time is a double‑ended
queue of the *open* nodes (nodes with fewer than two children).  In a
left‑complete tree those nodes are always a contiguous suffix of the
level order, so the front of the deque is the parent of the next slot and
the back of the deque is the last node.

Typical usage
~~~~~~~~~~~~~
>>> from complete_binary_tree import CompleteBinaryTree
>>> tree = CompleteBinaryTree()
>>> root = tree.add("a")
>>> left = tree.add("b")
>>> right = tree.add("c")
>>> tree.parent(right) is root
True
>>> tree.element_at(tree.get_last())
'c'
>>> tree.remove()
'c'
>>> list(tree)
['a', 'b']
"""

from __future__ import annotations

from collections import deque
from typing import (
    Deque,
    Generator,
    Generic,
    List,
    Optional,
    TypeVar,
)

from heap_errors import (
    BoundaryViolationError,
    EmptyTreeError,
    InvalidPositionError,
)

# ----------------------------------------------------------------------
#  Type variable for the stored element
# ----------------------------------------------------------------------
E = TypeVar("E")


class Position(Generic[E]):
    """
    Handle to one node of a :class:`CompleteBinaryTree`.

    Callers treat it as opaque: the only public read is :meth:`element`.
    Once the node is removed from its tree the position is *deprecated*
    (its parent link points at itself) and every tree method rejects it.
    """

    __slots__ = ("_element", "_parent", "_left", "_right", "_container")

    def __init__(
        self,
        container: "CompleteBinaryTree[E]",
        element: E,
        parent: Optional["Position[E]"] = None,
    ) -> None:
        self._element = element
        self._parent = parent
        self._left: Optional[Position[E]] = None
        self._right: Optional[Position[E]] = None
        self._container: Optional[CompleteBinaryTree[E]] = container

    def element(self) -> E:
        """Return the element currently stored at this position."""
        return self._element

    def __repr__(self) -> str:
        if self._parent is self:
            return "<Position (removed)>"
        return f"<Position {self._element!r}>"


class CompleteBinaryTree(Generic[E]):
    """
    Left‑complete binary tree built from linked :class:`Position` nodes.

    Every level is full except possibly the last, which fills from the
    left.  Shape changes happen only through :meth:`add` and
    :meth:`remove`; everything else reads or rewrites elements in place.
    """

    __slots__ = ("_root", "_size", "_open")

    def __init__(self) -> None:
        self._root: Optional[Position[E]] = None
        self._size: int = 0

        # Nodes with fewer than two children, in level order.  Front is the
        # parent of the next slot, back is the last node.
        self._open: Deque[Position[E]] = deque()

    # ------------------------------------------------------------------
    #   Size queries
    # ------------------------------------------------------------------
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    # ------------------------------------------------------------------
    #   Helper: position validation (internal)
    # ------------------------------------------------------------------
    def _validate(self, position: Position[E]) -> Position[E]:
        """Return *position* unchanged or raise ``InvalidPositionError``."""
        if not isinstance(position, Position):
            raise InvalidPositionError(
                f"expected a Position, got {type(position).__name__}"
            )
        if position._parent is position:
            raise InvalidPositionError("position is no longer in the tree")
        if position._container is not self:
            raise InvalidPositionError("position does not belong to this tree")
        return position

    # ------------------------------------------------------------------
    #   Navigation
    # ------------------------------------------------------------------
    def root(self) -> Position[E]:
        if self._root is None:
            raise EmptyTreeError("empty tree has no root")
        return self._root

    def parent(self, position: Position[E]) -> Position[E]:
        node = self._validate(position)
        if node._parent is None:
            raise BoundaryViolationError("root has no parent")
        return node._parent

    def left(self, position: Position[E]) -> Position[E]:
        node = self._validate(position)
        if node._left is None:
            raise BoundaryViolationError("position has no left child")
        return node._left

    def right(self, position: Position[E]) -> Position[E]:
        node = self._validate(position)
        if node._right is None:
            raise BoundaryViolationError("position has no right child")
        return node._right

    def children(self, position: Position[E]) -> List[Position[E]]:
        """Return the existing children of *position*, left first."""
        node = self._validate(position)
        return [child for child in (node._left, node._right) if child is not None]

    def has_left(self, position: Position[E]) -> bool:
        return self._validate(position)._left is not None

    def has_right(self, position: Position[E]) -> bool:
        return self._validate(position)._right is not None

    def is_root(self, position: Position[E]) -> bool:
        return self._validate(position) is self._root

    def is_internal(self, position: Position[E]) -> bool:
        # A left-complete tree never has a right child without a left one.
        return self._validate(position)._left is not None

    def is_external(self, position: Position[E]) -> bool:
        return self._validate(position)._left is None

    def depth(self, position: Position[E]) -> int:
        """Number of edges between *position* and the root."""
        node = self._validate(position)
        depth = 0
        while node._parent is not None:
            node = node._parent
            depth += 1
        return depth

    def height(self) -> int:
        """Height of the whole tree, i.e. ``floor(log2(size))``."""
        if self._size == 0:
            raise EmptyTreeError("empty tree has no height")
        return self._size.bit_length() - 1

    # ------------------------------------------------------------------
    #   Element access
    # ------------------------------------------------------------------
    def element_at(self, position: Position[E]) -> E:
        return self._validate(position)._element

    def replace_element(self, position: Position[E], element: E) -> E:
        """Store *element* at *position* and return the previous element."""
        node = self._validate(position)
        old = node._element
        node._element = element
        return old

    def swap_elements(self, first: Position[E], second: Position[E]) -> None:
        """Exchange the elements of two positions; the shape is untouched."""
        a = self._validate(first)
        b = self._validate(second)
        a._element, b._element = b._element, a._element

    # ------------------------------------------------------------------
    #   Shape changes – O(1) thanks to the open-node deque
    # ------------------------------------------------------------------
    def add(self, element: E) -> Position[E]:
        """
        Attach *element* as the new last node and return its position.

        The new node becomes the left‑most free child of the shallowest
        open node; a new level is started only when the current one is full.
        """
        if self._root is None:
            node = Position(self, element)
            self._root = node
        else:
            parent = self._open[0]
            node = Position(self, element, parent=parent)
            if parent._left is None:
                parent._left = node
            else:
                parent._right = node
                # Parent now has both children.
                self._open.popleft()

        self._open.append(node)
        self._size += 1
        return node

    def remove(self) -> E:
        """
        Detach the last node and return its element.

        Raises ``EmptyTreeError`` if the tree is empty.
        """
        if self._size == 0:
            raise EmptyTreeError("remove from an empty tree")

        last = self._open.pop()
        if self._size == 1:
            self._root = None
        else:
            parent = last._parent
            assert parent is not None
            if parent._right is not None:
                # The right child was the last node; the parent is open again
                # and, being the shallowest open node, goes to the front.
                parent._right = None
                self._open.appendleft(parent)
            else:
                # A parent with only a left child is already at the front.
                parent._left = None

        self._size -= 1
        element = last._element
        self._deprecate(last)
        return element

    def get_last(self) -> Position[E]:
        """Return the position of the last node (bottom level, right‑most)."""
        if self._size == 0:
            raise EmptyTreeError("empty tree has no last node")
        return self._open[-1]

    @staticmethod
    def _deprecate(node: Position[E]) -> None:
        node._parent = node
        node._left = node._right = None
        node._container = None
        node._element = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    #   Traversal
    # ------------------------------------------------------------------
    def positions(self) -> Generator[Position[E], None, None]:
        """Yield positions in level (breadth‑first) order."""
        if self._root is None:
            return
        fringe: Deque[Position[E]] = deque([self._root])
        while fringe:
            node = fringe.popleft()
            yield node
            if node._left is not None:
                fringe.append(node._left)
            if node._right is not None:
                fringe.append(node._right)

    def __iter__(self) -> Generator[E, None, None]:
        """Yield elements in level order."""
        for node in self.positions():
            yield node._element

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify shape, links and bookkeeping.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        if self._root is None:
            assert self._size == 0, "Size counter non-zero for empty tree"
            assert not self._open, "Open-node deque not empty for empty tree"
            return

        assert self._root._parent is None, "Root has a parent"

        order = list(self.positions())
        assert len(order) == self._size, "Size counter disagrees with node count"

        # Left-completeness: in level order, once a child slot is missing
        # no later node may have any child.
        gap_seen = False
        for node in order:
            assert node._container is self, "Node owned by another tree"
            assert not (node._right is not None and node._left is None), (
                "Right child without left child"
            )
            for child in (node._left, node._right):
                if child is None:
                    gap_seen = True
                else:
                    assert not gap_seen, "Tree is not left-complete"
                    assert child._parent is node, "Child does not point back to parent"

        expected_open = [node for node in order if node._right is None]
        assert len(expected_open) == len(self._open), "Open-node deque has wrong length"
        assert all(a is b for a, b in zip(expected_open, self._open)), (
            "Open-node deque out of order"
        )

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        items = ", ".join(repr(element) for element in self)
        return f"CompleteBinaryTree([{items}])"


class TreeView(Generic[E]):
    """
    Read‑only facade over a :class:`CompleteBinaryTree`.

    Renderers receive this instead of the tree itself so they can walk
    the structure but cannot reshape it or rewrite elements.
    """

    __slots__ = ("_tree",)

    def __init__(self, tree: CompleteBinaryTree[E]) -> None:
        self._tree = tree

    def size(self) -> int:
        return self._tree.size()

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def __len__(self) -> int:
        return len(self._tree)

    def root(self) -> Position[E]:
        return self._tree.root()

    def parent(self, position: Position[E]) -> Position[E]:
        return self._tree.parent(position)

    def left(self, position: Position[E]) -> Position[E]:
        return self._tree.left(position)

    def right(self, position: Position[E]) -> Position[E]:
        return self._tree.right(position)

    def children(self, position: Position[E]) -> List[Position[E]]:
        return self._tree.children(position)

    def has_left(self, position: Position[E]) -> bool:
        return self._tree.has_left(position)

    def has_right(self, position: Position[E]) -> bool:
        return self._tree.has_right(position)

    def is_root(self, position: Position[E]) -> bool:
        return self._tree.is_root(position)

    def is_internal(self, position: Position[E]) -> bool:
        return self._tree.is_internal(position)

    def is_external(self, position: Position[E]) -> bool:
        return self._tree.is_external(position)

    def element_at(self, position: Position[E]) -> E:
        return self._tree.element_at(position)

    def get_last(self) -> Position[E]:
        return self._tree.get_last()

    def height(self) -> int:
        return self._tree.height()

    def positions(self) -> Generator[Position[E], None, None]:
        return self._tree.positions()

    def __repr__(self) -> str:
        return f"TreeView({self._tree!r})"
