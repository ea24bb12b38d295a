#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
adaptable_heap.py
-----------------

An adaptable (indexed) priority queue backed by a linked, left‑complete
binary tree.

Features
~~~~~~~~
* O(1) `size`, `is_empty`, `min`.
* O(log n) `insert`, `remove_min`, arbitrary `remove(entry)` and
  `replace_key(entry, key)`.
* O(1) `replace_value(entry, value)`.
* Entries are handles: each one caches its own tree position, so the heap
  can find it again without searching.
* Pluggable comparator (``cmp(a, b) -> int``, the `functools.cmp_to_key`
  contract) plus an optional max‑heap mode (just set max_heap=True).
* Equal children are picked at random during sift‑down so long runs of
  equal keys do not skew the tree.  Pass a seeded `random.Random` as
  ``rng`` for reproducible runs.
* `get_tree()` hands out a read‑only view of the underlying tree for
  visualisers.

Typical usage
~~~~~~~~~~~~~
>>> from adaptable_heap import AdaptableHeap
>>> heap = AdaptableHeap()
>>> a = heap.insert(5, 'task1')
>>> b = heap.insert(2, 'task2')
>>> c = heap.insert(7, 'task3')
>>> heap.min().value
'task2'
>>> heap.replace_key(a, 1)     # reprioritise an existing entry
5
>>> heap.remove(c).value
'task3'
>>> [heap.remove_min().key for _ in range(len(heap))]
[1, 2]
"""

from __future__ import annotations

import random
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from complete_binary_tree import CompleteBinaryTree, Position, TreeView
from heap_entry import HeapEntry
from heap_errors import (
    EmptyPriorityQueueError,
    IllegalStateError,
    InvalidArgumentError,
    InvalidEntryError,
    InvalidKeyError,
)
from heap_logger import init_logger

logger = init_logger(__name__)

# ----------------------------------------------------------------------
#  Generic type variables
# ----------------------------------------------------------------------
K = TypeVar("K")                     # type of the key
V = TypeVar("V")                     # type of the stored value

Comparator = Callable[[Any, Any], int]


# ----------------------------------------------------------------------
#  Comparators
# ----------------------------------------------------------------------
def default_comparator(a: Any, b: Any) -> int:
    """
    Natural ordering via ``<``.  Raises ``TypeError`` when the operands
    cannot be ordered, which is how incomparable keys are detected.
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_comparator(comparator: Comparator) -> Comparator:
    """Wrap *comparator* so that it orders in the opposite direction."""

    def reversed_cmp(a: Any, b: Any) -> int:
        return comparator(b, a)

    return reversed_cmp


# ----------------------------------------------------------------------
#  Core class
# ----------------------------------------------------------------------
class AdaptableHeap(Generic[K, V]):
    """
    A min‑priority queue (or max‑priority if requested) whose entries can
    be removed or re‑keyed after insertion.

    The heap owns a :class:`CompleteBinaryTree` of :class:`HeapEntry`
    objects.  After every public call two things hold: each non‑root
    entry's key is not smaller than its parent's, and every live entry's
    ``position`` is the tree node that holds it.

    Parameters
    ----------
    comparator : Callable[[K, K], int], optional
        ``cmp(a, b)`` returning a negative, zero or positive int.  Defaults
        to :func:`default_comparator`.  Can be changed later with
        :meth:`set_comparator` while the heap is empty.

    max_heap : bool, default ``False``
        If true, the comparator is reversed so the *largest* key is on top.

    rng : random.Random, optional
        Source of randomness for tie‑breaking between equal children.
    """

    __slots__ = ("_tree", "_comparator", "_max_heap", "_rng", "_token")

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        *,
        max_heap: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._tree: CompleteBinaryTree[HeapEntry[K, V]] = CompleteBinaryTree()
        self._max_heap: bool = max_heap
        self._rng: random.Random = rng if rng is not None else random.Random()

        # Same-origin marker stamped into every entry this heap creates.
        self._token = object()

        self._comparator: Comparator = default_comparator
        self.set_comparator(default_comparator if comparator is None else comparator)

    # ------------------------------------------------------------------
    #   Configuration
    # ------------------------------------------------------------------
    def set_comparator(self, comparator: Comparator) -> None:
        """
        Bind a new comparator.
        Raises ``IllegalStateError`` if the heap is not empty and
        ``InvalidArgumentError`` if *comparator* is ``None`` or not callable.
        """
        if not self.is_empty():
            raise IllegalStateError("cannot change the comparator of a non-empty heap")
        if comparator is None or not callable(comparator):
            raise InvalidArgumentError(f"comparator must be callable, got {comparator!r}")

        self._comparator = reverse_comparator(comparator) if self._max_heap else comparator
        logger.debug("Bound comparator %r (max_heap=%s)", comparator, self._max_heap)

    def get_tree(self) -> TreeView[HeapEntry[K, V]]:
        """Read‑only view of the underlying tree, for rendering only."""
        return TreeView(self._tree)

    # ------------------------------------------------------------------
    #   Size queries
    # ------------------------------------------------------------------
    def size(self) -> int:
        return self._tree.size()

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def __len__(self) -> int:
        return len(self._tree)

    def __bool__(self) -> bool:
        return bool(self._tree)

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def min(self) -> HeapEntry[K, V]:
        """
        Return the entry with the smallest key **without** removing it.
        Raises ``EmptyPriorityQueueError`` if the heap is empty.
        """
        if self.is_empty():
            raise EmptyPriorityQueueError("min of an empty priority queue")
        return self._tree.element_at(self._tree.root())

    def insert(self, key: K, value: Optional[V] = None) -> HeapEntry[K, V]:
        """
        Insert *value* under *key* and return the new entry.
        Raises ``InvalidKeyError`` if the key is ``None`` or not comparable.
        """
        self.check_key(key)

        entry: HeapEntry[K, V] = HeapEntry(key, value, owner=self._token)  # type: ignore[arg-type]
        entry.set_position(self._tree.add(entry))
        self._sift_up(entry.position)
        return entry

    def remove_min(self) -> HeapEntry[K, V]:
        """
        Remove and return the entry with the smallest key.
        Raises ``EmptyPriorityQueueError`` if the heap is empty.
        """
        if self.is_empty():
            raise EmptyPriorityQueueError("remove_min from an empty priority queue")

        tree = self._tree
        if tree.size() == 1:
            entry = tree.remove()
        else:
            # Swap the root with the last node, cut it off, then restore order.
            root = tree.root()
            tree.swap_elements(root, tree.get_last())
            entry = tree.remove()
            tree.element_at(root).set_position(root)
            self._sift_down(root)

        entry.detach()
        return entry

    def remove(self, entry: HeapEntry[K, V]) -> HeapEntry[K, V]:
        """
        Delete *entry* from the heap, wherever it sits, and return it.
        Raises ``InvalidEntryError`` if the entry does not belong to this heap.
        """
        entry = self.check_and_convert_entry(entry)
        tree = self._tree
        position = entry.position
        last = tree.get_last()

        if position is last:
            tree.remove()
        else:
            tree.swap_elements(position, last)
            tree.remove()

            # The former last entry now fills the hole; it may have to move
            # either way.
            moved = tree.element_at(position)
            moved.set_position(position)
            self._sift_up(moved.position)
            self._sift_down(moved.position)

        entry.detach()
        return entry

    def replace_key(self, entry: HeapEntry[K, V], key: K) -> K:
        """
        Give *entry* a new *key* and return the old one.
        Raises ``InvalidEntryError`` / ``InvalidKeyError`` on bad input.
        """
        entry = self.check_and_convert_entry(entry)
        self.check_key(key)

        old_key = entry.key
        entry.set_key(key)

        # The new key may be larger or smaller → we need to go both ways.
        self._sift_up(entry.position)
        self._sift_down(entry.position)
        return old_key

    def replace_value(self, entry: HeapEntry[K, V], value: V) -> V:
        """
        Give *entry* a new *value* and return the old one.  No reordering.
        Raises ``InvalidEntryError`` if the entry does not belong to this heap.
        """
        entry = self.check_and_convert_entry(entry)
        old_value = entry.value
        entry.set_value(value)
        return old_value

    # ------------------------------------------------------------------
    #   Input validation
    # ------------------------------------------------------------------
    def check_key(self, key: K) -> None:
        """
        Raise ``InvalidKeyError`` unless the comparator can order *key*.

        The key is compared with itself and, when the heap is not empty,
        with the current minimum, so a key of the wrong type is rejected
        before any entry is touched.  Only a ``TypeError`` from the
        comparator counts as "not comparable"; anything else the comparator
        raises (``AttributeError``, ``KeyError``, ...) propagates unchanged.
        """
        if key is None:
            logger.debug("Rejected None key")
            raise InvalidKeyError("key must not be None")
        try:
            self._comparator(key, key)
            if not self.is_empty():
                self._comparator(key, self.min().key)
        except TypeError as exc:
            logger.debug("Rejected incomparable key %r: %s", key, exc)
            raise InvalidKeyError(f"key {key!r} is not comparable") from exc

    def check_and_convert_entry(self, entry: Any) -> HeapEntry[K, V]:
        """Return *entry* if it is a live entry of this heap, else raise ``InvalidEntryError``."""
        if entry is None:
            raise InvalidEntryError("entry must not be None")
        if not isinstance(entry, HeapEntry):
            raise InvalidEntryError(f"expected a HeapEntry, got {type(entry).__name__}")
        if entry.owner is not self._token:
            logger.debug("Rejected foreign or removed entry %r", entry)
            raise InvalidEntryError(f"{entry!r} does not belong to this heap")
        return entry

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __contains__(self, entry: Any) -> bool:
        """Fast O(1) membership test for entries."""
        return isinstance(entry, HeapEntry) and entry.owner is self._token

    def __iter__(self) -> Iterator[HeapEntry[K, V]]:
        """
        Iterate over the entries **in arbitrary heap order** (level order,
        not sorted).  Do not mutate the heap while iterating.
        """
        return iter(self._tree)

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _swap(self, a: Position[HeapEntry[K, V]], b: Position[HeapEntry[K, V]]) -> None:
        """Swap the entries at *a* and *b* and keep their cached positions in sync."""
        tree = self._tree
        tree.swap_elements(a, b)
        tree.element_at(a).set_position(a)
        tree.element_at(b).set_position(b)

    def _key_at(self, position: Position[HeapEntry[K, V]]) -> K:
        return self._tree.element_at(position).key

    def _sift_up(self, position: Position[HeapEntry[K, V]]) -> None:
        """
        Move the entry at *position* up the tree until the heap property holds.
        """
        tree = self._tree
        compare = self._comparator
        while not tree.is_root(position):
            parent = tree.parent(position)
            if compare(self._key_at(position), self._key_at(parent)) >= 0:
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: Position[HeapEntry[K, V]]) -> None:
        """
        Move the entry at *position* down the tree until the heap property holds.
        """
        tree = self._tree
        compare = self._comparator
        while tree.is_internal(position):
            child = tree.left(position)
            if tree.has_right(position):
                right = tree.right(position)
                order = compare(self._key_at(child), self._key_at(right))
                if order > 0 or (order == 0 and self._rng.random() >= 0.5):
                    child = right
            if compare(self._key_at(position), self._key_at(child)) <= 0:
                break
            self._swap(position, child)
            position = child

    # ------------------------------------------------------------------
    #   Convenience: bulk insertion (optional)
    # ------------------------------------------------------------------
    def extend(self, pairs: Iterable[Tuple[K, V]]) -> List[HeapEntry[K, V]]:
        """
        Insert a bunch of ``(key, value)`` pairs and return their entries.
        Pairs before an invalid key stay inserted.
        """
        return [self.insert(key, value) for key, value in pairs]

    # ------------------------------------------------------------------
    #   Debug/validation helpers (optional)
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify tree shape, heap order and every entry's back‑reference.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        tree = self._tree
        tree.validate()
        for position in tree.positions():
            entry = tree.element_at(position)
            assert entry.position is position, f"{entry!r} has a stale position"
            assert entry.owner is self._token, f"{entry!r} is owned by another heap"
            if not tree.is_root(position):
                parent_key = self._key_at(tree.parent(position))
                assert self._comparator(entry.key, parent_key) >= 0, (
                    f"Heap order violated: {entry.key!r} below {parent_key!r}"
                )

    def __repr__(self) -> str:
        items = ", ".join(repr(entry) for entry in self)
        return f"{type(self).__name__}([{items}])"
