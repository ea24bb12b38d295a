#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_entry.py
-------------

The key/value record handed out by :class:`adaptable_heap.AdaptableHeap`.

An entry remembers the tree :class:`~complete_binary_tree.Position` it
currently sits at, which is what lets the heap find, remove or re‑key an
arbitrary entry in O(log n).  The heap rewrites that back‑reference after
every swap; the entry itself never moves anything.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from complete_binary_tree import Position

K = TypeVar("K")
V = TypeVar("V")


class HeapEntry(Generic[K, V]):
    """Mutable ``(key, value)`` pair plus its cached tree position."""

    __slots__ = ("_key", "_value", "_position", "_owner")

    def __init__(self, key: K, value: V, owner: Optional[object] = None) -> None:
        self._key = key
        self._value = value
        self._position: Optional[Position[HeapEntry[K, V]]] = None
        # Token of the heap that created this entry; cleared on removal.
        self._owner = owner

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    @property
    def position(self) -> Optional[Position["HeapEntry[K, V]"]]:
        return self._position

    @property
    def owner(self) -> Optional[object]:
        return self._owner

    # ------------------------------------------------------------------
    #   Mutators – called by the heap only, no validation here
    # ------------------------------------------------------------------
    def set_key(self, key: K) -> None:
        self._key = key

    def set_value(self, value: V) -> None:
        self._value = value

    def set_position(self, position: Optional[Position["HeapEntry[K, V]"]]) -> None:
        self._position = position

    def detach(self) -> None:
        """Forget position and owner once the entry has left its heap."""
        self._position = None
        self._owner = None

    def __repr__(self) -> str:
        return f"HeapEntry({self._key!r}, {self._value!r})"
