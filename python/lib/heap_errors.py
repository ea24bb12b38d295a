#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_errors.py
--------------

Exception hierarchy shared by the complete binary tree and the adaptable
heap built on top of it.

Every error derives from :class:`HeapError` and from the builtin exception
a caller would naturally catch for the same situation (``IndexError`` for
"nothing there", ``ValueError`` for bad input and so on), so both
``except HeapError`` and ``except IndexError`` work.
"""

from __future__ import annotations


class HeapError(Exception):
    """Base class for every error raised by this package."""


# ----------------------------------------------------------------------
#  Empty containers
# ----------------------------------------------------------------------
class EmptyPriorityQueueError(HeapError, IndexError):
    """``min`` / ``remove_min`` called on an empty heap."""


class EmptyTreeError(HeapError, IndexError):
    """Structural query (``root``, ``remove``, ``get_last``) on an empty tree."""


# ----------------------------------------------------------------------
#  Bad input
# ----------------------------------------------------------------------
class InvalidKeyError(HeapError, ValueError):
    """Key is ``None`` or cannot be ordered by the bound comparator."""


class InvalidEntryError(HeapError, ValueError):
    """Entry is ``None``, of the wrong type, or not owned by this heap."""


class InvalidArgumentError(HeapError, ValueError):
    """Argument is unusable, e.g. a ``None`` comparator."""


class InvalidPositionError(HeapError, ValueError):
    """Position is of the wrong type, foreign, or already removed."""


class BoundaryViolationError(HeapError, IndexError):
    """Navigation past the edge of the tree (parent of root, missing child)."""


# ----------------------------------------------------------------------
#  State
# ----------------------------------------------------------------------
class IllegalStateError(HeapError, RuntimeError):
    """Operation not allowed in the current state (e.g. rebinding a full heap)."""
