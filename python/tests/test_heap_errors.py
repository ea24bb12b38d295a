#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_heap_errors.py
-------------------

Checks that every error is both a HeapError and the builtin a caller
would naturally catch.
"""

import unittest

from heap_errors import (
    BoundaryViolationError,
    EmptyPriorityQueueError,
    EmptyTreeError,
    HeapError,
    IllegalStateError,
    InvalidArgumentError,
    InvalidEntryError,
    InvalidKeyError,
    InvalidPositionError,
)


class TestErrorTaxonomy(unittest.TestCase):

    def test_builtin_bases(self):
        pairs = [
            (EmptyPriorityQueueError, IndexError),
            (EmptyTreeError, IndexError),
            (BoundaryViolationError, IndexError),
            (InvalidKeyError, ValueError),
            (InvalidEntryError, ValueError),
            (InvalidArgumentError, ValueError),
            (InvalidPositionError, ValueError),
            (IllegalStateError, RuntimeError),
        ]
        for error, builtin in pairs:
            self.assertTrue(issubclass(error, HeapError), error)
            self.assertTrue(issubclass(error, builtin), error)

    def test_message_is_kept(self):
        error = InvalidKeyError("key must not be None")
        self.assertEqual(str(error), "key must not be None")


if __name__ == "__main__":
    unittest.main(verbosity=2)
