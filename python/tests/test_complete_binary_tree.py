#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_complete_binary_tree.py
----------------------------

Exercises the CompleteBinaryTree implementation with tests covering:

* add / remove / get_last and their interaction with the open-node deque
* navigation (root, parent, left, right, children, depth, height)
* element access (element_at, replace_element, swap_elements)
* rejection of foreign, removed and wrongly typed positions
* growing and shrinking through many sizes while validating the shape
* the read-only TreeView facade
"""

import math
import random
import unittest

from complete_binary_tree import CompleteBinaryTree, Position, TreeView
from heap_errors import (
    BoundaryViolationError,
    EmptyTreeError,
    HeapError,
    InvalidPositionError,
)


class TestCompleteBinaryTree(unittest.TestCase):

    # ------------------------------------------------------------------
    #  add()
    # ------------------------------------------------------------------
    def test_add_one_element(self):
        tree = CompleteBinaryTree[int]()
        tree.add(1)

        self.assertEqual(tree.size(), 1)
        self.assertEqual(len(tree), 1)
        self.assertFalse(tree.is_empty())
        self.assertEqual(tree.element_at(tree.root()), 1)

    def test_add_several_elements(self):
        tree = CompleteBinaryTree[int]()
        for element in (1, 7, 89, 777):
            tree.add(element)

        self.assertEqual(tree.size(), 4)
        # New elements only ever land in the "last" slot.
        self.assertEqual(tree.element_at(tree.root()), 1)
        self.assertEqual(tree.element_at(tree.get_last()), 777)

    def test_add_returns_position(self):
        tree = CompleteBinaryTree[int]()
        self.assertIs(tree.add(8), tree.root())
        for element in (0, -4, 60):
            position = tree.add(element)
            self.assertIsInstance(position, Position)
            self.assertIs(position, tree.get_last())
            self.assertEqual(position.element(), element)

    def test_add_fills_left_then_right(self):
        tree = CompleteBinaryTree[str]()
        root = tree.add("r")
        left = tree.add("l")
        self.assertIs(tree.left(root), left)
        self.assertFalse(tree.has_right(root))

        right = tree.add("x")
        self.assertIs(tree.right(root), right)
        self.assertEqual(tree.children(root), [left, right])

    def test_add_moves_past_full_parent(self):
        tree = CompleteBinaryTree[int]()
        tree.add(90)
        tree.add(91)
        # Root is still open: it only has a left child.
        self.assertEqual(tree.element_at(tree.parent(tree.get_last())), 90)

        tree.add(92)  # root now full, next slot belongs to 91
        tree.add(93)
        self.assertEqual(tree.element_at(tree.parent(tree.get_last())), 91)

    # ------------------------------------------------------------------
    #  remove() / get_last()
    # ------------------------------------------------------------------
    def test_remove_several_elements(self):
        tree = CompleteBinaryTree[int]()
        for element in (0, 1111, 2222):
            tree.add(element)
        tree.remove()

        self.assertEqual(tree.size(), 2)
        self.assertEqual(tree.element_at(tree.root()), 0)

        tree.remove()
        tree.remove()
        self.assertEqual(tree.size(), 0)
        self.assertTrue(tree.is_empty())
        self.assertFalse(tree)

    def test_remove_last_element(self):
        tree = CompleteBinaryTree[int]()
        for element in (777, 190, 7):
            tree.add(element)

        self.assertEqual(tree.element_at(tree.get_last()), 7)
        tree.remove()
        self.assertEqual(tree.element_at(tree.get_last()), 190)

    def test_remove_returns_elements_in_reverse_insertion_order(self):
        tree = CompleteBinaryTree[int]()
        for element in (7, 0, 678, 86793):
            tree.add(element)

        self.assertEqual([tree.remove() for _ in range(4)], [86793, 678, 0, 7])

    def test_remove_right_child_reopens_parent(self):
        tree = CompleteBinaryTree[int]()
        root = tree.add(1)
        tree.add(2)
        tree.add(3)
        tree.remove()

        self.assertFalse(tree.has_right(root))
        # The next add must refill the root's right slot.
        self.assertIs(tree.parent(tree.add(4)), root)
        tree.validate()

    def test_empty_tree_errors(self):
        tree = CompleteBinaryTree[int]()
        with self.assertRaises(EmptyTreeError):
            tree.remove()
        with self.assertRaises(EmptyTreeError):
            tree.get_last()
        with self.assertRaises(EmptyTreeError):
            tree.root()
        with self.assertRaises(EmptyTreeError):
            tree.height()

        # The taxonomy doubles as the builtin IndexError.
        with self.assertRaises(IndexError):
            tree.remove()

    def test_add_remove_single_node_round_trip(self):
        tree = CompleteBinaryTree[str]()
        for _ in range(3):
            tree.add("only")
            self.assertEqual(tree.remove(), "only")
            tree.validate()
        self.assertTrue(tree.is_empty())

    # ------------------------------------------------------------------
    #  Navigation
    # ------------------------------------------------------------------
    def test_navigation_predicates(self):
        tree = CompleteBinaryTree[int]()
        positions = [tree.add(i) for i in range(5)]
        root, a, b, c, d = positions

        self.assertTrue(tree.is_root(root))
        self.assertFalse(tree.is_root(a))
        self.assertTrue(tree.is_internal(root))
        self.assertTrue(tree.is_internal(a))
        self.assertTrue(tree.is_external(b))
        self.assertTrue(tree.is_external(c))
        self.assertIs(tree.parent(c), a)
        self.assertIs(tree.parent(d), a)
        self.assertTrue(tree.has_left(a) and tree.has_right(a))
        self.assertFalse(tree.has_left(b))
        self.assertEqual(tree.children(b), [])

    def test_boundary_errors(self):
        tree = CompleteBinaryTree[int]()
        root = tree.add(1)
        leaf = tree.add(2)

        with self.assertRaises(BoundaryViolationError):
            tree.parent(root)
        with self.assertRaises(BoundaryViolationError):
            tree.right(root)
        with self.assertRaises(BoundaryViolationError):
            tree.left(leaf)

    def test_depth_and_height(self):
        tree = CompleteBinaryTree[int]()
        positions = [tree.add(i) for i in range(20)]
        for index, position in enumerate(positions):
            self.assertEqual(tree.depth(position), int(math.log2(index + 1)))
        self.assertEqual(tree.height(), 4)

    def test_level_order_iteration(self):
        tree = CompleteBinaryTree[int]()
        for i in range(10):
            tree.add(i)
        self.assertEqual(list(tree), list(range(10)))
        self.assertEqual([p.element() for p in tree.positions()], list(range(10)))

    # ------------------------------------------------------------------
    #  Element access
    # ------------------------------------------------------------------
    def test_replace_element_returns_previous(self):
        tree = CompleteBinaryTree[str]()
        position = tree.add("old")
        self.assertEqual(tree.replace_element(position, "new"), "old")
        self.assertEqual(tree.element_at(position), "new")

    def test_swap_elements_keeps_shape(self):
        tree = CompleteBinaryTree[str]()
        root = tree.add("a")
        left = tree.add("b")

        tree.swap_elements(root, left)
        self.assertEqual(tree.element_at(root), "b")
        self.assertEqual(tree.element_at(left), "a")
        self.assertIs(tree.root(), root)
        self.assertIs(tree.left(root), left)

    # ------------------------------------------------------------------
    #  Position validation
    # ------------------------------------------------------------------
    def test_removed_position_is_rejected(self):
        tree = CompleteBinaryTree[int]()
        tree.add(1)
        last = tree.add(2)
        tree.remove()

        with self.assertRaises(InvalidPositionError):
            tree.element_at(last)
        with self.assertRaises(InvalidPositionError):
            tree.parent(last)

    def test_foreign_position_is_rejected(self):
        mine = CompleteBinaryTree[int]()
        theirs = CompleteBinaryTree[int]()
        mine.add(1)
        foreign = theirs.add(1)

        with self.assertRaises(InvalidPositionError):
            mine.element_at(foreign)
        with self.assertRaises(InvalidPositionError):
            mine.swap_elements(mine.root(), foreign)

    def test_wrong_type_position_is_rejected(self):
        tree = CompleteBinaryTree[int]()
        tree.add(1)
        with self.assertRaises(InvalidPositionError):
            tree.element_at(0)
        with self.assertRaises(HeapError):
            tree.is_root(None)

    # ------------------------------------------------------------------
    #  Shape invariant across many sizes
    # ------------------------------------------------------------------
    def test_shape_stays_complete_while_growing_and_shrinking(self):
        tree = CompleteBinaryTree[int]()
        for n in range(1, 65):
            tree.add(n)
            tree.validate()
            self.assertEqual(tree.size(), n)
            self.assertEqual(tree.element_at(tree.get_last()), n)

        for n in range(64, 0, -1):
            self.assertEqual(tree.remove(), n)
            tree.validate()
        self.assertTrue(tree.is_empty())

    def test_random_add_remove_against_reference(self):
        rng = random.Random(7)
        tree = CompleteBinaryTree[int]()
        reference = []

        for step in range(3_000):
            if reference and rng.random() < 0.45:
                self.assertEqual(tree.remove(), reference.pop())
            else:
                tree.add(step)
                reference.append(step)
            tree.validate()
            self.assertEqual(len(tree), len(reference))

        # Level order is insertion order for a left-complete tree.
        self.assertEqual(list(tree), reference)


class TestTreeView(unittest.TestCase):

    def setUp(self):
        self.tree = CompleteBinaryTree[int]()
        for i in range(6):
            self.tree.add(i)
        self.view = TreeView(self.tree)

    def test_view_forwards_reads(self):
        view, tree = self.view, self.tree
        self.assertEqual(view.size(), 6)
        self.assertEqual(len(view), 6)
        self.assertFalse(view.is_empty())
        self.assertIs(view.root(), tree.root())
        self.assertIs(view.left(view.root()), tree.left(tree.root()))
        self.assertIs(view.right(view.root()), tree.right(tree.root()))
        self.assertIs(view.parent(view.get_last()), tree.parent(tree.get_last()))
        self.assertTrue(view.has_left(view.root()))
        self.assertTrue(view.has_right(view.root()))
        self.assertTrue(view.is_root(view.root()))
        self.assertTrue(view.is_internal(view.root()))
        self.assertTrue(view.is_external(view.get_last()))
        self.assertEqual(view.element_at(view.get_last()), 5)
        self.assertEqual(view.height(), 2)
        self.assertEqual([view.element_at(p) for p in view.positions()], list(range(6)))

    def test_view_exposes_no_mutators(self):
        for name in ("add", "remove", "swap_elements", "replace_element"):
            self.assertFalse(hasattr(self.view, name), name)

    def test_view_tracks_live_tree(self):
        self.tree.add(6)
        self.assertEqual(self.view.size(), 7)
        self.assertEqual(self.view.element_at(self.view.get_last()), 6)


# ----------------------------------------------------------------------
# If you execute this file directly, run the tests.
# ----------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main(verbosity=2)
