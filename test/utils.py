"""
Utils module behavioral tests.

Scope
- Validate the Unset sentinel (singleton, falsy, sealed, union support).
- Validate coalesce(), rename() and mirror().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from arguably.utils import Unset, UnsetType, coalesce, rename, mirror


class TestUnset(TestCase):
    """
    Behavioral tests for the Unset sentinel.
    """

    def setUp(self) -> None:
        """
        Prepare a fresh reference to the singleton for each test.
        """
        self.unset: UnsetType = UnsetType()

    def testSingleton(self) -> None:
        """
        The constructor always returns the module-level instance.
        """
        self.assertIs(self.unset, Unset)

    def testFalsyAndRepr(self) -> None:
        """
        The sentinel is falsy and prints as "Unset".
        """
        self.assertFalse(self.unset)
        self.assertEqual(repr(self.unset), "Unset")

    def testUnionSupport(self) -> None:
        """
        `str | Unset` works in isinstance checks.
        """
        self.assertIsInstance(self.unset, str | Unset)
        self.assertIsInstance("x", str | Unset)
        self.assertNotIsInstance(1, str | Unset)

    def testFinalClass(self) -> None:
        """
        UnsetType cannot be subclassed.
        """
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})


class TestHelpers(TestCase):
    """
    Behavioral tests for coalesce(), rename() and mirror().
    """

    def testCoalesce(self) -> None:
        """
        Only Unset is replaced; None and empty strings are kept.
        """
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")

    def testRenameFunctionForm(self) -> None:
        """
        rename(callable, name) updates both names in place.
        """
        def f():
            pass

        self.assertIs(rename(f, "g"), f)
        self.assertEqual((f.__name__, f.__qualname__), ("g", "g"))

    def testRenameDecoratorForm(self) -> None:
        """
        rename(name) returns a decorator.
        """
        @rename("g")
        def f():
            pass

        self.assertEqual(f.__name__, "g")

    def testRenameRejectsBadArguments(self) -> None:
        """
        Non-callables and wrong arities raise TypeError.
        """
        with self.assertRaises(TypeError):
            rename(1, "x")
        with self.assertRaises(TypeError):
            rename()

    def testMirrorReturnsDetachedCopies(self) -> None:
        """
        Nested lists handed out by mirror() are fresh copies.
        """
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = ["a", ["b"]]

        holder = Holder()
        items = holder.items
        items.append("c")
        items[1].append("d")
        self.assertEqual(holder.items, ["a", ["b"]])
        self.assertEqual(Holder.items.fget.__name__, "items")

    def testMirrorIsReadOnly(self) -> None:
        """
        Assigning through a mirror property raises AttributeError.
        """
        class Holder:
            items = mirror("items")
            _items = []

        with self.assertRaises(AttributeError):
            Holder().items = [1]


if __name__ == "__main__":
    unittest.main()
