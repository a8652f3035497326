"""
Streams module behavioral tests.

Scope
- Validate single-pass consumption, draining and exhaustion.
- Validate input validation on construction.
- Validate that nested consumers share one cursor.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from arguably.streams import ArgStream


class TestArgStream(TestCase):
    """
    Behavioral tests for ArgStream.

    Guarantees
    - Tokens come out once, in input order.
    - remaining() drains the cursor; later calls return nothing.
    - Construction accepts any iterable of strings and nothing else.
    """

    def setUp(self) -> None:
        """
        Prepare a fresh three-token stream for each test.
        """
        self.stream: ArgStream = ArgStream(["a", "b", "c"])

    def testEmptyStream(self) -> None:
        """
        A stream built without tokens has nothing to yield.
        """
        stream = ArgStream()
        self.assertFalse(stream.has_next())
        self.assertEqual(stream.remaining(), [])

    def testNextConsumesInOrder(self) -> None:
        """
        next() yields tokens in order until has_next() turns false.
        """
        self.assertTrue(self.stream.has_next())
        self.assertEqual([self.stream.next() for _ in range(3)], ["a", "b", "c"])
        self.assertFalse(self.stream.has_next())

    def testNextOnExhaustedStreamRaises(self) -> None:
        """
        next() past the end raises IndexError.
        """
        self.stream.remaining()
        with self.assertRaises(IndexError):
            self.stream.next()

    def testRemainingDrains(self) -> None:
        """
        remaining() returns the unconsumed tail once.
        """
        self.stream.next()
        self.assertEqual(self.stream.remaining(), ["b", "c"])
        self.assertFalse(self.stream.has_next())
        self.assertEqual(self.stream.remaining(), [])

    def testAcceptsAnyIterable(self) -> None:
        """
        Generators and iterators are materialized on construction.
        """
        stream = ArgStream(iter(["a", "b"]))
        self.assertEqual(stream.remaining(), ["a", "b"])

    def testSharedCursor(self) -> None:
        """
        A nested consumer advances the same cursor as its caller.
        """
        def consume(stream):
            return stream.next()

        self.assertEqual(self.stream.next(), "a")
        self.assertEqual(consume(self.stream), "b")
        self.assertEqual(self.stream.next(), "c")

    def testRejectsNonStrings(self) -> None:
        """
        Non-string items, bare strings and non-iterables raise TypeError.
        """
        with self.assertRaises(TypeError):
            ArgStream(["a", 1])
        with self.assertRaises(TypeError):
            ArgStream("abc")
        with self.assertRaises(TypeError):
            ArgStream(3)

    def testRepr(self) -> None:
        """
        repr() shows the tokens and the cursor position.
        """
        self.stream.next()
        self.assertEqual(repr(self.stream), "ArgStream(['a', 'b', 'c'], index=1)")


if __name__ == "__main__":
    unittest.main()
