"""
Value union tests (variants, immutability, closedness).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import pickle
import unittest
from unittest import TestCase

from simplecli import Value, Flag, Text


class TestValue(TestCase):
    """Behavioral tests for the Flag/Text union."""

    def testVariantsCarryText(self):
        self.assertEqual(Flag("true").text, "true")
        self.assertEqual(Text("7").text, "7")
        self.assertEqual(str(Text("7")), "7")

    def testEqualityNeedsSameVariant(self):
        self.assertEqual(Text("a"), Text("a"))
        self.assertNotEqual(Text("a"), Flag("a"))
        self.assertNotEqual(Text("a"), "a")
        self.assertEqual(len({Text("a"), Text("a"), Flag("a")}), 2)

    def testRepr(self):
        self.assertEqual(repr(Flag("true")), "Flag('true')")
        self.assertEqual(repr(Text("x")), "Text('x')")

    def testBaseCannotBeInstantiated(self):
        with self.assertRaises(TypeError):
            Value("x")

    def testTextMustBeString(self):
        with self.assertRaises(TypeError):
            Text(7)

    def testUnionIsClosed(self):
        with self.assertRaises(TypeError):
            class Number(Value):
                pass

        with self.assertRaises(TypeError):
            class Other(Text):
                pass

    def testImmutable(self):
        value = Text("x")
        with self.assertRaises(AttributeError):
            value.text = "y"
        with self.assertRaises(AttributeError):
            value._text = "y"

    def testPatternMatching(self):
        match Flag("on"):
            case Text(text):
                self.fail("flag matched text variant")
            case Flag(text):
                self.assertEqual(text, "on")

    def testCopyAndPickle(self):
        value = Text("x")
        self.assertIs(copy.copy(value), value)
        self.assertIs(copy.deepcopy(value), value)
        self.assertEqual(pickle.loads(pickle.dumps(value)), value)


if __name__ == "__main__":
    unittest.main()
