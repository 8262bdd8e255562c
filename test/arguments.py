"""
Argument definition tests (construction, normalization, fluent builders, stamping).

Scope
- Validate construction defaults and metadata constraints (name, help, default_value).
- Validate that with_* builders return new definitions and never mutate the receiver.
- Validate the write-once user value slot.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from simplecli import Argument, Flag, Text, DuplicateArgumentError


class TestArgument(TestCase):
    """Behavioral tests for Argument definitions."""

    def testDefaults(self):
        argument = Argument("daemonize")
        self.assertEqual(argument.name, "daemonize")
        self.assertFalse(argument.required)
        self.assertFalse(argument.takes_value)
        self.assertIsNone(argument.help)
        self.assertIsNone(argument.default_value)
        self.assertIsNone(argument.user_value)
        self.assertIsNone(argument.value)

    def testKeywordConstruction(self):
        argument = Argument("id", required=True, takes_value=True, help="  jail ID ", default_value=Text("0"))
        self.assertTrue(argument.required)
        self.assertTrue(argument.takes_value)
        self.assertEqual(argument.help, "jail ID")
        self.assertEqual(argument.default_value, Text("0"))

    def testNameIsTrimmed(self):
        self.assertEqual(Argument("  my-arg ").name, "my-arg")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Argument(7)

    def testNameCannotBeEmpty(self):
        with self.assertRaises(ValueError):
            Argument("   ")

    def testNameRejectsPrefixesAndStrayHyphens(self):
        for name in ("-id", "--id", "a--b", "trailing-", "my arg"):
            with self.subTest(name=name), self.assertRaises(ValueError):
                Argument(name)

    def testUnderscoresAndLeadingDigitsAreAllowed(self):
        for name in ("dry_run", "2fa", "log-level_2"):
            with self.subTest(name=name):
                self.assertEqual(Argument(name).name, name)

    def testUnicodeNamesAreAllowed(self):
        self.assertEqual(Argument("größe").name, "größe")

    def testHelpCannotBeEmpty(self):
        with self.assertRaises(ValueError):
            Argument("id", help=" ")

    def testHelpExplicitNoneRejected(self):
        with self.assertRaises(TypeError):
            Argument("id", help=None)

    def testDefaultMustBeValue(self):
        with self.assertRaises(TypeError):
            Argument("id", default_value="0")

    def testFieldsAreReadOnly(self):
        argument = Argument("id")
        with self.assertRaises(AttributeError):
            argument.name = "other"
        with self.assertRaises(AttributeError):
            argument.user_value = Text("x")

    def testRepr(self):
        argument = Argument("id").with_required().with_takes_value().with_help("jail ID")
        self.assertEqual(
            repr(argument),
            "argument(name='id', required=True, takes_value=True, help='jail ID', "
            "default_value=None, user_value=None)"
        )


class TestFluentBuilders(TestCase):
    """Behavioral tests for with_* builders."""

    def testChainBuildsNewDefinitions(self):
        base = Argument("id")
        built = base.with_required().with_takes_value().with_help("jail ID").with_default(Text("0"))
        self.assertIsNot(base, built)
        self.assertEqual(built.name, "id")
        self.assertTrue(built.required)
        self.assertTrue(built.takes_value)
        self.assertEqual(built.help, "jail ID")
        self.assertEqual(built.default_value, Text("0"))

        # receiver untouched
        self.assertFalse(base.required)
        self.assertFalse(base.takes_value)
        self.assertIsNone(base.help)
        self.assertIsNone(base.default_value)

    def testBuildersAcceptExplicitFalse(self):
        argument = Argument("id", required=True, takes_value=True).with_required(False).with_takes_value(False)
        self.assertFalse(argument.required)
        self.assertFalse(argument.takes_value)

    def testBuildersKeepOtherFields(self):
        argument = Argument("id", help="jail ID", default_value=Flag("no")).with_required()
        self.assertEqual(argument.help, "jail ID")
        self.assertEqual(argument.default_value, Flag("no"))

    def testBuildersValidate(self):
        with self.assertRaises(ValueError):
            Argument("id").with_help("")
        with self.assertRaises(TypeError):
            Argument("id").with_default("0")

    def testBuildersDoNotCarryUserValue(self):
        argument = Argument("id")
        argument._stamp(Text("7"))
        self.assertIsNone(argument.with_required().user_value)


class TestStamping(TestCase):
    """Behavioral tests for the write-once user value slot."""

    def testStampSetsUserValueAndValue(self):
        argument = Argument("id", default_value=Text("0"))
        self.assertEqual(argument.value, Text("0"))
        argument._stamp(Text("7"))
        self.assertEqual(argument.user_value, Text("7"))
        self.assertEqual(argument.value, Text("7"))

    def testSecondStampIsDuplicate(self):
        argument = Argument("id")
        argument._stamp(Text("7"))
        with self.assertRaises(DuplicateArgumentError) as context:
            argument._stamp(Text("8"))
        self.assertEqual(context.exception.argument, "id")
        self.assertEqual(argument.user_value, Text("7"))

    def testStampRequiresValue(self):
        with self.assertRaises(TypeError):
            Argument("id")._stamp("7")

    def testClearAllowsNewStamp(self):
        argument = Argument("id")
        argument._stamp(Flag("true"))
        argument._clear()
        self.assertIsNone(argument.user_value)
        argument._stamp(Flag("true"))
        self.assertEqual(argument.user_value, Flag("true"))


if __name__ == "__main__":
    unittest.main()
