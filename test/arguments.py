# python
"""
Arguments module behavioral tests (parse results).

Scope
- Validate CmdArg construction rules per kind (key/val presence, short key width).
- Validate value semantics (equality, hashing, immutability, repr/rich).
- Validate rendering back to a command-line token and re-classification.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from rich.console import Console

from aparseopt import CmdArg, CmdArgKind, OptParser


class TestCmdArgKind(TestCase):
    """Behavioral tests for CmdArgKind."""

    def testKeyedKinds(self):
        self.assertFalse(CmdArgKind.ARGUMENT.keyed)
        self.assertFalse(CmdArgKind.STOP_PARSING.keyed)
        self.assertTrue(CmdArgKind.SHORT_FLAG.keyed)
        self.assertTrue(CmdArgKind.LONG_OPTION.keyed)

    def testValuedKinds(self):
        self.assertTrue(CmdArgKind.ARGUMENT.valued)
        self.assertTrue(CmdArgKind.SHORT_OPTION.valued)
        self.assertTrue(CmdArgKind.LONG_OPTION.valued)
        self.assertFalse(CmdArgKind.LONG_FLAG.valued)
        self.assertFalse(CmdArgKind.STOP_PARSING.valued)


class TestCmdArg(TestCase):
    """Behavioral tests for CmdArg."""

    def testDefaultIsEmptyArgument(self):
        arg = CmdArg()
        self.assertIs(arg.kind, CmdArgKind.ARGUMENT)
        self.assertEqual(arg.key, "")
        self.assertEqual(arg.val, "")

    def testKindFromInteger(self):
        self.assertIs(CmdArg(CmdArgKind.LONG_FLAG.value, "x").kind, CmdArgKind.LONG_FLAG)

    def testUnknownKindRejected(self):
        with self.assertRaises(ValueError):
            CmdArg(42)

    def testArgumentCannotHaveKey(self):
        with self.assertRaises(ValueError):
            CmdArg(CmdArgKind.ARGUMENT, "k", "v")

    def testStopParsingIsBare(self):
        with self.assertRaises(ValueError):
            CmdArg(CmdArgKind.STOP_PARSING, val="x")

    def testFlagCannotHaveVal(self):
        with self.assertRaises(ValueError):
            CmdArg(CmdArgKind.LONG_FLAG, "verbose", "yes")

    def testShortKeyIsOneCharacter(self):
        with self.assertRaises(ValueError):
            CmdArg(CmdArgKind.SHORT_FLAG, "ab")
        with self.assertRaises(ValueError):
            CmdArg(CmdArgKind.SHORT_OPTION, "", "v")

    def testLongKeyMayBeEmpty(self):
        self.assertEqual(CmdArg(CmdArgKind.LONG_OPTION, "", "val").key, "")

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            CmdArg(CmdArgKind.LONG_OPTION, 1, "v")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            CmdArg(CmdArgKind.LONG_OPTION, "k", None)  # type: ignore[arg-type]

    def testEqualityAndHash(self):
        self.assertEqual(CmdArg(CmdArgKind.SHORT_OPTION, "o", "1"), CmdArg(CmdArgKind.SHORT_OPTION, "o", "1"))
        self.assertNotEqual(CmdArg(CmdArgKind.SHORT_OPTION, "o", "1"), CmdArg(CmdArgKind.SHORT_OPTION, "o", "2"))
        self.assertNotEqual(CmdArg(CmdArgKind.SHORT_FLAG, "o"), CmdArg(CmdArgKind.SHORT_OPTION, "o"))
        self.assertEqual(len({CmdArg(), CmdArg(), CmdArg(CmdArgKind.STOP_PARSING)}), 2)

    def testNotEqualToTuple(self):
        self.assertNotEqual(CmdArg(), (CmdArgKind.ARGUMENT, "", ""))

    def testImmutable(self):
        arg = CmdArg(CmdArgKind.LONG_FLAG, "verbose")
        with self.assertRaises(AttributeError):
            arg.key = "quiet"  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            arg.extra = True  # type: ignore[attr-defined]

    def testRepr(self):
        self.assertEqual(
            repr(CmdArg(CmdArgKind.LONG_OPTION, "bar", "20")),
            "CmdArg(kind=<CmdArgKind.LONG_OPTION: 5>, key='bar', val='20')"
        )

    def testRichPrint(self):
        console = Console(record=True, color_system=None, width=120)
        console.print(CmdArg(CmdArgKind.SHORT_OPTION, "e", "5"))
        text = console.export_text()
        self.assertIn("CmdArg", text)
        self.assertIn("val='5'", text)


class TestRendering(TestCase):
    """Behavioral tests for str(CmdArg) and re-classification."""

    def testRenderEachKind(self):
        self.assertEqual(str(CmdArg(CmdArgKind.ARGUMENT, val="file.txt")), "file.txt")
        self.assertEqual(str(CmdArg(CmdArgKind.SHORT_FLAG, "a")), "-a")
        self.assertEqual(str(CmdArg(CmdArgKind.LONG_FLAG, "foo")), "--foo")
        self.assertEqual(str(CmdArg(CmdArgKind.SHORT_OPTION, "e", "5")), "-e=5")
        self.assertEqual(str(CmdArg(CmdArgKind.LONG_OPTION, "bar", "20")), "--bar=20")
        self.assertEqual(str(CmdArg(CmdArgKind.STOP_PARSING)), "--")

    def testReparsedOptionsAreEquivalent(self):
        samples = [
            CmdArg(CmdArgKind.SHORT_OPTION, "o", ""),
            CmdArg(CmdArgKind.SHORT_OPTION, "d", ":"),
            CmdArg(CmdArgKind.SHORT_OPTION, "o", " val"),
            CmdArg(CmdArgKind.LONG_OPTION, "delim", "="),
            CmdArg(CmdArgKind.LONG_OPTION, "", "val"),
        ]
        for arg in samples:
            with self.subTest(arg=arg):
                self.assertEqual(OptParser([str(arg)]).nextget(), arg)

    def testReparsedParseIsEquivalent(self):
        parser = OptParser("-ab -e 5 --foo --bar=20 file.txt - --", "ab", ["foo"])
        first = list(parser)
        again = list(OptParser([str(arg) for arg in first], "ab", ["foo"]))
        self.assertEqual(again, first)


if __name__ == "__main__":
    unittest.main()
