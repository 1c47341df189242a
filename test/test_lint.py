#!/usr/bin/env python
# coding=UTF-8

import unittest

from addrspec import notes
from addrspec.errors import MissingSeparator
from addrspec.lint import AddressLinter, unquote_string


class LintTest(unittest.TestCase):
    def check(self, address):
        linter = AddressLinter()
        linter.check(address)
        return linter

    def test_notes(self):
        i = 0
        for (address, expected_notes) in [
            ("simple@example.com", []),
            ("<simple@example.com>", [notes.ANGLE_BRACKETS]),
            ('"john..doe"@example.org', [notes.LOCAL_QUOTED]),
            (
                '"john"@example.org',
                [notes.LOCAL_QUOTED, notes.LOCAL_QUOTE_UNNECESSARY],
            ),
            (
                r'"jo\hn"@example.org',
                [notes.LOCAL_QUOTED, notes.LOCAL_QUOTE_UNNECESSARY],
            ),
            ("admin@mailserver1", [notes.DOMAIN_DOTLESS]),
            ("a@-foo.example-.com", [notes.DOMAIN_LABEL_HYPHEN, notes.DOMAIN_LABEL_HYPHEN]),
            ("jsmith@[192.168.2.1]", [notes.DOMAIN_LITERAL]),
            ("jsmith@[IPv6:2001:db8::1]", [notes.DOMAIN_LITERAL]),
            ("jsmith@[]", [notes.DOMAIN_LITERAL, notes.DOMAIN_LITERAL_BAD_IP]),
            ("用户@例子.广告", [notes.SMTPUTF8_REQUIRED]),
            ("Abc.example.com", [notes.ADDRESS_SYNTAX_ERROR]),
            ('"a b"@例子', [notes.LOCAL_QUOTED, notes.DOMAIN_DOTLESS, notes.SMTPUTF8_REQUIRED]),
        ]:
            linter = self.check(address)
            note_classes = [note.__class__ for note in linter.notes]
            self.assertEqual(
                expected_notes,
                note_classes,
                "[%s] %s: %s != %s" % (i, address, expected_notes, note_classes),
            )
            i += 1

    def test_invalid(self):
        linter = self.check("Abc.example.com")
        self.assertIsNone(linter.address)
        self.assertEqual(linter.error, MissingSeparator())
        self.assertEqual(
            linter.notes[0].vars,
            {"address": "Abc.example.com", "error": "Missing separator character '@'."},
        )
        self.assertEqual(linter.notes[0].level, notes.levels.BAD)

    def test_valid(self):
        linter = AddressLinter()
        addr = linter.check("simple@example.com")
        self.assertIs(addr, linter.address)
        self.assertEqual(str(addr), "simple@example.com")
        self.assertIsNone(linter.error)

    def test_quote_unnecessary_vars(self):
        linter = self.check('"john"@example.org')
        self.assertEqual(
            linter.notes[1],
            notes.LOCAL_QUOTE_UNNECESSARY(
                "local-part", {"local": '"john"', "unquoted": "john"}
            ),
        )

    def test_too_long(self):
        domain = ".".join(["a" * 63] * 3 + ["b" * 61])
        linter = self.check("c" * 64 + "@" + domain)
        self.assertEqual([n.__class__ for n in linter.notes], [notes.ADDRESS_TOO_LONG])
        self.assertEqual(linter.notes[0].vars, {"length": 318, "limit": 254})

    def test_note_text(self):
        linter = self.check("admin@mailserver1")
        note = linter.notes[0]
        self.assertEqual(
            str(note.show_summary()), "The domain mailserver1 has only one label."
        )
        self.assertIn("ICANN", note.show_text())

    def test_unquote_string(self):
        i = 0
        for (instr, expected_str) in [
            ("foo", "foo"),
            ('"foo"', "foo"),
            (r'"fo\"o"', 'fo"o'),
            (r'"f\"o\"o"', 'f"o"o'),
            (r'"fo\\o"', r"fo\o"),
            (r'"f\\o\\o"', r"f\o\o"),
            (r'"fo\o"', "foo"),
            ('"', '"'),
        ]:
            out_str = unquote_string(instr)
            self.assertEqual(
                expected_str, out_str, "[%s] %s != %s" % (i, expected_str, out_str)
            )
            i += 1


if __name__ == "__main__":
    unittest.main()
