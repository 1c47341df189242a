#!/usr/bin/env python
# coding=UTF-8

import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from addrspec.cli import main, read_addresses


class CliTest(unittest.TestCase):
    def run_main(self, argv, stdin=""):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout, patch(
            "sys.stdin", io.StringIO(stdin)
        ):
            status = main(argv)
        return status, stdout.getvalue()

    def write_config(self, content):
        fd, path = tempfile.mkstemp(suffix=".ini")
        with os.fdopen(fd, "w") as fh:
            fh.write(content)
        self.addCleanup(os.unlink, path)
        return path

    def test_valid(self):
        status, out = self.run_main(["simple@example.com"])
        self.assertEqual(status, 0)
        self.assertEqual(out, "valid   simple@example.com\n")

    def test_invalid(self):
        status, out = self.run_main(["simple@example.com", "Abc.example.com"])
        self.assertEqual(status, 1)
        self.assertEqual(
            out,
            "valid   simple@example.com\n"
            "invalid Abc.example.com: Missing separator character '@'.\n",
        )

    def test_notes(self):
        status, out = self.run_main(["-n", "admin@mailserver1"])
        self.assertEqual(status, 0)
        self.assertEqual(
            out,
            "valid   admin@mailserver1\n"
            "  * The domain mailserver1 has only one label.\n",
        )

    def test_verbose(self):
        status, out = self.run_main(["-v", "admin@mailserver1"])
        self.assertEqual(status, 0)
        self.assertIn("ICANN", out)
        self.assertNotIn("<p>", out)

    def test_stdin(self):
        status, out = self.run_main([], stdin="a@example.com\n\nbad\n")
        self.assertEqual(status, 1)
        self.assertEqual(
            out,
            "valid   a@example.com\n"
            "invalid bad: Missing separator character '@'.\n",
        )

    def test_json(self):
        status, out = self.run_main(["-o", "json", "-n", "a@example.com", "x"])
        self.assertEqual(status, 1)
        doc = json.loads(out)
        self.assertEqual(doc["creator"]["name"], "addrspec")
        first, second = doc["results"]
        self.assertEqual(first["input"], "a@example.com")
        self.assertTrue(first["valid"])
        self.assertEqual(first["local"], "a")
        self.assertEqual(first["domain"], "example.com")
        self.assertEqual(first["canonical"], "a@example.com")
        self.assertEqual(first["uri"], "mailto:a%40example.com")
        self.assertEqual(first["notes"], [])
        self.assertFalse(second["valid"])
        self.assertEqual(second["error"], "Missing separator character '@'.")
        self.assertEqual(second["notes"][0]["level"], "bad")
        self.assertTrue(second["notes"][0]["detail"].startswith("<p>"))

    def test_json_unicode(self):
        status, out = self.run_main(["-o", "json", "用户@例子.广告"])
        self.assertEqual(status, 0)
        self.assertIn("用户", out)
        self.assertNotIn("notes", json.loads(out)["results"][0])

    def test_config(self):
        path = self.write_config("[addrspec]\noutput_format = json\nshow_notes = yes\n")
        status, out = self.run_main(["-c", path, "admin@mailserver1"])
        self.assertEqual(status, 0)
        result = json.loads(out)["results"][0]
        self.assertEqual(result["notes"][0]["summary"], "The domain mailserver1 has only one label.")

    def test_config_overridden(self):
        path = self.write_config("[addrspec]\noutput_format = json\n")
        status, out = self.run_main(["-c", path, "-o", "text", "a@example.com"])
        self.assertEqual(out, "valid   a@example.com\n")

    def test_config_bad_boolean(self):
        path = self.write_config("[addrspec]\nshow_notes = perhaps\n")
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                self.run_main(["-c", path, "a@example.com"])
        self.assertEqual(cm.exception.code, 2)

    def test_config_bad_format(self):
        path = self.write_config("[addrspec]\noutput_format = jsn\n")
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                self.run_main(["-c", path, "a@example.com"])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("output_format must be one of text, json", stderr.getvalue())

    def test_undecodable_stdin(self):
        def lines():
            yield "a@example.com\n"
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        with patch("sys.stdout", new_callable=io.StringIO) as stdout, patch(
            "sys.stdin", lines()
        ):
            status = main(["-o", "json"])
        self.assertEqual(status, 2)
        doc = json.loads(stdout.getvalue())
        self.assertTrue(doc["error"].startswith("Can't read input: "))
        self.assertEqual([r["input"] for r in doc["results"]], ["a@example.com"])

    def test_config_missing(self):
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                self.run_main(["-c", "/nonexistent/addrspec.ini", "a@example.com"])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("can't read configuration file", stderr.getvalue())

    def test_read_addresses(self):
        self.assertEqual(
            list(read_addresses(["a@b\r\n", "\n", " c@d\n", "e@f"])),
            ["a@b", " c@d", "e@f"],
        )


if __name__ == "__main__":
    unittest.main()
