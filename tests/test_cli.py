"""
Tests for the tinyscan command line driver.

Author: xwest
"""

import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinyscript.cli import main, format_tokens
from tinyscript.lexer import scan


class TestTinyscan(unittest.TestCase):
    """Run main() against files and stdin."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, code: str) -> str:
        path = os.path.join(self.tmpdir.name, "prog.ts")
        with open(path, "w", encoding="utf-8") as f:
            f.write(code)
        return path

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(argv)
        return status, out.getvalue()

    def test_text_output(self):
        status, output = self._run([self._write("let x = 1;")])

        self.assertEqual(status, 0)
        rows = [line.split() for line in output.strip().splitlines()]
        self.assertEqual(rows, [
            ["1", "LET", "'let'"],
            ["1", "IDENTIFIER", "'x'"],
            ["1", "EQUAL", "'='"],
            ["1", "NUMBER", "'1'"],
            ["1", "SEMICOLON", "';'"],
            ["1", "END_OF_FILE", "''"],
        ])

    def test_json_output(self):
        status, output = self._run([self._write('print "hi";\n'), "--format", "json"])

        self.assertEqual(status, 0)
        self.assertEqual(json.loads(output), [
            {"type": "PRINT", "lexeme": "print", "line": 1},
            {"type": "STRING", "lexeme": "hi", "line": 1},
            {"type": "SEMICOLON", "lexeme": ";", "line": 1},
            {"type": "END_OF_FILE", "lexeme": "", "line": 2},
        ])

    def test_reads_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("a or b")):
            status, output = self._run([])

        self.assertEqual(status, 0)
        self.assertIn("OR", output)

    def test_errors_set_exit_status(self):
        path = self._write("x = @;")
        with self.assertLogs("tinyscript.lexer.lexer", level="ERROR") as captured:
            status, output = self._run([path])

        self.assertEqual(status, 1)
        self.assertIn("Unexpected character '@' at line 1", captured.output[0])
        self.assertIn("END_OF_FILE", output)

    def test_missing_file(self):
        missing = os.path.join(self.tmpdir.name, "nope.ts")
        with self.assertLogs("tinyscript.cli", level="ERROR"):
            status, output = self._run([missing])

        self.assertEqual(status, 2)
        self.assertEqual(output, "")


class TestFormatTokens(unittest.TestCase):

    def test_text_columns(self):
        tokens = scan("\n\nnil", reporter=lambda message: None)
        self.assertEqual(format_tokens(tokens).splitlines()[0],
                         "   3 NIL            'nil'")


if __name__ == '__main__':
    unittest.main()
