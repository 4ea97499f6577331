"""
Tests for the command-line driver and error reporter.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import Lox, main, EX_OK, EX_USAGE, EX_DATAERR, EX_NOINPUT
from lox.reporter import ErrorReporter


class TestMain(unittest.TestCase):
    """Test argument handling and exit codes."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name: str, content: str) -> str:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_no_arguments_prints_usage(self):
        code, out, _ = self._run([])
        self.assertEqual(code, EX_USAGE)
        self.assertEqual(out, "Usage: lox [script]\n")

    def test_too_many_scripts(self):
        code, out, _ = self._run(["a.lox", "b.lox"])
        self.assertEqual(code, EX_USAGE)
        self.assertIn("Usage", out)

    def test_clean_file(self):
        path = self._write("ok.lox", "var a = 1;\n")
        code, out, err = self._run([path])

        self.assertEqual(code, EX_OK)
        self.assertEqual(out.splitlines(), [
            "VAR var ",
            "ID(a) a a",
            "= = ",
            "NUM(1) 1 1",
            "; ; ",
            "EOF  ",
        ])
        self.assertEqual(err, "")

    def test_file_with_lexical_errors(self):
        path = self._write("bad.lox", "1 @\n\"open")
        code, out, err = self._run([path])

        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(err.splitlines(), [
            "[line 1] Error : Unexpected character '@'.",
            "[line 2] Error : Unterminated string.",
        ])
        # Tokens are still printed
        self.assertEqual(out.splitlines(), ["NUM(1) 1 1", "EOF  "])

    def test_missing_file(self):
        code, out, err = self._run([os.path.join(self.tmp.name, "missing.lox")])
        self.assertEqual(code, EX_NOINPUT)
        self.assertIn("Could not read", err)
        self.assertEqual(out, "")

    def test_file_that_is_not_utf8(self):
        path = os.path.join(self.tmp.name, "binary.lox")
        with open(path, "wb") as f:
            f.write(b"1 + \xff\xfe 2\n")

        code, out, err = self._run([path])

        self.assertEqual(code, EX_NOINPUT)
        self.assertIn("Could not read", err)
        self.assertEqual(out, "")


class TestPrompt(unittest.TestCase):
    """Test the interactive loop."""

    def test_error_flag_resets_between_lines(self):
        out, err = io.StringIO(), io.StringIO()
        reporter = ErrorReporter(stream=err)
        lox = Lox(reporter=reporter, out=out)

        code = lox.run_prompt(io.StringIO("@\n+\n"))

        self.assertEqual(code, EX_OK)
        self.assertFalse(reporter.had_error)
        self.assertEqual(reporter.error_count, 1)
        self.assertEqual(err.getvalue(), "[line 1] Error : Unexpected character '@'.\n")
        self.assertIn("+ + ", out.getvalue())
        self.assertEqual(out.getvalue().count("> "), 3)

    def test_end_of_input_exits(self):
        out = io.StringIO()
        lox = Lox(reporter=ErrorReporter(stream=io.StringIO()), out=out)
        self.assertEqual(lox.run_prompt(io.StringIO("")), EX_OK)

    def test_prompt_flag(self):
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            original = sys.stdin
            sys.stdin = io.StringIO("print\n")
            try:
                code = main(["--prompt"])
            finally:
                sys.stdin = original

        self.assertEqual(code, EX_OK)
        self.assertIn("PRINT print ", out.getvalue())


class TestErrorReporter(unittest.TestCase):
    """Test the (line, message) collaborator."""

    def test_error_sets_flag(self):
        stream = io.StringIO()
        reporter = ErrorReporter(stream=stream)

        self.assertFalse(reporter.had_error)
        reporter.error(7, "Unterminated string.")

        self.assertTrue(reporter.had_error)
        self.assertEqual(stream.getvalue(), "[line 7] Error : Unterminated string.\n")

        reporter.reset()
        self.assertFalse(reporter.had_error)

    def test_report_with_location(self):
        stream = io.StringIO()
        ErrorReporter(stream=stream).report(2, "at 'x'", "Oops.")
        self.assertEqual(stream.getvalue(), "[line 2] Error at 'x': Oops.\n")


if __name__ == '__main__':
    unittest.main()
