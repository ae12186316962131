"""
Tests for the line-based interactive loop and the command line.
"""

import io
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithparse.repl import Repl, main


class TestRepl(unittest.TestCase):
    """Test cases for Repl.run."""

    def _run(self, text, **kwargs):
        stdout = io.StringIO()
        stderr = io.StringIO()
        repl = Repl(io.StringIO(text), stdout, stderr, **kwargs)
        status = repl.run()
        return status, stdout.getvalue(), stderr.getvalue()

    def test_prints_one_result_per_line(self):
        status, out, err = self._run("1 + 2\n-1 + 2 * 3\n")
        self.assertEqual(status, 0)
        self.assertEqual(out, "(1 + 2)\n((-1) + (2 * 3))\n")
        self.assertEqual(err, "")

    def test_blank_lines_are_ignored(self):
        status, out, _ = self._run("\n   \n7\n\n")
        self.assertEqual(status, 0)
        self.assertEqual(out, "7\n")

    def test_line_without_expression_prints_nothing(self):
        status, out, _ = self._run(";\n1\n")
        self.assertEqual(status, 0)
        self.assertEqual(out, "1\n")

    def test_error_is_reported_and_loop_continues(self):
        status, out, err = self._run("99999999999999999999\n2 * 3\n")
        self.assertEqual(status, 1)
        self.assertEqual(out, "(2 * 3)\n")
        self.assertIn("Malformed integer literal", err)
        self.assertIn("<stdin>:1", err)

    def test_no_prompt_when_not_a_terminal(self):
        _, out, _ = self._run("1\n", prompt="?? ")
        self.assertNotIn("??", out)

    def test_token_mode(self):
        status, out, _ = self._run("1+2\n", show_tokens=True)
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["INTEGER('1')", "PLUS('+')", "INTEGER('2')"])

    def test_missing_final_newline(self):
        _, out, _ = self._run("4 / 2")
        self.assertEqual(out, "(4 / 2)\n")

    def test_empty_input(self):
        status, out, err = self._run("")
        self.assertEqual((status, out, err), (0, "", ""))


class TestMain(unittest.TestCase):
    """Test cases for the command line entry point."""

    def test_input_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8") as f:
            f.write("1 - -2\n8 / 4 / 2\n")
            path = f.name

        try:
            with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
                status = main(["--input", path])
        finally:
            os.unlink(path)

        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "(1 - (-2))\n((8 / 4) / 2)\n")

    def test_missing_input_file(self):
        """Test that an unreadable file is reported without a traceback."""
        missing = os.path.join(tempfile.gettempdir(), "arithparse-no-such-file.txt")

        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            status = main(["--input", missing])

        self.assertEqual(status, 2)
        self.assertIn("cannot read", stderr.getvalue())
        self.assertEqual(len(stderr.getvalue().strip().splitlines()), 1)

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("1 * 2 + 3\n")), \
                mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            status = main([])

        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "((1 * 2) + 3)\n")


if __name__ == '__main__':
    unittest.main()
