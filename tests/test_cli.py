"""
Tests for the ctrltex command-line interface.

Author: xwest
"""

import unittest
import sys
import os
import io
import tempfile
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from ctrltex.cli import main, build_arg_parser


class TestCLI(unittest.TestCase):
    """Test cases for ctrltex.cli.main."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        for name in os.listdir(self.temp_dir):
            os.unlink(os.path.join(self.temp_dir, name))
        os.rmdir(self.temp_dir)

    def _run(self, argv, stdin: str = ""):
        """Run main() and capture its exit code, stdout and stderr."""
        stdout, stderr = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdin", io.StringIO(stdin)), \
                mock.patch.object(sys, "stdout", stdout), \
                mock.patch.object(sys, "stderr", stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_convert_argument(self):
        code, out, _ = self._run([r"\alpha^2 + \beta_i"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "α²+βᵢ\n")

    def test_convert_stdin(self):
        code, out, _ = self._run([], stdin="\\mathbb{R}^n\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "ℝⁿ\n")

    def test_convert_file_to_file(self):
        source = os.path.join(self.temp_dir, "in.tex")
        target = os.path.join(self.temp_dir, "out.txt")
        with open(source, 'w', encoding='utf-8') as f:
            f.write("\\frac{1}{2}")

        code, out, _ = self._run(["-f", source, "-o", target])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        with open(target, 'r', encoding='utf-8') as f:
            self.assertEqual(f.read(), "(1)/(2)")

    def test_missing_input_file(self):
        code, out, _ = self._run(["-f", os.path.join(self.temp_dir, "nope.tex")])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_recovered_input_still_succeeds(self):
        code, out, _ = self._run([r"\frac{a}"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "()/(a)\n")

    def test_strict_failure(self):
        code, out, err = self._run(["--strict", r"\frac{a}"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("P002", err)

    def test_strict_success(self):
        code, out, _ = self._run(["--strict", r"\gamma"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "γ\n")

    def test_diagnostics(self):
        code, out, err = self._run(["--diagnostics", r"\foo"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "\\foo\n")
        self.assertIn("WARNING[R001]", err)

    def test_diagnostics_summary(self):
        code, _, err = self._run(["--diagnostics", r"\foo {"])
        self.assertEqual(code, 0)
        self.assertIn("   1 x R001  Unknown command", err)
        self.assertIn("   1 x P001  Unclosed group", err)

    def test_clean_input_has_no_summary(self):
        code, _, err = self._run(["--diagnostics", r"\alpha"])
        self.assertEqual(code, 0)
        self.assertEqual(err, "")

    def test_tokens(self):
        code, out, _ = self._run(["--tokens", r"\alpha^2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "COMMAND('alpha')\nSUPERSCRIPT\nCHAR('2')\nEOF\n")

    def test_tree(self):
        code, out, _ = self._run(["--tree", r"\alpha^2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Superscript\n  Symbol 'alpha'\n  Literal '2'\n")

    def test_tokens_and_tree_are_exclusive(self):
        with self.assertRaises(SystemExit):
            self._run(["--tokens", "--tree", "x"])

    def test_text_and_file_are_exclusive(self):
        path = os.path.join(self.temp_dir, "in.tex")
        with open(path, 'w', encoding='utf-8') as f:
            f.write("y")
        with self.assertRaises(SystemExit) as context:
            self._run(["x", "-f", path])
        self.assertEqual(context.exception.code, 2)

    def test_file_alone_is_accepted(self):
        args = build_arg_parser().parse_args(["-f", "in.tex"])
        self.assertIsNone(args.text)
        self.assertEqual(args.file, "in.tex")

    def test_arg_parser_defaults(self):
        args = build_arg_parser().parse_args([])
        self.assertIsNone(args.text)
        self.assertIsNone(args.file)
        self.assertFalse(args.strict)
        self.assertEqual(args.verbose, 0)


if __name__ == '__main__':
    unittest.main()
