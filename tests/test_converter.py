"""
End-to-end tests for the ctrltex conversion pipeline.

Tests cover:
- convert() on well-formed markup
- Totality on malformed input
- Converter diagnostics and strict mode
- String and file convenience functions

Author: xwest
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import ctrltex
from ctrltex import (
    convert, convert_string, convert_file, Converter, ConverterConfig,
    ConversionResult, ConversionError
)
from ctrltex.errors import ERROR_CODES, summarize_diagnostics


class TestConvert(unittest.TestCase):
    """convert() on well-formed input."""

    def test_examples(self):
        cases = {
            r"\alpha^2 + \beta_i = \frac{\gamma}{2}": "α²+βᵢ=(γ)/(2)",
            r"\mathbb{R}^n": "ℝⁿ",
            r"x_1^2": "x₁²",
            r"\frac{a}{b}": "(a)/(b)",
            r"\sqrt{x^2 + y^2}": "√(x²+y²)",
            r"\forall \epsilon > 0 \exists \delta > 0": "∀ε>0∃δ>0",
            r"\sum_i x_i^2": "∑ᵢxᵢ²",
            r"\{ a, b \}": "{a,b}",
            r"\lim_{n \to \infty} a_n": "lim_{n→∞}aₙ",
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(convert(source), expected)

    def test_whitespace_is_dropped(self):
        self.assertEqual(convert("a  b\n\tc"), "abc")
        self.assertEqual(convert("   "), "")

    def test_comments_are_dropped(self):
        self.assertEqual(convert("x^2 % squared\n+ 1"), "x²+1")
        self.assertEqual(convert("x % c\ny"), convert("x y"))

    def test_plain_text_passes_through(self):
        self.assertEqual(convert("a+b=c"), "a+b=c")
        self.assertEqual(convert("αβγ"), "αβγ")

    def test_package_exports(self):
        self.assertIs(ctrltex.convert, convert)
        self.assertTrue(ctrltex.__version__)


class TestTotality(unittest.TestCase):
    """Malformed markup still converts without raising."""

    MALFORMED = {
        "": "",
        "{": "",
        "}": "",
        "\\": "\\",
        "^": "",
        "_": "",
        "x^": "x",
        "^x": "x",
        "{{{": "",
        "}}}x": "",
        "a}b": "a",
        "{ab": "ab",
        "\\frac": "()/()",
        "\\frac{a}": "()/(a)",
        "\\sqrt": "√()",
        "\\mathbb": "",
        "%": "",
        "x%": "x",
        "x^{q}": "x^{q}",
        "\\nosuchcommand": "\\nosuchcommand",
        "x__y": "xy",
    }

    def test_malformed_inputs(self):
        for source, expected in self.MALFORMED.items():
            with self.subTest(source=source):
                self.assertEqual(convert(source), expected)

    def test_arbitrary_characters(self):
        sources = ["\\\\\\", "^_^_", "{}{}}{", "\\{\\}}", "\x00\x01", "😀^😀", "\\" + "a" * 1000]
        for source in sources:
            with self.subTest(source=source):
                self.assertIsInstance(convert(source), str)

    def test_deterministic(self):
        source = r"\frac{\alpha}{\beta^2} \mathcal{L} \unknown"
        self.assertEqual(convert(source), convert(source))


class TestDeepNesting(unittest.TestCase):
    """Nesting depth is not bounded by the interpreter stack."""

    DEPTH = 1500

    def test_nested_groups(self):
        source = "{" * self.DEPTH + "x" + "}" * self.DEPTH
        self.assertEqual(convert(source), "x")

    def test_nested_scripts(self):
        source = "x^{" * self.DEPTH + "x" + "}" * self.DEPTH
        # Only the innermost exponent has a superscript form
        expected = "x^{" * (self.DEPTH - 1) + "x\u02e3" + "}" * (self.DEPTH - 1)
        self.assertEqual(convert(source), expected)

    def test_nested_commands(self):
        self.assertEqual(convert("\\sqrt" * self.DEPTH + "x"),
                         "\u221a(" * self.DEPTH + "x" + ")" * self.DEPTH)
        self.assertEqual(convert("\\mathbb{" * self.DEPTH + "R" + "}" * self.DEPTH), "\u211d")

    def test_nested_fractions(self):
        source = "\\frac{" * self.DEPTH + "1}{2}" + "}{2}" * (self.DEPTH - 1)
        expected = "(" * self.DEPTH + "1)/(2)" + ")/(2)" * (self.DEPTH - 1)
        self.assertEqual(convert(source), expected)

    def test_unclosed_groups_with_diagnostics(self):
        result = Converter().convert("{" * self.DEPTH)
        self.assertEqual(result.text, "")
        self.assertEqual(len(result.diagnostics), self.DEPTH)
        self.assertEqual({d.code for d in result.diagnostics}, {"P001"})


class TestConverter(unittest.TestCase):
    """Converter results and diagnostics."""

    def test_clean_input_has_no_diagnostics(self):
        result = Converter().convert(r"\alpha^2")
        self.assertIsInstance(result, ConversionResult)
        self.assertEqual(result.text, "α²")
        self.assertEqual(result.diagnostics, [])
        self.assertFalse(result.has_warnings())

    def test_diagnostics_from_every_stage(self):
        result = Converter().convert("\\frac{a} \\foo x^{q} \\")
        codes = [diagnostic.code for diagnostic in result.diagnostics]
        # The trailing backslash also renders as an unknown empty command
        self.assertEqual(codes, ["L001", "P002", "R001", "R002", "R001"])
        self.assertTrue(result.has_warnings())

    def test_info_is_not_a_warning(self):
        result = Converter().convert("x % note")
        self.assertEqual([d.code for d in result.diagnostics], ["L002"])
        self.assertFalse(result.has_warnings())
        self.assertEqual(result.warnings, [])

    def test_text_matches_convert(self):
        source = r"\frac{1}{\sqrt{2}} \hat{x}_i"
        self.assertEqual(Converter().convert(source).text, convert(source))

    def test_diagnostics_can_be_disabled(self):
        config = ConverterConfig(collect_diagnostics=False)
        result = Converter(config).convert(r"\frac{a}")
        self.assertEqual(result.text, "()/(a)")
        self.assertEqual(result.diagnostics, [])

    def test_filename_in_locations(self):
        config = ConverterConfig(filename="notes.tex")
        result = Converter(config).convert("{x")
        self.assertEqual(result.diagnostics[0].location.filename, "notes.tex")
        self.assertIn("notes.tex:1:1", str(result.diagnostics[0]))

    def test_summarize_diagnostics(self):
        result = Converter().convert(r"\foo \baz {")
        summary = summarize_diagnostics(result.diagnostics)
        self.assertEqual(summary.splitlines(), [
            "   1 x P001  Unclosed group",
            "   2 x R001  Unknown command",
        ])

    def test_every_code_has_a_title(self):
        for code in ["L001", "L002", "P001", "P002", "P003", "P004", "P005",
                     "R001", "R002", "R003"]:
            self.assertIn(code, ERROR_CODES)


class TestStrictMode(unittest.TestCase):
    """Strict conversion rejects input that needed recovery."""

    def test_strict_accepts_clean_input(self):
        config = ConverterConfig(strict=True)
        self.assertEqual(Converter(config).convert(r"\beta_0").text, "β₀")

    def test_strict_raises_first_warning(self):
        config = ConverterConfig(strict=True)
        with self.assertRaises(ConversionError) as context:
            Converter(config).convert(r"\frac{a} \foo")
        error = context.exception
        self.assertEqual(error.diagnostic.code, "P002")
        self.assertEqual([d.code for d in error.diagnostics], ["P002", "R001"])
        self.assertIn("P002", str(error))

    def test_strict_ignores_info(self):
        self.assertEqual(convert_string("x % note", strict=True), "x")

    def test_strict_with_diagnostics_disabled(self):
        config = ConverterConfig(strict=True, collect_diagnostics=False)
        with self.assertRaises(ConversionError):
            Converter(config).convert("{")

    def test_convert_string_strict(self):
        self.assertEqual(convert_string("x^2"), "x²")
        self.assertEqual(convert_string("x^{q}"), "x^{q}")
        with self.assertRaises(ConversionError):
            convert_string("x^{q}", strict=True)


class TestConvertFile(unittest.TestCase):
    """File conversion."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        for name in os.listdir(self.temp_dir):
            os.unlink(os.path.join(self.temp_dir, name))
        os.rmdir(self.temp_dir)

    def _write(self, name: str, content: str) -> str:
        path = os.path.join(self.temp_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_convert_file(self):
        path = self._write("formula.tex", "% header\n\\mathbb{Z}_n\n")
        self.assertEqual(convert_file(path), "ℤₙ")

    def test_convert_file_strict_reports_path(self):
        path = self._write("broken.tex", "\\sqrt")
        with self.assertRaises(ConversionError) as context:
            convert_file(path, strict=True)
        self.assertEqual(context.exception.diagnostic.location.filename, path)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            convert_file(os.path.join(self.temp_dir, "missing.tex"))


if __name__ == '__main__':
    unittest.main()
