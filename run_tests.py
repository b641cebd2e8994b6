#!/usr/bin/env python3
"""
Main test runner for ctrltex.

Runs a quick pipeline smoke check, then the unittest suite under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


SMOKE_CASES = [
    (r"\alpha^2 + \beta_i = \frac{\gamma}{2}", "α²+βᵢ=(γ)/(2)"),
    (r"\mathbb{R}^n", "ℝⁿ"),
    (r"\sum_{i=1}^{n} x_i", "∑ᵢ₌₁ⁿxᵢ"),
    (r"\forall x \in \mathbb{N}", "∀x∈ℕ"),
]

MALFORMED_CASES = ["", "{", "}", "\\", "^", r"\frac", "x^{q}", "{{{"]


def run_smoke_checks() -> bool:
    """Run the full pipeline on a few inputs."""

    print("🚀 ctrltex Test Suite")
    print("=" * 60)

    try:
        from ctrltex.lexer import Lexer
        from ctrltex.parser import Parser
        from ctrltex.renderer import Renderer
        from ctrltex import convert

        print("✅ All ctrltex modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import ctrltex modules: {e}")
        return False

    print("Testing conversion pipeline...")
    for source, expected in SMOKE_CASES:
        lexer = Lexer(source)
        tokens = lexer.tokenize()
        expressions = Parser(tokens).parse()
        output = Renderer().render(expressions)

        if output != expected:
            print(f"  ❌ {source!r}: expected {expected!r}, got {output!r}")
            return False
        print(f"  ✅ {source!r} -> {output} ({len(tokens)} tokens, {len(expressions)} expressions)")

    print()
    print("Testing malformed input...")
    for source in MALFORMED_CASES:
        try:
            output = convert(source)
        except Exception as e:
            print(f"  ❌ {source!r} raised {type(e).__name__}: {e}")
            return False
        print(f"  ✅ {source!r} -> {output!r}")

    print()
    return True


def run_unit_tests() -> bool:
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


def run_all_tests() -> bool:
    if not run_smoke_checks():
        return False

    if not run_unit_tests():
        print("❌ Unit tests FAILED")
        return False

    print()
    print("🎉 All tests PASSED!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
