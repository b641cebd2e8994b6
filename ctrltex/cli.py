#!/usr/bin/env python3
"""
ctrltex command-line interface
==============================

Converts math markup to Unicode text.

Usage:
    ctrltex [options] [TEXT]

Input is TEXT, the file given with --file, or standard input.

Options:
    -f, --file PATH     Read input from PATH
    -o, --output PATH   Write the result to PATH instead of stdout
    --strict            Fail (exit 1) if the input needed any recovery
    --diagnostics       Print diagnostics and a per-code summary to stderr
    --tokens            Print the token stream instead of converting
    --tree              Print the syntax tree instead of converting
    -v, --verbose       More logging (repeat for debug output)
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .converter import Converter, ConverterConfig
from .errors import ConversionError, summarize_diagnostics
from .lexer import Lexer
from .parser import Parser, dump_tree

logger = logging.getLogger("ctrltex")


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""

    parser = argparse.ArgumentParser(
        prog="ctrltex",
        description="Convert LaTeX-style math markup to plain Unicode text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=r"""
Examples:
    ctrltex '\alpha^2 + \beta_i'            # α²+βᵢ
    ctrltex -f formula.tex -o formula.txt   # Convert a file
    echo '\mathbb{R}^n' | ctrltex           # Read from stdin
    ctrltex --strict '\frac{1}'             # Exit 1: missing argument
        """
    )

    # Input options
    source = parser.add_mutually_exclusive_group()
    source.add_argument('text', nargs='?',
                        help='Markup to convert (default: read stdin)')
    source.add_argument('-f', '--file',
                        help='Read markup from a UTF-8 file')

    # Output options
    parser.add_argument('-o', '--output',
                        help='Write the result to a file instead of stdout')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if the input needed any recovery')
    parser.add_argument('--diagnostics', action='store_true',
                        help='Print diagnostics and a per-code summary to stderr')

    # Debug views
    view = parser.add_mutually_exclusive_group()
    view.add_argument('--tokens', action='store_true',
                      help='Print the token stream and exit')
    view.add_argument('--tree', action='store_true',
                      help='Print the syntax tree and exit')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase logging verbosity (-v info, -vv debug)')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def configure_logging(verbosity: int):
    """Set up logging for the requested verbosity."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_input(args: argparse.Namespace) -> str:
    """Return the markup to convert from the argument, a file or stdin."""
    if args.text is not None:
        return args.text

    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()

    return sys.stdin.read()


def write_output(text: str, output: Optional[str]):
    """Write the result to a file or stdout."""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.info("Wrote %d characters to %s", len(text), output)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ctrltex command"""

    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        source = read_input(args)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1

    filename = args.file or "<input>"

    try:
        if args.tokens:
            tokens = Lexer(source, filename).tokenize()
            write_output("\n".join(str(token) for token in tokens), args.output)
            return 0

        if args.tree:
            expressions = Parser(Lexer(source, filename)).parse()
            write_output(dump_tree(expressions), args.output)
            return 0

        config = ConverterConfig(filename=filename, strict=args.strict)
        result = Converter(config).convert(source)

        if args.diagnostics:
            for diagnostic in result.diagnostics:
                sys.stderr.write(str(diagnostic))
            if result.diagnostics:
                sys.stderr.write(summarize_diagnostics(result.diagnostics) + "\n")
        else:
            for diagnostic in result.warnings:
                logger.warning("%s", diagnostic.message)

        write_output(result.text, args.output)
        return 0

    except ConversionError as e:
        logger.error("Conversion failed in strict mode")
        sys.stderr.write(str(e))
        return 1
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return 1
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())
