"""
ctrltex

Converts LaTeX-style math markup into plain Unicode text, e.g.
``\\alpha^2 + \\beta_i`` becomes ``α²+βᵢ``.

Architecture:
    ctrltex/
    ├── lexer/           # Tokenization
    ├── parser/          # Command registry, syntax tree, recursive descent parser
    ├── renderer/        # Unicode rendering and symbol tables
    ├── converter.py     # Pipeline entry points
    └── cli.py           # Command-line interface

Author: xwest
License: MIT
"""

from ._version import __version__

__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer
from .parser import Parser
from .renderer import Renderer
from .converter import (
    convert, convert_string, convert_file,
    Converter, ConverterConfig, ConversionResult
)
from .errors import ConversionError

__all__ = [
    # Pipeline
    "convert",
    "convert_string",
    "convert_file",
    "Converter",
    "ConverterConfig",
    "ConversionResult",
    "ConversionError",

    # Stages
    "Lexer",
    "Parser",
    "Renderer",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
