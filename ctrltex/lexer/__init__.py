"""
ctrltex Lexer Package

Lazy tokenizer for the math markup subset understood by ctrltex.

Key Features:
- Single-token pull interface for one-token-lookahead parsing
- Backslash commands, control symbols and % comments
- Source location tracking for diagnostics
- Never fails: anomalies become warnings, not exceptions

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
