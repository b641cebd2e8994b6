"""
Diagnostics for the ctrltex parser.

The parser is error tolerant: it skips, pads or stops instead of raising.
Each of those recoveries is recorded as a ParseWarning.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic


class ParseWarning:
    """
    Represents a parser warning that doesn't stop conversion.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "P001": "Unclosed group",
    "P002": "Missing command argument",
    "P003": "Unmatched closing brace",
    "P004": "Script operator without operand",
    "P005": "Unexpected token skipped",
}


def create_unclosed_group_warning(location: SourceLocation) -> ParseWarning:
    """Create a warning for a '{' that is never closed."""
    return ParseWarning(
        message="Group opened here is never closed",
        location=location,
        code="P001",
        help_text="The group was closed implicitly at the end of input.",
        suggestions=["Add a closing '}'"]
    )


def create_missing_argument_warning(name: str, expected: int, found: int,
                                    location: SourceLocation) -> ParseWarning:
    """Create a warning for a command that received fewer arguments than it takes."""
    plural = "argument" if expected == 1 else "arguments"
    return ParseWarning(
        message=f"\\{name} expects {expected} {plural}, found {found}",
        location=location,
        code="P002",
        help_text="Missing arguments are treated as empty groups.",
        suggestions=[f"Write \\{name}" + "{...}" * expected]
    )


def create_stray_brace_warning(token: Token) -> ParseWarning:
    """Create a warning for a '}' with no matching '{' at top level."""
    return ParseWarning(
        message="Unmatched '}' ends the input",
        location=token.location,
        token=token,
        code="P003",
        help_text="Everything after this brace is ignored.",
        suggestions=["Remove the '}'", "Use \\} for a literal brace"]
    )


def create_dangling_script_warning(token: Token) -> ParseWarning:
    """Create a warning for '^' or '_' with nothing to attach."""
    return ParseWarning(
        message=f"'{token.lexeme}' has no operand",
        location=token.location,
        token=token,
        code="P004",
        help_text="The script operator is ignored.",
    )


def create_skipped_token_warning(token: Token) -> ParseWarning:
    """Create a warning for a token that cannot start an expression."""
    return ParseWarning(
        message=f"Unexpected '{token.lexeme}' skipped",
        location=token.location,
        token=token,
        code="P005",
    )
