"""
Token definitions for the ctrltex lexer.

The math markup grammar only needs a handful of token kinds:
- Commands (backslash sequences such as \\alpha, \\frac, \\{)
- Grouping delimiters ({ }) and the literal brackets/parentheses
- Script operators (^ and _)
- Plain characters
- End of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token kinds the parser consumes."""

    COMMAND = auto()                # \alpha, \frac, \{, \,

    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    SUPERSCRIPT = auto()            # ^
    SUBSCRIPT = auto()              # _

    CHAR = auto()                   # any other single character

    EOF = auto()                    # end of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input text.

    Used for diagnostics only; it never influences the converted output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `value` holds the command name for COMMAND tokens and the character for
    CHAR tokens; it is None for every other kind. The location is excluded
    from equality so tokens compare by kind and value alone.
    """
    type: TokenType
    value: Optional[str] = None
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def lexeme(self) -> str:
        """Source text this token was read from (location-independent)."""
        if self.type == TokenType.COMMAND:
            return "\\" + (self.value or "")
        if self.type == TokenType.CHAR:
            return self.value or ""
        return TOKEN_LEXEMES.get(self.type, "")

    @property
    def is_delimiter(self) -> bool:
        """Check if this token is one of the literal bracket/paren delimiters."""
        return self.type in DELIMITER_LITERALS

    @property
    def is_script(self) -> bool:
        """Check if this token is a postfix script operator."""
        return self.type in (TokenType.SUPERSCRIPT, TokenType.SUBSCRIPT)


# Structural single characters, one token each
STRUCTURAL_CHARS = {
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "^": TokenType.SUPERSCRIPT,
    "_": TokenType.SUBSCRIPT,
}

TOKEN_LEXEMES = {token_type: char for char, token_type in STRUCTURAL_CHARS.items()}

# Delimiters the parser turns back into literal characters
DELIMITER_LITERALS = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
}

COMMENT_CHAR = "%"
ESCAPE_CHAR = "\\"
LINE_TERMINATORS = ("\n", "\r")
