"""
ctrltex Lexer - turns markup text into tokens, one at a time

Tokens are produced on demand so the parser can work with a single token of
lookahead. There are no lexical errors: a lone backslash becomes a command
with an empty name, comments simply disappear.

xwest
"""

import logging
from typing import Iterator, List

from .tokens import (
    Token, TokenType, SourceLocation, STRUCTURAL_CHARS,
    COMMENT_CHAR, ESCAPE_CHAR, LINE_TERMINATORS
)
from .errors import (
    LexerWarning, create_trailing_backslash_warning, create_comment_to_eof_warning
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    ctrltex lexical analyzer.

    Call `next_token()` repeatedly, or iterate the lexer. Iteration yields
    the EOF token exactly once and then stops.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with markup text.

        Args:
            source: Markup text
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.warnings: List[LexerWarning] = []
        self._finished = False

    def __iter__(self) -> Iterator[Token]:
        while not self._finished:
            token = self.next_token()
            if token.type == TokenType.EOF:
                self._finished = True
            yield token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining input.

        Returns:
            List of tokens ending with a single EOF token
        """
        tokens = list(self)
        logger.debug("Tokenized %s into %d tokens", self.filename, len(tokens))
        return tokens

    def next_token(self) -> Token:
        """Produce the next token from the input."""
        self._skip_whitespace_and_comments()

        location = self._location()

        if self.pos >= len(self.source):
            return Token(TokenType.EOF, None, location)

        current_char = self.source[self.pos]

        if current_char == ESCAPE_CHAR:
            self._advance()
            return self._read_command(location)

        token_type = STRUCTURAL_CHARS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, None, location)

        self._advance()
        return Token(TokenType.CHAR, current_char, location)

    def _read_command(self, location: SourceLocation) -> Token:
        """Read a command name following a backslash."""
        if self.pos >= len(self.source):
            self.warnings.append(create_trailing_backslash_warning(location))
            return Token(TokenType.COMMAND, "", location)

        if not self.source[self.pos].isalpha():
            # Control symbol: exactly one character of any kind
            name = self.source[self.pos]
            self._advance()
            return Token(TokenType.COMMAND, name, location)

        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos].isalpha():
            self._advance()

        return Token(TokenType.COMMAND, self.source[start:self.pos], location)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and % comments."""
        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char.isspace():
                self._advance()
                continue

            if current_char == COMMENT_CHAR:
                location = self._location()
                self._advance()
                while (self.pos < len(self.source) and
                       self.source[self.pos] not in LINE_TERMINATORS):
                    self._advance()
                if self.pos >= len(self.source):
                    self.warnings.append(create_comment_to_eof_warning(location))
                continue

            break

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a markup string.

    Args:
        source: Markup text
        filename: Filename for diagnostics

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a file.

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
