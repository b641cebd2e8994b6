"""
ctrltex parser

Grammar (one token of lookahead, no backtracking):

    sequence   := expression*              until EOF, or '}' inside a group
    expression := base (('^' | '_') base)*
    base       := CHAR | COMMAND base{arity} | '{' sequence '}'? | ( ) [ ]

Script operators wrap whatever has been accumulated so far, so `x_1^2` is
`(x_1)^2`. Command arguments are bases, not expressions: `\\sqrt x^2` puts the
square on the root, not on x.

The grammar is run on an explicit stack of open constructs (groups, commands
waiting for arguments, script operators waiting for an operand) rather than by
recursion, so nesting depth is limited by memory only.

Nothing here raises. Tokens that cannot start an expression are skipped,
missing command arguments become empty groups, an unclosed group ends at EOF
and a stray '}' at top level ends the parse. Each recovery is recorded in
`self.warnings`.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from ..lexer.tokens import Token, TokenType, DELIMITER_LITERALS
from . import commands
from .ast_nodes import Expression, Group, Literal, Superscript, Subscript
from .errors import (
    ParseWarning, create_unclosed_group_warning, create_missing_argument_warning,
    create_stray_brace_warning, create_dangling_script_warning,
    create_skipped_token_warning
)

logger = logging.getLogger(__name__)


# Open constructs on the parser stack

@dataclass
class _GroupFrame:
    """A sequence being collected; the top level has no opening brace."""
    open_token: Optional[Token]
    items: List[Expression] = field(default_factory=list)


@dataclass
class _CommandFrame:
    """A command still collecting its arguments."""
    token: Token
    expected: int
    args: List[Expression] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.token.value


@dataclass
class _ScriptFrame:
    """A '^' or '_' waiting for its operand."""
    base: Expression
    operator: Token

    def wrap(self, operand: Expression) -> Expression:
        if self.operator.type == TokenType.SUPERSCRIPT:
            return Superscript(self.base, operand)
        return Subscript(self.base, operand)


_Frame = Union[_GroupFrame, _CommandFrame, _ScriptFrame]


class Parser:
    """
    ctrltex parser.

    Pulls tokens from any token iterable (normally a Lexer) on demand.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a token source.

        Args:
            tokens: A Lexer or any iterable of tokens ending with EOF
        """
        self._tokens: Iterator[Token] = iter(tokens)
        self.warnings: List[ParseWarning] = []
        self.current: Token = next(self._tokens, None) or Token(TokenType.EOF)

    def parse(self) -> List[Expression]:
        """
        Parse the token stream.

        Returns:
            The top-level expressions in source order
        """
        root = _GroupFrame(None)
        stack: List[_Frame] = [root]

        # Every iteration asks for one base on behalf of the innermost open construct
        while stack:
            base = self._parse_base(stack)
            if base is not None:
                self._deliver(stack, base)

        logger.debug("Parsed %d top-level expressions with %d warnings",
                     len(root.items), len(self.warnings))
        return root.items

    def _parse_base(self, stack: List[_Frame]) -> Optional[Expression]:
        """
        Read the next base.

        Returns a finished node, or None when a construct was opened on the
        stack or the missing base was dealt with by recovery.
        """
        token = self.current

        if token.type == TokenType.CHAR:
            self._advance()
            return Literal(token.value)

        if token.is_delimiter:
            self._advance()
            return Literal(DELIMITER_LITERALS[token.type])

        if token.type == TokenType.COMMAND:
            self._advance()
            expected = commands.arity(token.value)
            if expected == 0:
                return commands.build(token.value, [])
            stack.append(_CommandFrame(token, expected))
            return None

        if token.type == TokenType.LEFT_BRACE:
            self._advance()
            stack.append(_GroupFrame(token))
            return None

        return self._missing_base(stack)

    def _missing_base(self, stack: List[_Frame]) -> Optional[Expression]:
        """Handle a token that cannot start a base, depending on what waits for one."""
        frame = stack[-1]

        if isinstance(frame, _CommandFrame):
            stack.pop()
            self.warnings.append(create_missing_argument_warning(
                frame.name, frame.expected, len(frame.args), frame.token.location
            ))
            return commands.build(frame.name, frame.args)

        if isinstance(frame, _ScriptFrame):
            # The operator is dropped and the expression ends here
            stack.pop()
            self.warnings.append(create_dangling_script_warning(frame.operator))
            stack[-1].items.append(frame.base)
            return None

        if not self._check(TokenType.EOF) and not self._check(TokenType.RIGHT_BRACE):
            self._skip()
            return None

        stack.pop()

        if frame.open_token is None:
            if self._check(TokenType.RIGHT_BRACE):
                self.warnings.append(create_stray_brace_warning(self.current))
            return None

        if not self._match(TokenType.RIGHT_BRACE):
            self.warnings.append(create_unclosed_group_warning(frame.open_token.location))
        return Group(frame.items)

    def _deliver(self, stack: List[_Frame], node: Expression):
        """Hand a finished base to the construct waiting for it."""
        while True:
            frame = stack[-1]

            if isinstance(frame, _CommandFrame):
                frame.args.append(node)
                if len(frame.args) < frame.expected:
                    return
                stack.pop()
                node = commands.build(frame.name, frame.args)
                continue

            if isinstance(frame, _ScriptFrame):
                stack.pop()
                node = frame.wrap(node)

            # node is an expression in progress inside a group
            if self.current.is_script:
                stack.append(_ScriptFrame(node, self._advance()))
            else:
                stack[-1].items.append(node)
            return

    # Utility methods

    def _skip(self):
        """Drop a token that cannot start an expression."""
        self.warnings.append(create_skipped_token_warning(self.current))
        self._advance()

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self.current.type == token_type

    def _advance(self) -> Token:
        """Consume the current token and return it. EOF is never consumed."""
        previous = self.current
        if previous.type != TokenType.EOF:
            self.current = next(self._tokens, None) or Token(TokenType.EOF, None, previous.location)
        return previous

    def has_warnings(self) -> bool:
        """Check if parser recorded any warnings."""
        return len(self.warnings) > 0


def parse_string(source: str, filename: str = "<string>") -> List[Expression]:
    """
    Convenience function to parse a markup string.

    Args:
        source: Markup text
        filename: Filename for diagnostics

    Returns:
        Top-level expressions
    """
    from ..lexer import Lexer

    return Parser(Lexer(source, filename)).parse()
