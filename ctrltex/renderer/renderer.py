"""
Unicode renderer for ctrltex syntax trees.

Walks the tree depth first and concatenates. Groups are transparent; they only
matter to the parser. Rendering is deterministic and cannot fail: unknown
commands are echoed as `\\name`, unstyled characters pass through and scripts
without a Unicode form are written as `^{...}` / `_{...}`.

The walk keeps its own stack instead of recursing, so arbitrarily deep trees
render. Each `visit_*` method receives the node and the rendered text of its
children, in `children()` order.

Author: xwest
"""

import logging
from functools import lru_cache
from typing import List, Sequence, Tuple

from ..lexer.errors import ErrorRecovery
from ..parser.ast_nodes import (
    ASTVisitor, Expression, Literal, Group, Superscript, Subscript,
    Symbol, Frac, Sqrt, StyleCommand, AccentCommand
)
from ..parser.commands import COMMANDS
from .errors import RenderWarning, create_unknown_command_warning, create_script_fallback_warning
from .scripts import to_superscript, to_subscript
from .styles import apply_style
from .symbols import SYMBOLS

logger = logging.getLogger(__name__)


# Combining marks appended once after the accented content
ACCENT_MARKS = {
    "bar": "\u0304",    # combining macron
    "hat": "\u0302",    # combining circumflex accent
    "vec": "\u20D7",    # combining right arrow above
    "dot": "\u0307",    # combining dot above
    "ddot": "\u0308",   # combining diaeresis
    "tilde": "\u0303",  # combining tilde
}

KNOWN_NAMES: Tuple[str, ...] = tuple(SYMBOLS) + tuple(COMMANDS)


@lru_cache(maxsize=256)
def suggest_commands(name: str) -> Tuple[str, ...]:
    """Known command names within a small edit distance of `name`."""
    return tuple(ErrorRecovery.suggest_similar(name, KNOWN_NAMES))


class Renderer(ASTVisitor):
    """
    Renders syntax trees to a flat Unicode string.

    A renderer holds no state besides the warnings of its last `render` call,
    so one instance can be reused for any number of trees. With
    `collect_diagnostics=False` no warnings are built at all.
    """

    def __init__(self, collect_diagnostics: bool = True):
        self.collect_diagnostics = collect_diagnostics
        self.warnings: List[RenderWarning] = []

    def render(self, expressions: Sequence[Expression]) -> str:
        """
        Render a sequence of top-level expressions.

        Args:
            expressions: Parser output

        Returns:
            The concatenated Unicode rendering
        """
        self.warnings = []
        return self._render_all(expressions)

    def render_expression(self, expression: Expression) -> str:
        """Render a single expression."""
        return self._render_all([expression])

    def _render_all(self, expressions: Sequence[Expression]) -> str:
        # Post-order walk: a node is visited once the text of all its
        # children sits on top of `results`
        results: List[str] = []
        pending = [(expr, False) for expr in reversed(expressions)]

        while pending:
            node, expanded = pending.pop()
            children = node.children()

            if children and not expanded:
                pending.append((node, True))
                pending.extend((child, False) for child in reversed(children))
                continue

            start = len(results) - len(children)
            parts = results[start:]
            del results[start:]
            results.append(node.accept(self, parts))

        return "".join(results)

    def _warn(self, warning_factory, *args):
        if self.collect_diagnostics:
            self.warnings.append(warning_factory(*args))

    # Expressions

    def visit_Literal(self, node: Literal, parts: List[str]) -> str:
        return node.char

    def visit_Group(self, node: Group, parts: List[str]) -> str:
        return "".join(parts)

    def visit_Superscript(self, node: Superscript, parts: List[str]) -> str:
        base, exponent = parts

        raised = to_superscript(exponent)
        if raised is not None:
            return base + raised

        logger.debug("No superscript form for %r", exponent)
        self._warn(create_script_fallback_warning, "superscript", exponent)
        return f"{base}^{{{exponent}}}"

    def visit_Subscript(self, node: Subscript, parts: List[str]) -> str:
        base, index = parts

        lowered = to_subscript(index)
        if lowered is not None:
            return base + lowered

        logger.debug("No subscript form for %r", index)
        self._warn(create_script_fallback_warning, "subscript", index)
        return f"{base}_{{{index}}}"

    # Commands

    def visit_Frac(self, node: Frac, parts: List[str]) -> str:
        numerator, denominator = parts
        return f"({numerator})/({denominator})"

    def visit_Sqrt(self, node: Sqrt, parts: List[str]) -> str:
        return f"√({parts[0]})"

    def visit_StyleCommand(self, node: StyleCommand, parts: List[str]) -> str:
        return apply_style(node.name, parts[0])

    def visit_AccentCommand(self, node: AccentCommand, parts: List[str]) -> str:
        return parts[0] + ACCENT_MARKS[node.name]

    def visit_Symbol(self, node: Symbol, parts: List[str]) -> str:
        text = SYMBOLS.get(node.name)
        if text is not None:
            return text

        if self.collect_diagnostics:
            self.warnings.append(
                create_unknown_command_warning(node.name, suggest_commands(node.name))
            )
        return "\\" + node.name


def render(expressions: Sequence[Expression]) -> str:
    """Convenience function: render expressions with a fresh Renderer."""
    return Renderer().render(expressions)
