"""
Syntax tree node definitions for ctrltex.

The tree is strictly owned: every child belongs to exactly one parent, there
are no parent pointers and nodes are immutable after construction. Nodes are
frozen dataclasses, so two trees compare equal when they have the same shape.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Sequence, Tuple
from dataclasses import dataclass


class ASTVisitor:
    """
    Visitor base class.

    `visit` dispatches to `visit_<ClassName>`, walking up the node's class
    hierarchy, so a visitor may handle a whole family of nodes (e.g. every
    style command) with one method. Extra arguments are passed through, which
    lets a visitor that walks the tree itself hand over results computed for
    the node's children.
    """

    def visit(self, node: 'ASTNode', *args) -> Any:
        for cls in type(node).__mro__:
            method = getattr(self, f"visit_{cls.__name__}", None)
            if method is not None:
                return method(node, *args)
        return self.generic_visit(node, *args)

    def generic_visit(self, node: 'ASTNode', *args) -> Any:
        raise NotImplementedError(f"{type(self).__name__} cannot visit {type(node).__name__}")


class ASTNode(ABC):
    """Base class for all syntax tree nodes."""

    def accept(self, visitor: ASTVisitor, *args) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self, *args)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class Literal(Expression):
    """A single character taken verbatim from the input."""
    char: str

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Group(Expression):
    """A brace-delimited sequence. Transparent when rendered."""
    items: Tuple[Expression, ...] = ()

    def __init__(self, items: Sequence[Expression] = ()):
        object.__setattr__(self, "items", tuple(items))

    def children(self) -> List[ASTNode]:
        return list(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Superscript(Expression):
    """`base ^ exponent`."""
    base: Expression
    exponent: Expression

    def children(self) -> List[ASTNode]:
        return [self.base, self.exponent]


@dataclass(frozen=True)
class Subscript(Expression):
    """`base _ index`."""
    base: Expression
    index: Expression

    def children(self) -> List[ASTNode]:
        return [self.base, self.index]


# ============================================================================
# Commands
# ============================================================================

class CommandNode(Expression):
    """Base class for nodes built from a backslash command."""
    command_name: ClassVar[str] = ""
    arity: ClassVar[int] = 0

    @property
    def name(self) -> str:
        return self.command_name


@dataclass(frozen=True)
class Symbol(CommandNode):
    """Leaf command: Greek letters, operators and any unknown command name."""
    symbol_name: str

    @property
    def name(self) -> str:
        return self.symbol_name

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Frac(CommandNode):
    """\\frac{numerator}{denominator}"""
    numerator: Expression
    denominator: Expression
    command_name: ClassVar[str] = "frac"
    arity: ClassVar[int] = 2

    def children(self) -> List[ASTNode]:
        return [self.numerator, self.denominator]


@dataclass(frozen=True)
class UnaryCommand(CommandNode):
    """A command wrapping exactly one sub-expression."""
    content: Expression
    arity: ClassVar[int] = 1

    def children(self) -> List[ASTNode]:
        return [self.content]


class Sqrt(UnaryCommand):
    command_name = "sqrt"


# Style wrappers remap the codepoints of their rendered content

class StyleCommand(UnaryCommand):
    pass


class Mathcal(StyleCommand):
    command_name = "mathcal"


class Mathbb(StyleCommand):
    command_name = "mathbb"


class Mathfrak(StyleCommand):
    command_name = "mathfrak"


class Mathbf(StyleCommand):
    command_name = "mathbf"


class Mathit(StyleCommand):
    command_name = "mathit"


class Mathsf(StyleCommand):
    command_name = "mathsf"


class Mathtt(StyleCommand):
    command_name = "mathtt"


# Accent wrappers append one combining mark to their rendered content

class AccentCommand(UnaryCommand):
    pass


class Bar(AccentCommand):
    command_name = "bar"


class Hat(AccentCommand):
    command_name = "hat"


class Vec(AccentCommand):
    command_name = "vec"


class Dot(AccentCommand):
    command_name = "dot"


class Ddot(AccentCommand):
    command_name = "ddot"


class Tilde(AccentCommand):
    command_name = "tilde"


def dump_tree(nodes: Sequence[ASTNode], indent: str = "  ") -> str:
    """Return an indented, one-node-per-line description of a node sequence."""
    lines: List[str] = []

    def describe(node: ASTNode) -> str:
        if isinstance(node, Literal):
            return f"Literal {node.char!r}"
        if isinstance(node, Symbol):
            return f"Symbol {node.name!r}"
        if isinstance(node, Group) and node.is_empty:
            return "Group (empty)"
        return type(node).__name__

    # Pre-order walk with an explicit stack
    pending = [(node, 0) for node in reversed(nodes)]
    while pending:
        node, depth = pending.pop()
        lines.append(indent * depth + describe(node))
        pending.extend((child, depth + 1) for child in reversed(node.children()))

    return "\n".join(lines)
