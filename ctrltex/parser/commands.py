"""
Command registry: which commands take arguments and how their nodes are built.

The table is pure data. Every name not listed here is a zero-argument symbol
and is resolved (or echoed back) by the renderer.

Author: xwest
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping

from .ast_nodes import (
    CommandNode, Expression, Group, Symbol, Frac, Sqrt,
    Mathcal, Mathbb, Mathfrak, Mathbf, Mathit, Mathsf, Mathtt,
    Bar, Hat, Vec, Dot, Ddot, Tilde
)


@dataclass(frozen=True)
class CommandSpec:
    """Arity of a command plus the constructor for its node."""
    arity: int
    builder: Callable[..., CommandNode]


def _spec(node_class) -> CommandSpec:
    return CommandSpec(node_class.arity, node_class)


COMMANDS: Mapping[str, CommandSpec] = MappingProxyType({
    node_class.command_name: _spec(node_class)
    for node_class in (
        Frac, Sqrt,
        Mathcal, Mathbb, Mathfrak, Mathbf, Mathit, Mathsf, Mathtt,
        Bar, Hat, Vec, Dot, Ddot, Tilde,
    )
})


def is_registered(name: str) -> bool:
    """Check if `name` is a command that takes arguments."""
    return name in COMMANDS


def arity(name: str) -> int:
    """Number of arguments `name` consumes (0 for symbols and unknown names)."""
    spec = COMMANDS.get(name)
    return spec.arity if spec is not None else 0


def build(name: str, args: List[Expression]) -> CommandNode:
    """
    Build the node for command `name` from already parsed arguments.

    Arguments are taken from the END of `args`, and a missing one becomes an
    empty Group. A binary command handed a single argument therefore gets it
    in its second slot (``\\frac{a}`` -> numerator {}, denominator a).

    Args:
        name: Command name without the backslash
        args: Parsed arguments in source order (at most the command's arity)

    Returns:
        The command node; unknown names yield a Symbol
    """
    spec = COMMANDS.get(name)
    if spec is None:
        return Symbol(name)

    pending = list(args)
    slots = []
    for _ in range(spec.arity):
        slots.append(pending.pop() if pending else Group())
    slots.reverse()

    return spec.builder(*slots)
