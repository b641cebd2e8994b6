"""
ctrltex Parser Package

Recursive descent parser producing an immutable syntax tree.

Key Features:
- Single-token lookahead over a lazy token stream
- Arity-directed command arguments via the command registry
- Left-nested superscript/subscript chains
- Error tolerant: skips, pads and stops instead of raising

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string
from .errors import ParseWarning
from . import commands

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "commands",

    # Syntax tree
    "ASTNode", "ASTVisitor", "Expression",
    "Literal", "Group", "Superscript", "Subscript",
    "CommandNode", "Symbol", "Frac", "UnaryCommand", "Sqrt",
    "StyleCommand", "Mathcal", "Mathbb", "Mathfrak", "Mathbf", "Mathit", "Mathsf", "Mathtt",
    "AccentCommand", "Bar", "Hat", "Vec", "Dot", "Ddot", "Tilde",
    "dump_tree",

    # Diagnostics
    "ParseWarning",
]
