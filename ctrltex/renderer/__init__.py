"""
ctrltex Renderer Package

Turns a syntax tree into plain Unicode text.

Key Features:
- Superscript/subscript characters with bracketed fallback
- Mathematical alphanumeric styles (blackboard, calligraphic, fraktur, ...)
- Combining accents
- Symbol table for Greek letters, operators, arrows and spacing commands

Author: xwest
"""

from .renderer import Renderer, render, suggest_commands, ACCENT_MARKS
from .scripts import to_superscript, to_subscript, SUPERSCRIPTS, SUBSCRIPTS
from .styles import apply_style, AlphabetStyle, STYLES
from .symbols import SYMBOLS, FUNCTION_NAMES
from .errors import RenderWarning

__all__ = [
    "Renderer",
    "render",
    "suggest_commands",
    "ACCENT_MARKS",
    "to_superscript",
    "to_subscript",
    "SUPERSCRIPTS",
    "SUBSCRIPTS",
    "apply_style",
    "AlphabetStyle",
    "STYLES",
    "SYMBOLS",
    "FUNCTION_NAMES",
    "RenderWarning",
]
