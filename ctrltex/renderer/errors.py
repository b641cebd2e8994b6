"""
Diagnostics for the ctrltex renderer.

Rendering always produces a string. These warnings flag the places where the
output falls back to markup notation instead of Unicode.

Author: xwest
"""

from typing import Optional, List, Sequence

from ..lexer.errors import Diagnostic


class RenderWarning:
    """
    Represents a renderer warning that doesn't stop conversion.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        # Syntax tree nodes carry no source locations
        self.diagnostic = Diagnostic(
            message=message,
            location=None,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "R001": "Unknown command",
    "R002": "No Unicode superscript",
    "R003": "No Unicode subscript",
}


def create_unknown_command_warning(name: str, suggestions: Sequence[str] = ()) -> RenderWarning:
    """Create a warning for a command with no Unicode rendering, given close known names."""
    help_text = None
    if suggestions:
        help_text = f"Did you mean \\{suggestions[0]}?"

    return RenderWarning(
        message=f"Unknown command \\{name} left as is",
        code="R001",
        help_text=help_text,
        suggestions=[f"\\{suggestion}" for suggestion in suggestions]
    )


def create_script_fallback_warning(kind: str, text: str) -> RenderWarning:
    """Create a warning for a script that had to be written as ^{...} or _{...}."""
    code = "R002" if kind == "superscript" else "R003"
    marker = "^" if kind == "superscript" else "_"
    return RenderWarning(
        message=f"'{text}' has no Unicode {kind}, written as {marker}{{{text}}}",
        code=code,
    )
