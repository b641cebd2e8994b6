"""
Diagnostics for the ctrltex lexer.

The lexer never fails: every anomaly in the input degrades to a defined token.
Anomalies are still recorded as warnings so callers (the CLI, strict mode)
can report them with source location information.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for pipeline diagnostics (warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    @property
    def is_warning(self) -> bool:
        return self.severity in ("warning", "error")


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop conversion.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        severity: str = "warning"
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity=severity,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Helpers shared by the diagnostics of all pipeline stages."""

    @staticmethod
    def suggest_similar(name: str, candidates, max_distance: int = 2, limit: int = 3) -> List[str]:
        """Suggest names from `candidates` within `max_distance` edits of `name`."""
        scored = []
        for candidate in candidates:
            distance = ErrorRecovery._edit_distance(name, candidate)
            if distance <= max_distance:
                scored.append((distance, candidate))

        return [candidate for _, candidate in sorted(scored)[:limit]]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


ERROR_CODES = {
    "L001": "Trailing backslash",
    "L002": "Comment runs to end of input",
}


def create_trailing_backslash_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a backslash with nothing after it."""
    return LexerWarning(
        message="Backslash at end of input",
        location=location,
        code="L001",
        help_text="A backslash must be followed by a command name or a single character.",
        suggestions=["Remove the trailing backslash", "Use \\backslash for a literal backslash"]
    )


def create_comment_to_eof_warning(location: SourceLocation) -> LexerWarning:
    """Create an informational note for a comment that swallows the rest of the input."""
    return LexerWarning(
        message="Comment extends to the end of input",
        location=location,
        code="L002",
        help_text="Everything after '%' on this line is ignored. Use \\% for a literal percent sign.",
        severity="info"
    )
