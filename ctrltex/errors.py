"""
Exceptions raised by the strict conversion API, and the table of diagnostic codes.

Plain `ctrltex.convert` never raises. Strict mode turns the first warning of a
conversion into a ConversionError so scripts can refuse degraded output.
"""

from typing import Dict, List, Optional

from .lexer.errors import Diagnostic, ERROR_CODES as LEXER_ERROR_CODES
from .parser.errors import ERROR_CODES as PARSER_ERROR_CODES
from .renderer.errors import ERROR_CODES as RENDERER_ERROR_CODES


class ConversionError(Exception):
    """
    Raised in strict mode when a conversion produced warnings.

    Contains the first offending diagnostic and the full list.
    """

    def __init__(self, diagnostic: Diagnostic, diagnostics: Optional[List[Diagnostic]] = None):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.diagnostics = diagnostics if diagnostics is not None else [diagnostic]

    def __str__(self) -> str:
        return str(self.diagnostic)


# Every diagnostic code the pipeline can emit, with its short title
ERROR_CODES: Dict[str, str] = {
    **LEXER_ERROR_CODES,
    **PARSER_ERROR_CODES,
    **RENDERER_ERROR_CODES,
}


def summarize_diagnostics(diagnostics: List[Diagnostic]) -> str:
    """
    One line per diagnostic code: count, code and title, in order of first use.

    >>> summarize_diagnostics([])
    ''
    """
    counts: Dict[str, int] = {}
    for diagnostic in diagnostics:
        code = diagnostic.code or "?"
        counts[code] = counts.get(code, 0) + 1

    return "\n".join(
        f"{count:>4} x {code}  {ERROR_CODES.get(code, 'Unclassified')}"
        for code, count in counts.items()
    )
