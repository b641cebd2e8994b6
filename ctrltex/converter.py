"""
ctrltex conversion pipeline: tokenize -> parse -> render.

`convert` is the total, pure entry point used by integrations. `Converter`
exposes the same pipeline together with the diagnostics each stage
collected, and an optional strict mode.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .lexer import Lexer
from .lexer.errors import Diagnostic
from .parser import Parser
from .renderer import Renderer
from .errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class ConverterConfig:
    """Configuration for a Converter"""
    filename: str = "<input>"  # Name shown in diagnostic locations
    strict: bool = False  # Raise ConversionError on the first warning
    collect_diagnostics: bool = True


@dataclass
class ConversionResult:
    """Output text plus everything the pipeline had to say about the input."""
    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def has_warnings(self) -> bool:
        return any(diagnostic.is_warning for diagnostic in self.diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.is_warning]


class Converter:
    """
    Runs the conversion pipeline.

    Each call builds its own lexer, parser and token stream; the converter
    itself only holds configuration and can be shared.
    """

    def __init__(self, config: ConverterConfig = None):
        self.config = config or ConverterConfig()

    def convert(self, text: str) -> ConversionResult:
        """
        Convert markup text to Unicode.

        Args:
            text: Math markup

        Returns:
            ConversionResult with the Unicode text and diagnostics

        Raises:
            ConversionError: In strict mode, if any stage recorded a warning
        """
        lexer = Lexer(text, self.config.filename)
        parser = Parser(lexer)
        expressions = parser.parse()

        wants_diagnostics = self.config.collect_diagnostics or self.config.strict
        renderer = Renderer(collect_diagnostics=wants_diagnostics)
        output = renderer.render(expressions)

        diagnostics: List[Diagnostic] = []
        if wants_diagnostics:
            for stage in (lexer.warnings, parser.warnings, renderer.warnings):
                diagnostics.extend(warning.diagnostic for warning in stage)

        logger.debug("Converted %d characters into %d (%d diagnostics)",
                     len(text), len(output), len(diagnostics))

        result = ConversionResult(output, diagnostics)

        if self.config.strict and result.has_warnings():
            warnings = result.warnings
            raise ConversionError(warnings[0], warnings)

        return result


def convert(text: str) -> str:
    """
    Convert math markup to a plain Unicode string.

    Never raises for any string input. No renderer diagnostics are built.

    >>> convert(r"\\alpha^2 + \\beta_i")
    'α²+βᵢ'
    """
    lexer = Lexer(text)
    return Renderer(collect_diagnostics=False).render(Parser(lexer).parse())


def convert_string(text: str, filename: str = "<string>", strict: bool = False) -> str:
    """
    Convenience function to convert a string, optionally in strict mode.

    Raises:
        ConversionError: If strict and the conversion produced warnings
    """
    config = ConverterConfig(filename=filename, strict=strict)
    return Converter(config).convert(text).text


def convert_file(filepath: str, strict: bool = False) -> str:
    """
    Convenience function to convert the contents of a UTF-8 file.

    Raises:
        ConversionError: If strict and the conversion produced warnings
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return convert_string(source, filepath, strict)
