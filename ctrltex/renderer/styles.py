"""
Alphabet styles: \\mathbb, \\mathcal, \\mathfrak, \\mathbf, \\mathit, \\mathsf, \\mathtt.

Each style maps ASCII letters (and, for some styles, digits) into the
Mathematical Alphanumeric Symbols block by a constant offset per range. The
block has holes where a letter was already encoded in Letterlike Symbols
(e.g. blackboard R is U+211D); those letters are listed as exceptions and
checked first. Anything outside a style's ranges is left unchanged.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class AlphabetStyle:
    """Codepoint remapping for one alphabet style."""
    name: str
    upper: int                      # codepoint of styled 'A'
    lower: int                      # codepoint of styled 'a'
    digits: int = 0                 # codepoint of styled '0', 0 if none
    exceptions: Dict[str, str] = field(default_factory=dict)

    def ranges(self) -> Tuple[Tuple[str, str, int], ...]:
        spans = [("A", "Z", self.upper), ("a", "z", self.lower)]
        if self.digits:
            spans.append(("0", "9", self.digits))
        return tuple(spans)

    def map_char(self, char: str) -> str:
        if char in self.exceptions:
            return self.exceptions[char]
        for first, last, base in self.ranges():
            if first <= char <= last:
                return chr(base + ord(char) - ord(first))
        return char

    def apply(self, text: str) -> str:
        return "".join(self.map_char(char) for char in text)


STYLES: Dict[str, AlphabetStyle] = {
    "mathbb": AlphabetStyle(
        "mathbb", 0x1D538, 0x1D552, 0x1D7D8,
        exceptions={
            "C": "ℂ", "H": "ℍ", "N": "ℕ", "P": "ℙ",
            "Q": "ℚ", "R": "ℝ", "Z": "ℤ",
        },
    ),
    "mathcal": AlphabetStyle(
        "mathcal", 0x1D49C, 0x1D4B6,
        exceptions={
            "B": "ℬ", "E": "ℰ", "F": "ℱ", "H": "ℋ",
            "I": "ℐ", "L": "ℒ", "M": "ℳ", "R": "ℛ",
            "e": "ℯ", "g": "ℊ", "o": "ℴ",
        },
    ),
    "mathfrak": AlphabetStyle(
        "mathfrak", 0x1D504, 0x1D51E,
        exceptions={
            "C": "ℭ", "H": "ℌ", "I": "ℑ", "R": "ℜ",
            "Z": "ℨ",
        },
    ),
    "mathbf": AlphabetStyle("mathbf", 0x1D400, 0x1D41A, 0x1D7CE),
    "mathit": AlphabetStyle("mathit", 0x1D434, 0x1D44E, exceptions={"h": "ℎ"}),
    "mathsf": AlphabetStyle("mathsf", 0x1D5A0, 0x1D5BA, 0x1D7E2),
    "mathtt": AlphabetStyle("mathtt", 0x1D670, 0x1D68A, 0x1D7F6),
}


def apply_style(style: str, text: str) -> str:
    """Restyle every character of `text`; unknown styles leave it unchanged."""
    alphabet = STYLES.get(style)
    if alphabet is None:
        return text
    return alphabet.apply(text)
