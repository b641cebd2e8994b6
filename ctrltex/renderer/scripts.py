"""
Unicode superscript and subscript substitution.

Only a subset of characters has a raised or lowered form in Unicode. A script
is converted only when every one of its characters has one; otherwise the
caller falls back to `^{...}` / `_{...}` notation.
"""

from typing import Dict, Optional

SUPERSCRIPTS: Dict[str, str] = {
    # Digits and operators
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "+": "⁺", "-": "⁻", "=": "⁼", "(": "⁽", ")": "⁾",
    ",": "ʼ", ".": "˙", "*": "*",

    # Latin lowercase (no q)
    "a": "ᵃ", "b": "ᵇ", "c": "ᶜ", "d": "ᵈ", "e": "ᵉ", "f": "ᶠ", "g": "ᵍ",
    "h": "ʰ", "i": "ⁱ", "j": "ʲ", "k": "ᵏ", "l": "ˡ", "m": "ᵐ", "n": "ⁿ",
    "o": "ᵒ", "p": "ᵖ", "r": "ʳ", "s": "ˢ", "t": "ᵗ", "u": "ᵘ", "v": "ᵛ",
    "w": "ʷ", "x": "ˣ", "y": "ʸ", "z": "ᶻ",

    # Latin uppercase (no C, F, Q, S, X, Y, Z)
    "A": "ᴬ", "B": "ᴮ", "D": "ᴰ", "E": "ᴱ", "G": "ᴳ", "H": "ᴴ", "I": "ᴵ",
    "J": "ᴶ", "K": "ᴷ", "L": "ᴸ", "M": "ᴹ", "N": "ᴺ", "O": "ᴼ", "P": "ᴾ",
    "R": "ᴿ", "T": "ᵀ", "U": "ᵁ", "V": "ⱽ", "W": "ᵂ",

    # Greek
    "α": "ᵅ", "β": "ᵝ", "γ": "ᵞ", "δ": "ᵟ", "ε": "ᵋ", "θ": "ᶿ", "ι": "ᶥ",
    "φ": "ᵠ", "χ": "ᵡ",

    # IPA
    "ʊ": "ᵁ", "ə": "ᵊ", "ɛ": "ᵋ", "ɣ": "ˠ", "ʁ": "ʶ", "ʃ": "ᶴ", "ʒ": "ᶾ",
    "ŋ": "ᵑ",
}

SUBSCRIPTS: Dict[str, str] = {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "+": "₊", "-": "₋", "=": "₌", "(": "₍", ")": "₎",
    ",": "‚", ".": ".",

    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "j": "ⱼ", "k": "ₖ", "l": "ₗ",
    "m": "ₘ", "n": "ₙ", "o": "ₒ", "p": "ₚ", "r": "ᵣ", "s": "ₛ", "t": "ₜ",
    "u": "ᵤ", "v": "ᵥ", "x": "ₓ",

    "β": "ᵦ", "γ": "ᵧ", "ρ": "ᵨ", "φ": "ᵩ", "χ": "ᵪ",

    "ə": "ₔ",
}


def _translate(text: str, table: Dict[str, str]) -> Optional[str]:
    mapped = []
    for char in text:
        replacement = table.get(char)
        if replacement is None:
            return None
        mapped.append(replacement)
    return "".join(mapped)


def to_superscript(text: str) -> Optional[str]:
    """Raised form of `text`, or None if any character has no superscript."""
    return _translate(text, SUPERSCRIPTS)


def to_subscript(text: str) -> Optional[str]:
    """Lowered form of `text`, or None if any character has no subscript."""
    return _translate(text, SUBSCRIPTS)
