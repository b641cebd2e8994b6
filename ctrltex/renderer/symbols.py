"""
Symbol table for zero-argument commands.
"""

from typing import Dict, FrozenSet

GREEK_LETTERS: Dict[str, str] = {
    "alpha": "α", "beta": "β", "gamma": "γ", "delta": "δ", "epsilon": "ε",
    "zeta": "ζ", "eta": "η", "theta": "θ", "iota": "ι", "kappa": "κ",
    "lambda": "λ", "mu": "μ", "nu": "ν", "xi": "ξ", "omicron": "ο",
    "pi": "π", "rho": "ρ", "sigma": "σ", "tau": "τ", "upsilon": "υ",
    "phi": "φ", "chi": "χ", "psi": "ψ", "omega": "ω",
    "Gamma": "Γ", "Delta": "Δ", "Theta": "Θ", "Lambda": "Λ", "Xi": "Ξ",
    "Pi": "Π", "Sigma": "Σ", "Upsilon": "Υ", "Phi": "Φ", "Psi": "Ψ",
    "Omega": "Ω",
}

RELATIONS: Dict[str, str] = {
    "le": "≤", "leq": "≤", "ge": "≥", "geq": "≥", "ne": "≠", "neq": "≠",
    "approx": "≈", "equiv": "≡", "sim": "∼", "cong": "≅", "propto": "∝",
    "mid": "|", "parallel": "∥", "perp": "⊥",
}

OPERATORS: Dict[str, str] = {
    "pm": "±", "times": "×", "div": "÷", "cdot": "⋅",
    "circ": "∘", "bullet": "∙", "star": "⋆", "ast": "∗",
    "dagger": "†", "ddagger": "‡",
}

SET_THEORY: Dict[str, str] = {
    "in": "∈", "notin": "∉", "subset": "⊂", "subseteq": "⊆",
    "cup": "∪", "cap": "∩", "setminus": "∖", "emptyset": "∅",
}

LOGIC: Dict[str, str] = {
    "land": "∧", "wedge": "∧", "lor": "∨", "vee": "∨",
    "neg": "¬", "lnot": "¬", "implies": "⟹", "iff": "⟺",
    "forall": "∀", "exists": "∃",
}

ARROWS: Dict[str, str] = {
    "rightarrow": "→", "to": "→", "leftarrow": "←",
    "Rightarrow": "⇒", "Leftarrow": "⇐",
    "leftrightarrow": "↔", "Leftrightarrow": "⇔", "mapsto": "↦",
}

CALCULUS: Dict[str, str] = {
    "partial": "∂", "nabla": "∇", "sum": "∑", "prod": "∏", "int": "∫",
    "infty": "∞",
}

MISCELLANEOUS: Dict[str, str] = {
    "ldots": "…", "dots": "…", "cdots": "⋯", "vdots": "⋮", "ddots": "⋱",
    "prime": "′", "degree": "°", "angle": "∠", "triangle": "△",
    "ell": "ℓ", "Re": "ℜ", "Im": "ℑ", "aleph": "ℵ", "hbar": "ℏ",
    "backslash": "\\",
}

# Control symbols: \{ \} \% \| and the spacing commands
ESCAPES: Dict[str, str] = {
    "{": "{", "}": "}", "%": "%", "|": "‖",
    ",": " ", ";": " ", ":": " ", " ": " ", "!": "",
    "quad": "  ", "qquad": "    ",
}

# Operator names written upright; rendered as the name itself
FUNCTION_NAMES: FrozenSet[str] = frozenset({
    "sin", "cos", "tan", "csc", "sec", "cot", "sinh", "cosh", "tanh",
    "arcsin", "arccos", "arctan", "log", "ln", "lim", "min", "max",
    "sup", "inf", "det", "exp", "dim", "ker", "deg", "arg",
})

SYMBOLS: Dict[str, str] = {
    **GREEK_LETTERS,
    **RELATIONS,
    **OPERATORS,
    **SET_THEORY,
    **LOGIC,
    **ARROWS,
    **CALCULUS,
    **MISCELLANEOUS,
    **ESCAPES,
    **{name: name for name in FUNCTION_NAMES},
}
