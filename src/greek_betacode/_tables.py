"""
Shared Betacode vocabulary.

Holds everything the validator and the converter both need to agree on:

- the Betacode -> Unicode token table and its inverse
- the accepted input alphabet
- diacritic ranks and the patterns built on them
- the word-boundary class used by the sigma rules
- detection of mixed case notation

All tables are built once at import and exposed read-only.
"""

from __future__ import annotations

import re
from types import MappingProxyType

__all__ = [
    "BETA_TO_UNICODE",
    "UNICODE_TO_BETA",
    "LUNATE_TO_BETA",
    "TOKEN_PATTERN",
    "ALPHABET",
    "DIACRITICS",
    "DIACRITIC_RANK",
    "DIACRITIC_CLUSTER",
    "UNORDERED_DIACRITICS",
    "STARRED_LETTER",
    "BOUNDARY_CLASS",
    "FINAL_SIGMA",
    "SIGMA_MARKERS",
    "SIGMA_MARKER",
    "is_boundary",
    "bare_capitals",
    "dedupe",
]

# =============================================================================
# Token Table
# =============================================================================

# Substitution order comes from TOKEN_PATTERN (longest token first), not from
# the order of these tuples.
_DIACRITIC_TOKENS = (
    (")", "\u0313"),  # combining comma above (smooth breathing)
    ("(", "\u0314"),  # combining reversed comma above (rough breathing)
    ("/", "\u0301"),  # combining acute accent
    ("=", "\u0342"),  # combining Greek perispomeni (circumflex)
    ("\\", "\u0300"),  # combining grave accent
    ("+", "\u0308"),  # combining diaeresis
    ("|", "\u0345"),  # combining Greek ypogegrammeni (iota subscript)
)

# Betacode letter -> lowercase Greek letter. Note c=xi, q=theta, v=digamma,
# y=psi; there is no j.
_LETTERS = {
    "a": "α",
    "b": "β",
    "c": "ξ",
    "d": "δ",
    "e": "ε",
    "f": "φ",
    "g": "γ",
    "h": "η",
    "i": "ι",
    "k": "κ",
    "l": "λ",
    "m": "μ",
    "n": "ν",
    "o": "ο",
    "p": "π",
    "q": "θ",
    "r": "ρ",
    "s": "σ",
    "t": "τ",
    "u": "υ",
    "v": "ϝ",
    "w": "ω",
    "x": "χ",
    "y": "ψ",
    "z": "ζ",
}

_PUNCTUATION_TOKENS = (
    (";", "\u037e"),  # Greek question mark
    (":", "\u00b7"),  # middle dot (ano teleia)
)

_ARCHAIC_TOKENS = (
    ("*#1", "Ϟ"),  # Koppa
    ("#1", "ϟ"),
    ("*#2", "Ϛ"),  # Stigma
    ("#2", "ϛ"),
    ("*#3", "Ϙ"),  # Archaic Koppa
    ("#3", "ϙ"),
    ("*#5", "Ϡ"),  # Sampi
    ("#5", "ϡ"),
)


def _letter_tokens() -> tuple[tuple[str, str], ...]:
    pairs = []
    for beta, greek in _LETTERS.items():
        pairs.append((beta.upper(), greek.upper()))
        pairs.append((beta, greek))
    return tuple(pairs)


_TOKENS = _DIACRITIC_TOKENS + _letter_tokens() + _PUNCTUATION_TOKENS + _ARCHAIC_TOKENS

BETA_TO_UNICODE = MappingProxyType(dict(_TOKENS))

# Reversible subset: capitals are reverted as "*" + lowercase token, so only
# lowercase letters enter the inverse table.
UNICODE_TO_BETA = MappingProxyType(
    {
        greek: beta
        for beta, greek in _TOKENS
        if not (beta.isalpha() and beta.isupper()) and not beta.startswith("*")
    }
)

# Lunate sigmas have no table token; they come from the "3" marker.
LUNATE_TO_BETA = MappingProxyType({"ϲ": "s3"})

TOKEN_PATTERN = re.compile(
    "|".join(re.escape(beta) for beta in sorted(BETA_TO_UNICODE, key=len, reverse=True))
)

# =============================================================================
# Alphabet
# =============================================================================

ALPHABET = frozenset(
    list(_LETTERS) + [c.upper() for c in _LETTERS] + list("*#|)(/\\=+.,;:' \n1235")
)

# =============================================================================
# Diacritics
# =============================================================================

DIACRITICS = frozenset(beta for beta, _ in _DIACRITIC_TOKENS)

# BREATHING/DIAERESIS -> ACCENT -> SUB-IOTA
DIACRITIC_RANK = MappingProxyType(
    {")": 0, "(": 0, "+": 0, "/": 1, "\\": 1, "=": 1, "|": 2}
)

_MARK_CLASS = r"[()/\\=+|]"

DIACRITIC_CLUSTER = re.compile(_MARK_CLASS + "{2,}")

# Out-of-order sequences as they appear in raw input. Consonants exclude r,
# which takes a breathing.
UNORDERED_DIACRITICS = re.compile(
    r"\|[()/\\=+]+"
    r"|[/\\=][()+]"
    r"|[bcdfgklmnpqstvxyz ]" + _MARK_CLASS + "+"
    r"|^" + _MARK_CLASS + "+",
    re.IGNORECASE | re.MULTILINE,
)

# "*" followed by optional (TLG-style) diacritics and the letter it capitalizes
STARRED_LETTER = re.compile(r"\*(" + _MARK_CLASS + r"*)([A-Za-z])")

# =============================================================================
# Sigma
# =============================================================================

BOUNDARY_CLASS = r"[\s.,;:'\u00b7\u037e\u2019\u2010\u2014]"

FINAL_SIGMA = re.compile("σ(?=" + BOUNDARY_CLASS + r"|\Z)")

SIGMA_MARKERS = MappingProxyType(
    {
        "σ1": "ς",  # forced final
        "σ2": "σ",  # forced medial
        "σ3": "ϲ",  # lunate
        "Σ1": "Σ",
        "Σ2": "Σ",
        "Σ3": "Ϲ",  # capital lunate
    }
)

SIGMA_MARKER = re.compile("[σΣ][123]")

_BOUNDARY = re.compile(BOUNDARY_CLASS)


def is_boundary(char: str) -> bool:
    """True for a word-boundary character or the empty string (end of text)."""
    return not char or _BOUNDARY.fullmatch(char) is not None


# =============================================================================
# Helpers
# =============================================================================


def dedupe(items) -> list:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(items))


def bare_capitals(text: str) -> list[str]:
    """
    Return the bare capitals of a mixed-notation string.

    A string mixes notations when it uses "*" markers and its bare letters
    (those not introduced by "*") come in both cases. For such strings the
    bare uppercase letters are returned, deduplicated in first-seen order;
    for any other string the list is empty.

    Example:
        >>> bare_capitals("*phlei/dhs Axilleus")
        ['A']
        >>> bare_capitals("*A)XILLEU/S")
        []
    """
    if "*" not in text:
        return []
    bare = [c for c in STARRED_LETTER.sub("", text) if c.isascii() and c.isalpha()]
    uppers = [c for c in bare if c.isupper()]
    if uppers and len(uppers) < len(bare):
        return dedupe(uppers)
    return []
