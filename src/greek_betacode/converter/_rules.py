"""
Betacode <-> Greek Unicode conversion pipeline.

The forward pipeline is a fixed sequence of pure text transforms:

1. resolve_case: settle the case convention ("*" markers or bare case)
2. reorder_diacritics: BREATHING/DIAERESIS + ACCENT + SUB-IOTA
3. substitute_tokens: Betacode tokens -> Unicode, longest token first
4. final_sigma: medial sigma before a word boundary -> final sigma
5. compose: NFKC normalization
6. special_sigma: sigma marker suffixes (s1, s2, s3)

Marker sigmas are resolved after composition because NFKC folds the lunate
forms back to plain sigma.

Example:
    >>> from greek_betacode.converter import convert, revert
    >>> convert("mh=nin a)/eide qea\\\\ *phlhi+a/dew *a)xilh=os")
    'μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος'
    >>> revert("Ἀχιλῆος")
    '*a)xilh=os'
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

from greek_betacode._errors import MixedCaseNotation, ValidationError
from greek_betacode._tables import (
    BETA_TO_UNICODE,
    DIACRITIC_CLUSTER,
    DIACRITIC_RANK,
    FINAL_SIGMA,
    LUNATE_TO_BETA,
    SIGMA_MARKER,
    SIGMA_MARKERS,
    STARRED_LETTER,
    TOKEN_PATTERN,
    UNICODE_TO_BETA,
    bare_capitals,
    is_boundary,
)

__all__ = [
    "BetacodeConverter",
    "ConversionResult",
    "Stage",
    "resolve_case",
    "find_upper",
    "reorder_diacritics",
    "substitute_tokens",
    "final_sigma",
    "compose",
    "special_sigma",
    "convert",
    "revert",
]

logger = logging.getLogger(__name__)

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Stage:
    """Output of one pipeline stage."""

    name: str
    output: str


@dataclass
class ConversionResult:
    """Detailed result from conversion."""

    original: str
    converted: str
    stages: list[Stage] = field(default_factory=list)
    issues: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Issues that did not prevent conversion."""
        return [issue for issue in self.issues if not issue.fatal]


# =============================================================================
# Pipeline Stages
# =============================================================================


def find_upper(text: str) -> str:
    """
    Turn "*"-marked letters into uppercase letters and drop the markers.

    TLG-style diacritics between the marker and the letter are moved after
    the letter. A "*" not followed by a letter (as in "*#3") is kept.

    Example:
        >>> find_upper("*a")
        'A'
        >>> find_upper("*)a")
        'A)'
        >>> find_upper("*#3")
        '*#3'
    """
    return STARRED_LETTER.sub(lambda m: m.group(2).upper() + m.group(1), text)


def resolve_case(text: str, strict: bool = False) -> str:
    """
    Settle the case convention of the input.

    - With "*" markers: fold everything to lowercase, then capitalize the
      marked letters.
    - Without markers and without lowercase letters: fold to lowercase
      (bare ALL-CAPS carries no capitalization).
    - Otherwise: keep the case as written.

    Mixed notation ("*" markers plus bare capitals among lowercase text) is
    logged and folded like any marked input, or rejected when strict.

    Raises:
        MixedCaseNotation: only when strict is True
    """
    if "*" in text:
        capitals = bare_capitals(text)
        if capitals:
            error = MixedCaseNotation(capitals)
            if strict:
                raise error
            logger.warning("%s; folding them to lowercase", error)
        return find_upper(text.lower())
    if not any("a" <= c <= "z" for c in text):
        return text.lower()
    return text


def reorder_diacritics(text: str) -> str:
    """
    Put every diacritic cluster in BREATHING/DIAERESIS + ACCENT + SUB-IOTA order.

    Example:
        >>> reorder_diacritics("A|/)")
        'A)/|'
    """
    return DIACRITIC_CLUSTER.sub(
        lambda m: "".join(sorted(m.group(), key=DIACRITIC_RANK.__getitem__)), text
    )


def substitute_tokens(text: str) -> str:
    """Replace Betacode tokens with Unicode; unknown characters pass through."""
    return TOKEN_PATTERN.sub(lambda m: BETA_TO_UNICODE[m.group()], text)


def final_sigma(text: str) -> str:
    """Rewrite medial sigma before a word boundary or at the end as final sigma."""
    return FINAL_SIGMA.sub("ς", text)


def compose(text: str) -> str:
    """Normalize to NFKC."""
    return unicodedata.normalize("NFKC", text)


def special_sigma(text: str) -> str:
    """Resolve forced-final, forced-medial and lunate sigma markers."""
    return SIGMA_MARKER.sub(lambda m: SIGMA_MARKERS[m.group()], text)


# =============================================================================
# Inverse Pipeline
# =============================================================================


def _revert_char(char: str, next_char: str) -> str:
    if char == "ς":
        return "s" if is_boundary(next_char) else "s1"
    if char == "σ":
        if is_boundary(next_char) or (next_char and next_char in "123"):
            return "s2"
        return "s"
    if char == "Σ" and next_char and next_char in "123":
        return "*s2"
    if char in UNICODE_TO_BETA:
        return UNICODE_TO_BETA[char]
    if char in LUNATE_TO_BETA:
        return LUNATE_TO_BETA[char]
    lower = char.lower()
    if lower != char:
        beta = UNICODE_TO_BETA.get(lower) or LUNATE_TO_BETA.get(lower)
        if beta is not None:
            return "*" + beta
    return char


def _revert(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(
        _revert_char(char, decomposed[i + 1 : i + 2])
        for i, char in enumerate(decomposed)
    )


# =============================================================================
# Main Converter Class
# =============================================================================


class BetacodeConverter:
    """
    Betacode to Greek Unicode converter.

    Holds no mutable state; one instance can be shared freely.

    Example:
        >>> converter = BetacodeConverter()
        >>> converter.convert("a)/|")
        'ᾄ'
        >>> converter.revert("ᾄ")
        'a)/|'
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def _stages(self, strict: bool):
        return (
            ("case", lambda text: resolve_case(text, strict=strict)),
            ("diacritics", reorder_diacritics),
            ("tokens", substitute_tokens),
            ("final_sigma", final_sigma),
            ("compose", compose),
            ("special_sigma", special_sigma),
        )

    def convert(self, text: str, strict: Optional[bool] = None) -> str:
        """
        Convert Betacode to NFKC Greek Unicode.

        Args:
            text: Betacode input (validation is the caller's business)
            strict: Reject mixed case notation; defaults to self.strict

        Returns:
            Greek Unicode text
        """
        return self.convert_detailed(text, strict=strict).converted

    def convert_detailed(self, text: str, strict: Optional[bool] = None) -> ConversionResult:
        """
        Convert and record the output of every stage.

        Mixed case notation, when tolerated, is attached to the result
        as an issue.

        Example:
            >>> result = BetacodeConverter().convert_detailed("a/)")
            >>> [(s.name, s.output) for s in result.stages][:2]
            [('case', 'a/)'), ('diacritics', 'a)/')]
        """
        if strict is None:
            strict = self.strict

        stages = []
        output = text
        for name, stage in self._stages(strict):
            output = stage(output)
            stages.append(Stage(name=name, output=output))
        logger.debug("converted %r -> %r", text, output)

        issues = []
        capitals = bare_capitals(text)
        if capitals:
            issues.append(MixedCaseNotation(capitals))
        return ConversionResult(
            original=text, converted=output, stages=stages, issues=issues
        )

    def revert(self, text: str) -> str:
        """
        Convert Greek Unicode back to Betacode.

        Capitals come out in "*" notation with diacritics after the letter.
        Final, forced-medial and lunate sigmas get their marker suffixes
        so that converting the result reproduces the input.

        Args:
            text: Greek Unicode text (any normalization form)

        Returns:
            Betacode text
        """
        return _revert(text)


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_converter: Optional[BetacodeConverter] = None


def _get_default() -> BetacodeConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = BetacodeConverter()
    return _default_converter


def convert(text: str, strict: bool = False) -> str:
    """
    Convert Betacode to Greek Unicode.

    Convenience function that uses a shared converter instance.

    Example:
        >>> convert("s3 *s3 s1α")
        'ϲ Ϲ ςα'
    """
    return _get_default().convert(text, strict=strict)


def revert(text: str) -> str:
    """
    Convert Greek Unicode back to Betacode.

    Convenience function that uses a shared converter instance.

    Example:
        >>> revert("θεὰ")
        'qea\\\\'
    """
    return _get_default().revert(text)
