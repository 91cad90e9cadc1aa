"""
Rule-based Betacode validator.

Classifies a string as acceptable Betacode or rejects it with a specific
diagnostic. Checks never modify their input. Each one is exposed on its
own and raises its own ValidationError subclass.

Example:
    >>> from greek_betacode.validator import validate, check_diacritic_order
    >>> validate("mh=nin a)/eide")
    >>> check_diacritic_order("a/)ndra")
    Traceback (most recent call last):
        ...
    greek_betacode._errors.InvalidDiacriticOrder: Invalid diacritic order: ['/)']
"""

from __future__ import annotations

import logging

from greek_betacode._errors import (
    InvalidChars,
    InvalidDiacriticOrder,
    MixedCaseNotation,
    NotASCII,
    ValidationError,
)
from greek_betacode._tables import ALPHABET, UNORDERED_DIACRITICS, bare_capitals, dedupe

__all__ = [
    "check_ascii",
    "check_diacritic_order",
    "check_charset",
    "check_mixed_case",
    "validate",
    "diagnose",
    "is_valid",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Individual Checks
# =============================================================================


def check_ascii(text: str) -> None:
    """Raise NotASCII if any character lies outside 7-bit ASCII."""
    if not text.isascii():
        raise NotASCII(dedupe(c for c in text if not c.isascii()))


def check_diacritic_order(text: str) -> None:
    """
    Raise InvalidDiacriticOrder for every out-of-order diacritic sequence.

    Flags a sub-iota followed by other marks, an accent followed by a
    breathing or diaeresis, and marks that follow a consonant, a space or
    the start of a line. Matches are collected left to right and reported
    verbatim, in order, without deduplication.
    """
    matches = [m.group() for m in UNORDERED_DIACRITICS.finditer(text)]
    if matches:
        raise InvalidDiacriticOrder(matches)


def check_charset(text: str) -> None:
    """Raise InvalidChars if any character is outside the Betacode alphabet."""
    invalid = [c for c in text if c not in ALPHABET]
    if invalid:
        raise InvalidChars(dedupe(invalid))


def check_mixed_case(text: str) -> None:
    """Raise MixedCaseNotation if "*" capitals are mixed with bare capitals."""
    capitals = bare_capitals(text)
    if capitals:
        raise MixedCaseNotation(capitals)


# Order is significant: the later checks assume ASCII input.
_VALIDATION_CHECKS = (check_ascii, check_diacritic_order, check_charset)

_ALL_CHECKS = _VALIDATION_CHECKS + (check_mixed_case,)


# =============================================================================
# Entry Points
# =============================================================================


def validate(text: str) -> None:
    """
    Validate Betacode input, stopping at the first failing check.

    Checks run in a fixed order: ASCII, diacritic order, character set.
    Mixed case notation is left to the converter's case step; use
    check_mixed_case() or diagnose() to test for it here.

    Args:
        text: Raw Betacode input

    Raises:
        NotASCII, InvalidDiacriticOrder, InvalidChars
    """
    for check in _VALIDATION_CHECKS:
        check(text)


def diagnose(text: str) -> list[ValidationError]:
    """
    Run every check, including mixed case notation, and collect failures.

    Returns:
        Failing diagnostics in check order; empty for clean input
    """
    issues = []
    for check in _ALL_CHECKS:
        try:
            check(text)
        except ValidationError as error:
            issues.append(error)
    if issues:
        logger.debug("%d issue(s) in %d chars: %s", len(issues), len(text), issues)
    return issues


def is_valid(text: str) -> bool:
    """Return True if validate() accepts the text."""
    try:
        validate(text)
    except ValidationError:
        return False
    return True
