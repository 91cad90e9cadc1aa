"""
greek-betacode: Betacode to polytonic Greek Unicode.

Validates ASCII Betacode against the accepted dialect and converts it to
NFKC-normalized Greek Unicode, with the inverse transform for well-formed
input.

Basic usage:
    >>> from greek_betacode import convert, revert
    >>> convert("mh=nin a)/eide qea\\\\ *phlhi+a/dew *a)xilh=os")
    'μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος'
    >>> revert("μῆνιν")
    'mh=nin'

Validate, then convert under the standard policy:
    >>> from greek_betacode import transliterate
    >>> result = transliterate("a/)ndra")
    >>> result.converted
    'ἄνδρα'
    >>> result.warnings
    [InvalidDiacriticOrder(['/)'])]
"""

import logging

from greek_betacode._errors import (
    InvalidChars,
    InvalidDiacriticOrder,
    MixedCaseNotation,
    NotASCII,
    ValidationError,
)
from greek_betacode.converter import (
    BetacodeConverter,
    ConversionResult,
    Stage,
    convert,
    revert,
)
from greek_betacode.converter._rules import _get_default
from greek_betacode.validator import (
    check_ascii,
    check_charset,
    check_diacritic_order,
    check_mixed_case,
    diagnose,
    is_valid,
    validate,
)

__version__ = "0.1.0"
__all__ = [
    "transliterate",
    "convert",
    "revert",
    "validate",
    "diagnose",
    "is_valid",
    "check_ascii",
    "check_diacritic_order",
    "check_charset",
    "check_mixed_case",
    "BetacodeConverter",
    "ConversionResult",
    "Stage",
    "ValidationError",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "MixedCaseNotation",
]

logger = logging.getLogger(__name__)


def transliterate(text: str, strict: bool = False) -> ConversionResult:
    """
    Validate Betacode and convert it to Greek Unicode.

    NotASCII and InvalidChars always abort. InvalidDiacriticOrder is
    logged and conversion proceeds, since the converter fixes the order.
    MixedCaseNotation is logged by the converter's case step. In strict
    mode every issue aborts.

    Args:
        text: Raw Betacode input
        strict: Treat recoverable issues as fatal

    Returns:
        ConversionResult with every diagnostic attached as issues

    Raises:
        ValidationError: the first issue the policy makes fatal
    """
    issues = diagnose(text)
    fatal = [issue for issue in issues if issue.fatal or strict]
    if fatal:
        raise fatal[0]

    for issue in issues:
        if isinstance(issue, InvalidDiacriticOrder):
            logger.warning("%s; reordering", issue)

    result = _get_default().convert_detailed(text, strict=strict)
    result.issues = issues
    return result


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "BetacodeConverterComponent":
        try:
            from greek_betacode.spacy import BetacodeConverterComponent
            return BetacodeConverterComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-betacode[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
