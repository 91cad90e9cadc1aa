"""
Validation submodule.

Re-exports the individual checks, the combined entry points and the
diagnostic classes.

Basic usage:
    >>> from greek_betacode.validator import is_valid
    >>> is_valid("a)/")
    True
    >>> is_valid("9")
    False
"""

from greek_betacode._errors import (
    InvalidChars,
    InvalidDiacriticOrder,
    MixedCaseNotation,
    NotASCII,
    ValidationError,
)
from greek_betacode.validator._rules import (
    check_ascii,
    check_charset,
    check_diacritic_order,
    check_mixed_case,
    diagnose,
    is_valid,
    validate,
)

__all__ = [
    "ValidationError",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "MixedCaseNotation",
    "check_ascii",
    "check_diacritic_order",
    "check_charset",
    "check_mixed_case",
    "validate",
    "diagnose",
    "is_valid",
]
