"""
Conversion submodule.

Re-exports the converter, its result types, and the individual pipeline
stages.
"""

from greek_betacode.converter._rules import (
    BetacodeConverter,
    ConversionResult,
    Stage,
    compose,
    convert,
    final_sigma,
    find_upper,
    reorder_diacritics,
    resolve_case,
    revert,
    special_sigma,
    substitute_tokens,
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
