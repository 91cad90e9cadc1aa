"""
Validation diagnostics for Betacode input.

Every diagnostic names the specific offending characters or substrings so
that corpus editors can find and fix them.
"""

from __future__ import annotations

__all__ = [
    "ValidationError",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "MixedCaseNotation",
]


class ValidationError(ValueError):
    """
    Base class for Betacode validation failures.

    Attributes:
        offending: The characters or substrings that triggered the error.
        fatal: Whether the input cannot be meaningfully converted.
    """

    fatal = True
    label = "Invalid Betacode"

    def __init__(self, offending) -> None:
        self.offending = list(offending)
        super().__init__(f"{self.label}: {self.offending!r}")

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.offending == other.offending

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.offending)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.offending!r})"


class NotASCII(ValidationError):
    """Input contains characters outside 7-bit ASCII."""

    label = "Non-ASCII characters"


class InvalidChars(ValidationError):
    """Input contains ASCII characters outside the Betacode alphabet."""

    label = "Invalid characters"


class InvalidDiacriticOrder(ValidationError):
    """Diacritics break BREATHING/DIAERESIS + ACCENT + SUB-IOTA order.

    Recoverable: the converter reorders them.
    """

    fatal = False
    label = "Invalid diacritic order"


class MixedCaseNotation(ValidationError):
    """Input mixes "*" capitals with bare uppercase letters."""

    fatal = False
    label = "Mixed case notation, bare capitals"
