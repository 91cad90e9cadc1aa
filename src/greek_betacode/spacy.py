"""
spaCy integration for greek-betacode.

Provides a pipeline component that transliterates Betacode documents.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("betacode_converter")
    >>> doc = nlp("mh=nin a)/eide qea\\\\")
    >>> doc._.transliterated
    'μῆνιν ἄειδε θεὰ'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greek_betacode.converter._rules import BetacodeConverter
from greek_betacode.validator._rules import diagnose

__all__ = [
    "BetacodeConverterComponent",
    "create_betacode_converter",
]

_DIRECTIONS = ("forward", "revert")


# =============================================================================
# Betacode Converter Component
# =============================================================================


@Language.factory(
    "betacode_converter",
    default_config={"direction": "forward", "strict": False},
    assigns=["doc._.transliterated", "doc._.betacode_issues", "token._.transliterated"],
)
def create_betacode_converter(
    nlp: Language,
    name: str,
    direction: str = "forward",
    strict: bool = False,
) -> "BetacodeConverterComponent":
    """Create a Betacode converter pipeline component."""
    return BetacodeConverterComponent(nlp, name, direction=direction, strict=strict)


class BetacodeConverterComponent:
    """
    spaCy pipeline component for Betacode <-> Greek Unicode.

    Extensions:
        - Doc._.transliterated: Whole-text conversion, or None when the
          text has a fatal validation issue (any issue when strict).
        - Doc._.betacode_issues: Validation diagnostics for the text
          (forward direction only; empty when reverting).
        - Token._.transliterated: Per-token conversion.

    Case notation is resolved per string, so a token split off its "*"
    marker by the tokenizer loses its capital. Doc._.transliterated is the
    authoritative value.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        direction: str = "forward",
        strict: bool = False,
    ) -> None:
        self.name = name
        self.direction = direction
        self.strict = strict

        if direction not in _DIRECTIONS:
            raise ValueError(
                f"Unknown direction: {direction}. Expected one of {_DIRECTIONS}."
            )

        self._converter = BetacodeConverter(strict=strict)

        if not Doc.has_extension("transliterated"):
            Doc.set_extension("transliterated", default=None)
        if not Doc.has_extension("betacode_issues"):
            Doc.set_extension("betacode_issues", default=None)
        if not Token.has_extension("transliterated"):
            Token.set_extension("transliterated", default=None)

    def __call__(self, doc: Doc) -> Doc:
        if self.direction == "revert":
            doc._.betacode_issues = []
            doc._.transliterated = self._converter.revert(doc.text)
            for token in doc:
                token._.transliterated = self._converter.revert(token.text)
            return doc

        issues = diagnose(doc.text)
        doc._.betacode_issues = issues
        if any(issue.fatal or self.strict for issue in issues):
            doc._.transliterated = None
        else:
            doc._.transliterated = self._converter.convert(doc.text)

        for token in doc:
            token._.transliterated = self._converter.convert(token.text, strict=False)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_converter_pipe(nlp: Language) -> Optional[BetacodeConverterComponent]:
    """Get the Betacode converter component from a pipeline."""
    if "betacode_converter" in nlp.pipe_names:
        return nlp.get_pipe("betacode_converter")
    return None
