"""Tests for the spaCy pipeline component."""

import pytest

spacy = pytest.importorskip("spacy")

from greek_betacode.spacy import BetacodeConverterComponent, get_converter_pipe  # noqa: E402
from greek_betacode.validator import InvalidChars, InvalidDiacriticOrder  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    for ext in ["transliterated", "betacode_issues"]:
        if Doc.has_extension(ext):
            Doc.remove_extension(ext)

    if Token.has_extension("transliterated"):
        Token.remove_extension("transliterated")


@pytest.fixture
def nlp():
    nlp = spacy.blank("xx")
    nlp.add_pipe("betacode_converter")
    return nlp


class TestBetacodeConverterComponent:
    """Test the betacode_converter component."""

    def test_factory_registered(self, nlp):
        assert "betacode_converter" in nlp.pipe_names

    def test_doc_conversion(self, nlp, iliad_beta, iliad_greek):
        doc = nlp(iliad_beta)
        assert doc._.transliterated == iliad_greek
        assert doc._.betacode_issues == []

    def test_token_conversion(self, nlp):
        doc = nlp("logos kai qeos")
        assert [t._.transliterated for t in doc] == ["λογος", "και", "θεος"]

    def test_fatal_issue_blocks_doc(self, nlp):
        doc = nlp("logos 9")
        assert doc._.transliterated is None
        assert doc._.betacode_issues == [InvalidChars(["9"])]

    def test_recoverable_issue_converts(self, nlp):
        doc = nlp("a/)ndra")
        assert doc._.transliterated == "ἄνδρα"
        assert doc._.betacode_issues == [InvalidDiacriticOrder(["/)"])]

    def test_strict_blocks_recoverable_issue(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("betacode_converter", config={"strict": True})
        doc = nlp("a/)ndra")
        assert doc._.transliterated is None

    def test_revert_direction(self, iliad_beta, iliad_greek):
        nlp = spacy.blank("xx")
        nlp.add_pipe("betacode_converter", config={"direction": "revert"})
        doc = nlp(iliad_greek)
        assert doc._.transliterated == iliad_beta
        assert doc._.betacode_issues == []
        assert doc[0]._.transliterated == "mh=nin"

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            BetacodeConverterComponent(spacy.blank("xx"), "betacode_converter", direction="sideways")

    def test_get_converter_pipe(self, nlp):
        assert isinstance(get_converter_pipe(nlp), BetacodeConverterComponent)
        assert get_converter_pipe(spacy.blank("xx")) is None

    def test_serialization_roundtrip(self, nlp):
        pipe = nlp.get_pipe("betacode_converter")
        data = pipe.to_bytes()
        assert pipe.from_bytes(data) is pipe
