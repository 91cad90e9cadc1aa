"""Tests for the inverse (Unicode -> Betacode) pipeline and round-trips."""

import unicodedata

import pytest

from greek_betacode.converter import convert, revert


# =============================================================================
# revert
# =============================================================================


class TestRevert:
    def test_iliad(self, iliad_beta, iliad_greek):
        assert revert(iliad_greek) == iliad_beta

    def test_decomposed_input(self, iliad_beta, iliad_greek):
        assert revert(unicodedata.normalize("NFD", iliad_greek)) == iliad_beta

    def test_diacritics_in_canonical_order(self):
        assert revert("ᾄ") == "a)/|"
        assert revert("ᾆ") == "a)=|"

    def test_capitals_use_star_notation(self):
        assert revert("ΑΒΞ") == "*a*b*c"

    def test_capital_with_breathing(self):
        assert revert("Ἀ") == "*a)"

    def test_final_sigma(self):
        assert revert("λόγος καί") == "lo/gos kai/"

    def test_sigma_markers(self):
        assert revert("\u03f2 \u03f9 \u03c2\u03b1") == "s3 *s3 s1a"

    def test_forced_medial_sigma(self):
        assert revert("λοσ") == "los2"

    def test_medial_sigma_before_digit(self):
        assert revert("σ1") == "s21"

    def test_capital_sigma_before_digit(self):
        assert revert("Σ3") == "*s23"

    def test_archaic_letters(self):
        assert revert("\u03df \u03de \u03db \u03da \u03d9 \u03d8 \u03e1 \u03e0") == "#1 *#1 #2 *#2 #3 *#3 #5 *#5"

    def test_punctuation(self):
        assert revert("τί;") == "ti/;"
        assert revert("\u03b1\u00b7 \u03b2") == "a: b"

    def test_digamma(self):
        assert revert("\u03dd\u03dc") == "v*v"

    def test_non_greek_passes_through(self):
        assert revert("abc 123") == "abc 123"

    def test_empty(self):
        assert revert("") == ""


class TestConverterInstance:
    def test_revert_method(self, converter):
        assert converter.revert("ᾄ") == "a)/|"

    def test_convert_method(self, converter, iliad_beta, iliad_greek):
        assert converter.convert(iliad_beta) == iliad_greek


# =============================================================================
# Round-trip
# =============================================================================


@pytest.mark.parametrize(
    "beta",
    [
        "mh=nin a)/eide qea\\ *phlhi+a/dew *a)xilh=os",
        "mh=nin a/)eide qea\\ *phlhi+a/dew *a)xilh=os3",
        "s3 *s3 s1a s2 ss s1s",
        "*s1 *s2 *s3 s21",
        "*a)/| a)=| *)a",
        "ABCDEFGHIKLMNOPQRSTUVWXYZ",
        "aBCDEFGHIKLMNOPQRSTUVWXYZ",
        "*A)XILLEU/S",
        "#1 *#1 #2 *#2 #3 *#3 #5 *#5",
        "ti/s; a: b, g. d'",
        "lo/gos\nkai\\ qeo/s",
        "h\\( a/)ndra",
        "",
    ],
)
def test_round_trip(beta):
    once = convert(beta)
    assert convert(revert(once)) == once
