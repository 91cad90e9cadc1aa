"""Shared fixtures for greek-betacode tests."""

import unicodedata

import pytest

from greek_betacode.converter import BetacodeConverter

# Iliad 1.1
ILIAD_BETA = "mh=nin a)/eide qea\\ *phlhi+a/dew *a)xilh=os"
ILIAD_GREEK = "μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος"


@pytest.fixture
def converter() -> BetacodeConverter:
    """Return a fresh converter instance."""
    return BetacodeConverter()


@pytest.fixture
def iliad_beta() -> str:
    """Opening line of the Iliad in lowercase Betacode with "*" capitals."""
    return ILIAD_BETA


@pytest.fixture
def iliad_greek() -> str:
    """Opening line of the Iliad in composed Greek Unicode."""
    return unicodedata.normalize("NFC", ILIAD_GREEK)
