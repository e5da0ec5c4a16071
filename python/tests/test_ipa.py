"""Tests for the IPA symbol tables."""

from ipadict.phonetics.ipa import (
    IPA_SYMBOLS,
    NON_ESSENTIAL_IPA_SYMBOLS,
    is_ipa_symbol,
    strip_non_essential,
)


class TestIpaSymbols:
    """Tests for the symbol sets."""

    def test_disjoint(self):
        """Test no symbol is both essential and non-essential."""
        assert not IPA_SYMBOLS & NON_ESSENTIAL_IPA_SYMBOLS

    def test_single_code_points(self):
        """Test every entry is one code point."""
        assert all(len(s) == 1 for s in IPA_SYMBOLS)
        assert all(len(s) == 1 for s in NON_ESSENTIAL_IPA_SYMBOLS)

    def test_common_symbols(self):
        """Test common IPA letters and marks are recognized."""
        for symbol in ["a", "ʃ", "ŋ", "ə", "ɡ", "g", "ː", "ʰ", "̃", "̯"]:
            assert is_ipa_symbol(symbol), symbol

    def test_non_symbols(self):
        """Test delimiters, stress and punctuation are not IPA symbols."""
        for symbol in ["/", "[", "(", "ˈ", "ˌ", ".", "2", "!", " "]:
            assert not is_ipa_symbol(symbol), symbol


class TestStripNonEssential:
    """Tests for strip_non_essential function."""

    def test_stress_and_syllables(self):
        """Test stress marks and syllable breaks are removed."""
        assert strip_non_essential("ˈɹoʊ.ˌbɑt") == "ɹoʊbɑt"

    def test_tie_bar(self):
        """Test tie bars are removed."""
        assert strip_non_essential("t͡ʃ") == "tʃ"

    def test_keeps_other_symbols(self):
        """Test everything else is kept, including non-IPA characters."""
        assert strip_non_essential("rʌn(s)") == "rʌn(s)"
