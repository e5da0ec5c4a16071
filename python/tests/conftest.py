"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ipadict.issues import IssueCollector
from ipadict.schema import Metadata, WordPronunciation


@pytest.fixture
def english_metadata():
    """English-like metadata with a plain a-z alphabet."""
    return Metadata(
        language="en",
        description="English",
        graphemes=list("etaoinshrdlcumwfgypbvkjxqz"),
        phonemes=list("əɪntsrɹldkiæmɛpzbʌɑɔʊufvɡhwŋʃðθjː"),
    )


@pytest.fixture
def german_metadata():
    """German-like metadata including umlauts and ß."""
    return Metadata(
        language="de",
        description="German",
        graphemes=list("enirstahdulcgmobwfkzpvüäößjyxq"),
        phonemes=list("əntʁaɪsɛlːeimdɐkfɡbʊpʃuoçvzŋxhɔjʏøœyʔʒ") + ["̯"],
        phoneme_replacements=[("g", "ɡ"), ("r", "ʁ")],
    )


@pytest.fixture
def issues():
    """Empty issue collector."""
    return IssueCollector()


@pytest.fixture
def make_pair():
    """Factory for raw pairs."""

    def _make(word: str, pronunciation: str, language: str = "en", edition: str = "test"):
        return WordPronunciation(
            source_edition=edition,
            language=language,
            word=word,
            pronunciation=pronunciation,
        )

    return _make


@pytest.fixture
def sample_phoible_content():
    """Sample PHOIBLE CSV content."""
    return (
        "InventoryID,Glottocode,ISO6393,LanguageName,SpecificDialect,GlyphID,"
        "Phoneme,Allophones,Marginal,SegmentClass,Source\n"
        "160,stan1295,deu,German,NA,0061,a,a,FALSE,vowel,spa\n"
        "160,stan1295,deu,German,NA,0062,b,b,FALSE,consonant,spa\n"
        "2395,stan1295,deu,Standard German,NA,0061,a,a,FALSE,vowel,upsid\n"
        "2395,stan1295,deu,Standard German,NA,0281,ʁ,ʁ,FALSE,consonant,upsid\n"
        "161,stan1293,eng,English,NA,0074,t,t,FALSE,consonant,spa\n"
        "999,xxxx1234,,Unknown,NA,0074,t,t,FALSE,consonant,spa\n"
    )
