"""Tests for the schema module."""

import json

import pytest

from ipadict.schema import Dictionary, Distributions, Metadata, WordPronunciation


class TestWordPronunciation:
    """Tests for WordPronunciation dataclass."""

    def test_round_trip(self):
        """Test dict conversion keeps every field."""
        pair = WordPronunciation("dewiktionary", "de", "Haus", "/haʊ̯s/")
        assert WordPronunciation.from_dict(pair.to_dict()) == pair

    def test_frozen(self):
        """Test pairs are immutable."""
        pair = WordPronunciation("en", "en", "run", "rʌn")
        with pytest.raises(AttributeError):
            pair.word = "walk"


class TestMetadata:
    """Tests for Metadata dataclass."""

    def test_lists_become_tuples(self):
        """Test sequences are stored as tuples."""
        metadata = Metadata(
            language="de",
            description="German",
            graphemes=["a", "b"],
            phonemes=["a"],
            phoneme_replacements=[["g", "ɡ"]],
        )
        assert metadata.graphemes == ("a", "b")
        assert metadata.phoneme_replacements == (("g", "ɡ"),)

    def test_from_dict_defaults(self):
        """Test optional fields default sensibly."""
        metadata = Metadata.from_dict(
            {"language": "xx", "graphemes": ["a"], "phonemes": ["a"]}
        )
        assert metadata.description == "xx"
        assert metadata.grapheme_replacements == ()

    def test_to_dict_is_json_safe(self, german_metadata):
        """Test serialized metadata survives JSON."""
        data = json.loads(json.dumps(german_metadata.to_dict()))
        assert Metadata.from_dict(data) == german_metadata


class TestDictionary:
    """Tests for Dictionary dataclass."""

    def test_counts(self, english_metadata):
        """Test word and pronunciation counts."""
        dictionary = Dictionary(
            data={"cat": ("kæt",), "run": ("rʌn", "rʌns")},
            metadata=english_metadata,
        )
        assert dictionary.count() == 2
        assert dictionary.pronunciation_count() == 3
        assert dictionary.get("run") == ("rʌn", "rʌns")
        assert dictionary.get("dog") is None

    def test_to_dict(self, english_metadata):
        """Test serialization keeps order."""
        dictionary = Dictionary(
            data={"cat": ("kæt",), "run": ("rʌn", "rʌns")},
            metadata=english_metadata,
        )
        data = dictionary.to_dict()
        assert list(data["data"]) == ["cat", "run"]
        assert data["data"]["run"] == ["rʌn", "rʌns"]
        assert data["word_count"] == 2
        assert data["metadata"]["language"] == "en"


class TestDistributions:
    """Tests for Distributions dataclass."""

    def test_to_dict(self):
        """Test serialization."""
        distributions = Distributions({"a": 1.0}, {"ə": 1.0})
        assert distributions.to_dict() == {
            "grapheme_distribution": {"a": 1.0},
            "phoneme_distribution": {"ə": 1.0},
        }
