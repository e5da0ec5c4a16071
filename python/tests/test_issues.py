"""Tests for the issues module."""

import logging

from ipadict.issues import (
    InvalidGraphemeInWordIssue,
    InvalidPhonemeInPronunciationIssue,
    IssueCollector,
    LoggingIssueSink,
    MissingMetadataIssue,
    NullIssueSink,
)
from ipadict.schema import Distributions


class TestIssues:
    """Tests for issue dataclasses."""

    def test_grapheme_issue(self, english_metadata, make_pair):
        """Test invalid grapheme message and serialization."""
        issue = InvalidGraphemeInWordIssue(
            make_pair("Ro2bot", "x"), "ro2bot", "2", english_metadata
        )
        assert "'2'" in issue.message
        assert "Ro2bot" in issue.message

        data = issue.to_dict()
        assert data["kind"] == "invalid_grapheme"
        assert data["invalid_grapheme"] == "2"
        assert data["normalized_word"] == "ro2bot"
        assert data["word_pronunciation"]["word"] == "Ro2bot"

    def test_phoneme_issue(self, english_metadata, make_pair):
        """Test invalid phoneme message and serialization."""
        issue = InvalidPhonemeInPronunciationIssue(
            make_pair("cat", "kæt!"), "!", english_metadata
        )
        assert "'!'" in issue.message
        assert issue.to_dict()["invalid_phoneme"] == "!"
        assert issue.to_dict()["language"] == "en"

    def test_missing_metadata_issue(self, english_metadata):
        """Test missing metadata serialization without reference entry."""
        issue = MissingMetadataIssue(
            english_metadata, Distributions({"a": 1.0}, {"a": 1.0})
        )
        data = issue.to_dict()
        assert data["kind"] == "missing_metadata"
        assert data["reference_entry"] is None
        assert data["metadata"]["language"] == "en"
        assert data["distributions"]["grapheme_distribution"] == {"a": 1.0}
        assert "'en'" in issue.message


class TestSinks:
    """Tests for issue sinks."""

    def test_collector(self, english_metadata, make_pair):
        """Test collector keeps issues in order and filters by type."""
        collector = IssueCollector()
        first = InvalidGraphemeInWordIssue(make_pair("a2", "a"), "a2", "2", english_metadata)
        second = InvalidPhonemeInPronunciationIssue(make_pair("a", "!"), "!", english_metadata)
        collector.report(first)
        collector.report(second)

        assert collector.issues == [first, second]
        assert collector.of_type(InvalidGraphemeInWordIssue) == [first]
        assert collector.counts() == {"invalid_grapheme": 1, "invalid_phoneme": 1}
        assert len(collector) == 2

    def test_logging_sink(self, english_metadata, make_pair, caplog):
        """Test logging sink logs warnings and counts."""
        sink = LoggingIssueSink()
        issue = InvalidPhonemeInPronunciationIssue(make_pair("a", "!"), "!", english_metadata)

        with caplog.at_level(logging.INFO, logger="ipadict.issues"):
            sink.report(issue)
            sink.report(MissingMetadataIssue(english_metadata, Distributions()))

        levels = [r.levelno for r in caplog.records]
        assert levels == [logging.WARNING, logging.INFO]
        assert sink.counts() == {"invalid_phoneme": 1, "missing_metadata": 1}

    def test_null_sink(self, english_metadata, make_pair):
        """Test null sink accepts issues."""
        NullIssueSink().report(
            InvalidPhonemeInPronunciationIssue(make_pair("a", "!"), "!", english_metadata)
        )
