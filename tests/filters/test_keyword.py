"""
Tests for KeywordFilter functionality.

This module tests whole-token, case-insensitive word matching.
"""

import pytest
from datetime import datetime, timezone
from tweetfilter.filters.keyword import KeywordFilter
from tweetfilter.models import Post


class TestKeywordFilter:
    """Test KeywordFilter functionality."""

    def create_post_with_text(self, text: str) -> Post:
        """Create a test post with specified text."""
        return Post(
            id=42,
            author="testuser",
            text=text,
            timestamp=datetime(2016, 2, 17, 10, tzinfo=timezone.utc)
        )

    def test_matching_word_passes(self):
        """Test a post containing a search word."""
        filter_obj = KeywordFilter({'words': ['talk']})
        post = self.create_post_with_text("rivest talk in 30 minutes")

        result = filter_obj.apply(post)

        assert result.passed is True
        assert "talk" in result.reason
        assert result.metadata["matched_words"] == ["talk"]

    def test_missing_word_fails(self):
        """Test a post without any search word."""
        filter_obj = KeywordFilter({'words': ['python']})
        post = self.create_post_with_text("Java is fun!")

        result = filter_obj.apply(post)

        assert result.passed is False
        assert result.metadata["matched_words"] == []

    @pytest.mark.parametrize("text", ["I love Java!", "JAVA", "java.", "(java)", "java?!"])
    def test_edge_punctuation_and_case_ignored(self, text):
        """Test punctuation at token edges and letter case do not block a match."""
        filter_obj = KeywordFilter({'words': ['java']})
        assert filter_obj.apply(self.create_post_with_text(text)).passed is True

    @pytest.mark.parametrize("text", ["javascript", "java-based", "java's"])
    def test_partial_tokens_do_not_match(self, text):
        """Test the search word must equal a whole token."""
        filter_obj = KeywordFilter({'words': ['java']})
        assert filter_obj.apply(self.create_post_with_text(text)).passed is False

    def test_search_word_punctuation_normalized(self):
        """Test search words are normalized like tokens."""
        filter_obj = KeywordFilter({'words': ['Java!']})
        assert filter_obj.apply(self.create_post_with_text("we use java daily")).passed is True

    def test_multiple_matches_reported_once(self):
        """Test each matched word appears once in metadata."""
        filter_obj = KeywordFilter({'words': ['talk', 'rivest', 'absent']})
        post = self.create_post_with_text("rivest talk, then another talk about rivest")

        result = filter_obj.apply(post)

        assert result.passed is True
        assert result.metadata["matched_words"] == ["rivest", "talk"]

    def test_no_words_configured(self):
        """Test a filter without search words passes nothing."""
        filter_obj = KeywordFilter()
        result = filter_obj.apply(self.create_post_with_text("anything at all"))

        assert result.passed is False
        assert "No search words" in result.reason

    def test_punctuation_only_words_ignored(self):
        """Test words that normalize to nothing never match."""
        filter_obj = KeywordFilter({'words': ['!!!']})
        assert filter_obj.apply(self.create_post_with_text("wow !!!")).passed is False

    def test_empty_text(self):
        """Test a post with empty text."""
        filter_obj = KeywordFilter({'words': ['java']})
        assert filter_obj.apply(self.create_post_with_text("")).passed is False

    def test_filter_properties(self):
        """Test filter name and description."""
        filter_obj = KeywordFilter({'words': ['a', 'b', 'c', 'd']})

        assert filter_obj.name == "keyword"
        assert "a, b, c..." in filter_obj.description

    def test_validate_config(self):
        """Test configuration validation."""
        assert KeywordFilter({'words': ['java', 'talk']}).validate_config() == []

        errors = KeywordFilter({'words': ['java', '', 7]}).validate_config()
        assert "words[1] is empty or only punctuation" in errors
        assert "words[2] must be a string" in errors

        assert KeywordFilter({'words': 'java'}).validate_config() == ["words must be a list"]

    def test_config_schema(self):
        """Test configuration schema."""
        schema = KeywordFilter().get_config_schema()

        assert schema["type"] == "object"
        assert "words" in schema["properties"]
        assert schema["properties"]["words"]["type"] == "array"
