"""
Keyword-based filtering for posts.

Passes posts whose text contains at least one of a set of search words.
Matching is on whole tokens, ignoring case.

Tokenization: the text is split on whitespace, punctuation (ASCII and
Unicode alike) is trimmed from both edges of every token, and the
result is casefolded. Search words go through the same normalization,
so "Java!" or “Java”… in a post matches the search word "java" and
"#hype" matches "hype". Punctuation inside a token is kept: "rivest's"
does not match "rivest".
"""

from typing import Any, Dict, List, Optional

from tweetfilter.filters.base import Filter, FilterResult
from tweetfilter.models import Post
from tweetfilter.utils import normalize_word, tokenize


class KeywordFilter(Filter):
    """
    Filter posts by words in their text.

    Configuration options:
    - words: Search words; a post passes if any one of them is present
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.words = self.config.get('words', [])

        # Normalized lookup set; words that normalize to "" can never match
        self._search_words = set()
        if isinstance(self.words, (list, tuple)):
            for word in self.words:
                if isinstance(word, str):
                    normalized = normalize_word(word)
                    if normalized:
                        self._search_words.add(normalized)

    @property
    def name(self) -> str:
        return "keyword"

    @property
    def description(self) -> str:
        if not self.words:
            return "No search words (no posts pass)"
        preview = ', '.join(self.words[:3]) + ("..." if len(self.words) > 3 else "")
        return f"Posts containing any of: {preview}"

    def _evaluate(self, post: Post) -> FilterResult:
        if not self._search_words:
            return FilterResult(
                passed=False,
                reason="No search words given",
                metadata={"words": list(self.words)}
            )

        matched = sorted({token for token in tokenize(post.text) if token in self._search_words})
        metadata = {"words": list(self.words), "matched_words": matched}

        if matched:
            return FilterResult(
                passed=True,
                reason=f"Found words: {', '.join(matched)}",
                metadata=metadata
            )
        return FilterResult(
            passed=False,
            reason="None of the search words found",
            metadata=metadata
        )

    def validate_config(self) -> List[str]:
        errors = []

        if not isinstance(self.words, (list, tuple)):
            errors.append("words must be a list")
            return errors

        for i, word in enumerate(self.words):
            if not isinstance(word, str):
                errors.append(f"words[{i}] must be a string")
            elif not normalize_word(word):
                errors.append(f"words[{i}] is empty or only punctuation")

        return errors

    def get_config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "words": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Words to look for (any one matches, case-insensitive)",
                    "examples": [["talk", "java"], ["rivest"]]
                }
            },
            "additionalProperties": False
        }
