"""
Author-based filtering for posts.

Passes posts written by a given username. Usernames are compared
case-insensitively; the stored author keeps its original case.
"""

from typing import Any, Dict, List, Optional

from tweetfilter.filters.base import Filter, FilterResult
from tweetfilter.models import Post


class AuthorFilter(Filter):
    """
    Filter posts by author.

    Configuration options:
    - username: Username to match (case-insensitive)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        # Without a username option every post passes; an explicit non-string
        # username (None included) matches no author
        self.configured = 'username' in self.config
        self.username = self.config.get('username')
        self._folded = self.username.casefold() if isinstance(self.username, str) else None

    @property
    def name(self) -> str:
        return "author"

    @property
    def description(self) -> str:
        if not self.configured:
            return "No author filtering (all posts pass)"
        return f"Posts written by {self.username} (any case)"

    def _evaluate(self, post: Post) -> FilterResult:
        if not self.configured:
            return FilterResult(
                passed=True,
                reason="No author filter configured",
                metadata={"author": post.author}
            )

        metadata = {"author": post.author, "username": self.username}
        if self._folded is not None and post.author.casefold() == self._folded:
            return FilterResult(
                passed=True,
                reason=f"Written by {post.author}",
                metadata=metadata
            )
        return FilterResult(
            passed=False,
            reason=f"Author {post.author} is not {self.username}",
            metadata=metadata
        )

    def validate_config(self) -> List[str]:
        errors = []
        if self.configured and not isinstance(self.username, str):
            errors.append("username must be a string")
        return errors

    def get_config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "username": {
                    "type": "string",
                    "description": "Author username, matched case-insensitively",
                    "examples": ["alyssa", "bbitdiddle"]
                }
            },
            "additionalProperties": False
        }
