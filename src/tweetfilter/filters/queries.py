"""
Query functions over post collections.

Each function returns a new list holding the posts that pass, in their
original order. Inputs are never modified. Empty input and no matches
both give an empty list.
"""

from typing import Iterable, List, Sequence, Union

from tweetfilter.filters.author import AuthorFilter
from tweetfilter.filters.base import Filter, FilterChain
from tweetfilter.filters.keyword import KeywordFilter
from tweetfilter.filters.timespan import TimespanFilter
from tweetfilter.models import Post, Timespan


def _select(posts: Iterable[Post], post_filter) -> List[Post]:
    return [post for post in posts if post_filter.apply(post).passed]


def written_by(posts: Sequence[Post], username: str) -> List[Post]:
    """
    Find posts written by a user.

    Args:
        posts: Posts to search
        username: Author username, compared case-insensitively

    Returns:
        Posts whose author matches username, in their original order
    """
    return _select(posts, AuthorFilter({'username': username}))


def in_timespan(posts: Sequence[Post], timespan: Timespan) -> List[Post]:
    """
    Find posts made within a timespan.

    Args:
        posts: Posts to search
        timespan: Closed interval; a post made exactly at start or end counts

    Returns:
        Posts with start <= timestamp <= end, in their original order
    """
    return _select(posts, TimespanFilter({'timespan': timespan}))


def containing(posts: Sequence[Post], words: Union[str, Sequence[str]]) -> List[Post]:
    """
    Find posts that contain any of the given words.

    See tweetfilter.filters.keyword for the tokenization rule.

    Args:
        posts: Posts to search
        words: Search words; a post matches if it contains at least one.
            A single string is taken as one word.

    Returns:
        Matching posts, each at most once, in their original order
    """
    if isinstance(words, str):
        words = [words]
    return _select(posts, KeywordFilter({'words': list(words)}))


def filter_posts(posts: Sequence[Post], post_filter: Union[Filter, FilterChain]) -> List[Post]:
    """Apply any filter or filter chain to posts, keeping those that pass."""
    return _select(posts, post_filter)
