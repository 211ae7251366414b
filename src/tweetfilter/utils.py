#!/usr/bin/env python3
"""
Utility functions for TweetFilter.

This module provides the text tokenizer used for word matching and the
timestamp helpers that normalize instants to timezone-aware UTC datetimes.
"""

import string
import unicodedata
from datetime import datetime, timezone
from typing import Any, List, Optional

from dateutil import parser as date_parser


def _is_edge_char(char: str) -> bool:
    # string.punctuation is ASCII only; categories P* add curly quotes and the like
    return char in string.punctuation or unicodedata.category(char).startswith('P')


def normalize_word(word: str) -> str:
    """
    Normalize a single word for comparison.

    Leading and trailing punctuation is trimmed and the result is casefolded.
    This covers ASCII punctuation and symbols as well as Unicode punctuation
    such as curly quotes and ellipses. Punctuation inside the word is kept.

    Args:
        word: Raw word or token

    Returns:
        str: Normalized word (may be empty)

    Examples:
        >>> normalize_word("Java!")
        'java'
        >>> normalize_word("#hype")
        'hype'
        >>> normalize_word("rivest's")
        "rivest's"
    """
    start, end = 0, len(word)
    while start < end and _is_edge_char(word[start]):
        start += 1
    while end > start and _is_edge_char(word[end - 1]):
        end -= 1
    return word[start:end].casefold()


def tokenize(text: str) -> List[str]:
    """
    Split text into normalized word tokens.

    Tokens are whitespace-delimited substrings of the text, each passed
    through normalize_word(). Tokens that normalize to the empty string
    (a lone "!" or "--") are dropped.

    Args:
        text: Free-form post text

    Returns:
        List[str]: Normalized tokens in text order

    Examples:
        >>> tokenize("I love Java!")
        ['i', 'love', 'java']
        >>> tokenize("rivest talk in 30 minutes #hype")
        ['rivest', 'talk', 'in', '30', 'minutes', 'hype']
    """
    if not text:
        return []
    tokens = []
    for raw in text.split():
        token = normalize_word(raw)
        if token:
            tokens.append(token)
    return tokens


def ensure_utc(value: datetime) -> datetime:
    """
    Return value as a timezone-aware UTC datetime.

    Naive datetimes are interpreted as UTC; aware ones are converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an instant from several input formats.

    Accepts datetime objects, Unix timestamps (int or float seconds) and
    date strings understood by dateutil ("2016-02-17T10:00:00Z",
    "2016-02-17 10:00", "Feb 17 2016 10am").

    Args:
        value: Timestamp in any supported format, or None

    Returns:
        Optional[datetime]: Aware UTC datetime, or None if value is None

    Raises:
        ValueError: If the value cannot be interpreted as an instant
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Invalid timestamp {value!r}: {e}") from e

    if isinstance(value, str):
        if not value.strip():
            raise ValueError("Timestamp string is empty")
        try:
            return ensure_utc(date_parser.parse(value))
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse timestamp '{value}': {e}") from e

    raise ValueError(f"Unsupported timestamp type: {type(value).__name__}")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime for display, or None."""
    if value is None:
        return None
    return value.strftime('%Y-%m-%d %H:%M:%S UTC')
