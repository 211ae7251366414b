"""
Core TweetFilter Package

Contains core infrastructure components: configuration and error handling.
"""

from tweetfilter.core.exceptions import (
    TweetFilterError,
    ConfigurationError,
    ValidationError,
    ErrorCode,
    ErrorContext,
    RecoverySuggestion
)

__all__ = [
    'TweetFilterError',
    'ConfigurationError',
    'ValidationError',
    'ErrorCode',
    'ErrorContext',
    'RecoverySuggestion',
]
