"""
Filtering System for Posts

Filters posts by author, timespan and words in their text. Each criterion
is a Filter subclass that judges one post at a time; FilterChain combines
them with AND/OR logic, and the query functions apply them to whole
collections.

Key Components:
- written_by, in_timespan, containing: collection-level queries
- Filter: Abstract base class for all filters
- FilterFactory: Factory for creating filters from configuration
- FilterChain: AND/OR composition of filters
"""

from .base import Filter, FilterResult, FilterComposition, FilterChain
from .author import AuthorFilter
from .timespan import TimespanFilter
from .keyword import KeywordFilter
from .factory import FilterFactory
from .queries import written_by, in_timespan, containing, filter_posts

__all__ = [
    "Filter",
    "FilterResult",
    "FilterComposition",
    "FilterChain",
    "FilterFactory",
    "AuthorFilter",
    "TimespanFilter",
    "KeywordFilter",
    "written_by",
    "in_timespan",
    "containing",
    "filter_posts",
]
