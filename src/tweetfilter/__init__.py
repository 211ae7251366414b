"""
TweetFilter

Query short text posts by author, timespan and contained words.
"""

from tweetfilter.models import Post, Timespan
from tweetfilter.filters import written_by, in_timespan, containing, filter_posts

__version__ = "0.1.0"

__all__ = [
    "Post",
    "Timespan",
    "written_by",
    "in_timespan",
    "containing",
    "filter_posts",
]
