"""
TweetFilter CLI Package

Typer-based command-line interface for filtering post collections.
"""

from tweetfilter import __version__

__all__ = ["__version__"]
