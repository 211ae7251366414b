"""
Configuration Management Package

Provides Pydantic-based configuration models and management for TweetFilter.
"""

from tweetfilter.core.config.models import AppConfig, FilterConfig
from tweetfilter.core.config.manager import ConfigManager

__all__ = [
    "AppConfig",
    "FilterConfig",
    "ConfigManager",
]
