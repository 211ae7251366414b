"""
Configuration Models

Pydantic models for type-safe configuration management with validation,
defaults, and field documentation.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tweetfilter.utils import parse_timestamp


class FilterConfig(BaseModel):
    """Configuration for post filtering criteria."""

    model_config = ConfigDict(populate_by_name=True)

    author: Optional[str] = Field(
        default=None,
        alias="username",
        description="Keep only posts by this author (case-insensitive)"
    )
    start: Optional[Union[datetime, str]] = Field(
        default=None,
        description="Keep only posts made on or after this instant (ISO 8601 or any dateutil format)"
    )
    end: Optional[Union[datetime, str]] = Field(
        default=None,
        description="Keep only posts made on or before this instant"
    )
    words: List[str] = Field(
        default=[],
        alias="keywords",
        description="Keep only posts containing at least one of these words"
    )
    composition: str = Field(
        default="and",
        description="How to combine criteria: 'and' (all must match) or 'or' (any may match)"
    )

    @field_validator('author')
    @classmethod
    def validate_author(cls, v):
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("author cannot be empty")
        return v

    @field_validator('start', 'end')
    @classmethod
    def validate_instant(cls, v):
        """Parse instants into aware UTC datetimes."""
        if v is None:
            return v
        return parse_timestamp(v)

    @field_validator('words')
    @classmethod
    def validate_words(cls, v):
        cleaned = [word.strip() for word in v if word and word.strip()]
        return cleaned

    @field_validator('composition')
    @classmethod
    def validate_composition(cls, v):
        v = v.lower()
        if v not in {'and', 'or'}:
            raise ValueError("composition must be 'and' or 'or'")
        return v

    @model_validator(mode='after')
    def validate_timespan(self):
        """A reversed timespan is legal but never matches; reject it in config."""
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError("end must be on or after start")
        return self

    def has_criteria(self) -> bool:
        """Whether any filter criterion is set."""
        return bool(self.author or self.start or self.end or self.words)

    def to_filter_args(self) -> Dict[str, Any]:
        """Convert to the argument mapping understood by FilterFactory.create_from_config."""
        return {
            'author': self.author,
            'start': self.start,
            'end': self.end,
            'words': list(self.words),
            'composition': self.composition,
        }


class AppConfig(BaseModel):
    """Root application configuration model."""

    version: str = Field(default="0.1.0", description="Configuration version")

    filters: FilterConfig = Field(default_factory=FilterConfig, description="Filter configuration")

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging output"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed logging"
    )
