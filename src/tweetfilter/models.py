#!/usr/bin/env python3
"""
Post and Timespan value types.

Both are frozen dataclasses. Timestamps are stored as timezone-aware UTC
datetimes; naive datetimes passed in are interpreted as UTC.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping

from tweetfilter.core.exceptions import ErrorCode, ValidationError
from tweetfilter.utils import ensure_utc, parse_timestamp


@dataclass(frozen=True)
class Post:
    """
    A short text post ("tweet").

    Attributes:
        id: Identifier (uniqueness is not enforced)
        author: Username, stored with its original case
        text: Free-form body text
        timestamp: Instant the post was made (aware, UTC)
    """

    id: int
    author: str
    text: str
    timestamp: datetime

    def __post_init__(self):
        # Frozen dataclass, so normalization goes through object.__setattr__
        object.__setattr__(self, 'timestamp', ensure_utc(self.timestamp))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> 'Post':
        """
        Create a Post from a raw mapping such as a decoded JSON object.

        Args:
            raw: Mapping with 'id', 'author', 'text' and 'timestamp' keys

        Returns:
            Post instance populated from raw data

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        if not isinstance(raw, Mapping):
            raise ValidationError(
                f"Post data must be a mapping, got {type(raw).__name__}",
                error_code=ErrorCode.VALIDATION_TYPE_MISMATCH
            )

        for field_name in ('id', 'author', 'timestamp'):
            if raw.get(field_name) is None:
                raise ValidationError(
                    f"Post is missing required field '{field_name}'",
                    error_code=ErrorCode.VALIDATION_MISSING_FIELD,
                    field_name=field_name
                )

        try:
            id_val = int(raw['id'])
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"Post id must be an integer: {raw['id']!r}",
                error_code=ErrorCode.VALIDATION_TYPE_MISMATCH,
                field_name='id',
                field_value=raw['id'],
                cause=e
            ) from e

        try:
            timestamp_val = parse_timestamp(raw['timestamp'])
        except ValueError as e:
            raise ValidationError(
                f"Post {id_val} has an invalid timestamp: {e}",
                error_code=ErrorCode.VALIDATION_FORMAT_ERROR,
                field_name='timestamp',
                field_value=raw['timestamp'],
                cause=e
            ) from e

        return cls(
            id=id_val,
            author=str(raw['author']),
            text=str(raw.get('text') or ''),
            timestamp=timestamp_val,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the post to a JSON-serializable dictionary."""
        return {
            'id': self.id,
            'author': self.author,
            'text': self.text,
            'timestamp': self.timestamp.isoformat().replace('+00:00', 'Z'),
        }


@dataclass(frozen=True)
class Timespan:
    """
    A closed interval [start, end] of instants.

    end >= start is not enforced. A reversed timespan contains no instant,
    so filtering with it yields no posts; use is_valid to detect it.
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, 'start', ensure_utc(self.start))
        object.__setattr__(self, 'end', ensure_utc(self.end))

    @property
    def is_valid(self) -> bool:
        """Whether end is on or after start."""
        return self.end >= self.start

    def contains(self, instant: datetime) -> bool:
        """Whether instant lies within the timespan, boundaries included."""
        return self.start <= ensure_utc(instant) <= self.end
