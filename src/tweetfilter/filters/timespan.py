"""
Timespan-based filtering for posts.

Filters posts by timestamp against a closed interval. Both boundaries are
inclusive. Either boundary may be omitted to leave that side open.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from tweetfilter.filters.base import Filter, FilterResult
from tweetfilter.models import Post, Timespan
from tweetfilter.utils import format_timestamp, parse_timestamp


class TimespanFilter(Filter):
    """
    Filter posts by timestamp.

    Configuration options:
    - timespan: A Timespan instance (takes precedence over start/end)
    - start: Earliest timestamp, inclusive
    - end: Latest timestamp, inclusive

    start and end accept datetimes, Unix timestamps, or any date string
    dateutil understands ("2016-02-17T10:00:00Z", "2016-02-17 10:00").
    Naive values are taken as UTC.

    A reversed interval (end before start) is accepted and passes nothing.
    A start or end that cannot be parsed raises ValueError.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        timespan = self.config.get('timespan')
        if isinstance(timespan, Timespan):
            self.start = timespan.start
            self.end = timespan.end
        else:
            self.start = self._parse_boundary('start')
            self.end = self._parse_boundary('end')

    @property
    def name(self) -> str:
        return "timespan"

    @property
    def description(self) -> str:
        criteria = []
        if self.start:
            criteria.append(f"from {format_timestamp(self.start)}")
        if self.end:
            criteria.append(f"to {format_timestamp(self.end)}")

        if criteria:
            return f"Posts made {' '.join(criteria)} (inclusive)"
        return "No timespan filtering (all posts pass)"

    def _evaluate(self, post: Post) -> FilterResult:
        post_time = post.timestamp
        metadata = {
            "timestamp": format_timestamp(post_time),
            "start": format_timestamp(self.start),
            "end": format_timestamp(self.end)
        }

        if self.start is None and self.end is None:
            return FilterResult(
                passed=True,
                reason="No timespan filter configured",
                metadata=metadata
            )

        if self.start is not None and post_time < self.start:
            metadata["failed_criteria"] = "start"
            return FilterResult(
                passed=False,
                reason=f"Post time {format_timestamp(post_time)} before {format_timestamp(self.start)}",
                metadata=metadata
            )

        if self.end is not None and post_time > self.end:
            metadata["failed_criteria"] = "end"
            return FilterResult(
                passed=False,
                reason=f"Post time {format_timestamp(post_time)} after {format_timestamp(self.end)}",
                metadata=metadata
            )

        return FilterResult(
            passed=True,
            reason=f"Post time {format_timestamp(post_time)} within timespan",
            metadata=metadata
        )

    def _parse_boundary(self, key: str) -> Optional[datetime]:
        value: Union[str, datetime, float, None] = self.config.get(key)
        try:
            return parse_timestamp(value)
        except ValueError as e:
            raise ValueError(f"Could not parse {key} '{value}': {e}") from e

    def validate_config(self) -> List[str]:
        errors = []
        timespan = self.config.get('timespan')
        if timespan is not None and not isinstance(timespan, Timespan):
            errors.append("timespan must be a Timespan instance")

        if self.start and self.end and self.end < self.start:
            errors.append("end must be on or after start")

        return errors

    def get_config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "start": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Posts made on or after this instant (inclusive)",
                    "examples": ["2016-02-17T10:00:00Z", "2016-02-17"]
                },
                "end": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Posts made on or before this instant (inclusive)",
                    "examples": ["2016-02-17T12:00:00Z"]
                }
            },
            "additionalProperties": False,
            "examples": [
                {"start": "2016-02-17T10:00:00Z", "end": "2016-02-17T12:00:00Z"},
                {"start": "2016-02-17"}
            ]
        }
