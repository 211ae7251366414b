"""
Filter interface and composition.

A Filter judges one post and answers with a FilterResult. FilterChain
runs several filters over the same post and combines their verdicts with
AND or OR, stopping as soon as the outcome is decided.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from tweetfilter.models import Post


class FilterComposition(Enum):
    AND = "and"
    OR = "or"


@dataclass
class FilterResult:
    """
    Verdict of one filter (or chain) on one post.

    Attributes:
        passed: Whether the post is kept
        reason: Short explanation shown in debug output
        metadata: Filter-specific details, e.g. which words matched
        execution_time: Seconds spent deciding
        error: Exception text when the filter itself failed
    """
    passed: bool
    reason: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    execution_time: float = 0.0
    error: Optional[str] = None


class Filter(ABC):
    """
    Base class for post filters.

    Subclasses read their options from ``config`` in ``__init__`` and
    implement ``_evaluate``. Posts are only read, never changed.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Key of this filter in FilterFactory.FILTER_REGISTRY."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary of what the configured filter keeps."""

    @abstractmethod
    def _evaluate(self, post: Post) -> FilterResult:
        """Decide whether post is kept."""

    def apply(self, post: Post) -> FilterResult:
        """
        Evaluate post and time the call.

        An exception from ``_evaluate`` is logged and reported as a failing
        result, so one malformed post cannot abort filtering of the rest.
        """
        started = time.time()
        try:
            result = self._evaluate(post)
        except Exception as e:
            self.logger.error(f"Error applying {self.name} filter to post {getattr(post, 'id', 'unknown')}: {e}")
            result = FilterResult(passed=False, reason=f"Filter error: {e}", error=str(e))
        result.execution_time = time.time() - started
        return result

    def validate_config(self) -> List[str]:
        """Problems with the configured options; empty when usable."""
        return []

    def get_config_schema(self) -> Dict[str, Any]:
        """JSON schema of the options this filter reads."""
        return {"type": "object", "properties": {}, "additionalProperties": False}

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"


class FilterChain:
    """Several filters applied to the same post, combined with AND or OR."""

    def __init__(self, filters: List[Filter], composition: FilterComposition = FilterComposition.AND):
        self.filters = list(filters)
        self.composition = composition

    def apply(self, post: Post) -> FilterResult:
        """
        Run the filters in order until the outcome is known.

        AND stops at the first failure, OR at the first pass. A chain with
        no filters keeps every post.
        """
        started = time.time()
        if not self.filters:
            return FilterResult(passed=True, reason="No filters in chain")

        stop_on = self.composition == FilterComposition.OR
        seen: List[Tuple[Filter, FilterResult]] = []
        for current in self.filters:
            result = current.apply(post)
            seen.append((current, result))
            if result.passed == stop_on:
                verb = "Passed" if stop_on else "Failed"
                extra = {"passed_filter" if stop_on else "failed_filter": current.name}
                return FilterResult(
                    passed=stop_on,
                    reason=f"{verb} {current.name}: {result.reason}",
                    metadata=self._summary(seen, **extra),
                    execution_time=time.time() - started,
                    error=result.error
                )

        return FilterResult(
            passed=not stop_on,
            reason="All filters failed" if stop_on else "All filters passed",
            metadata=self._summary(seen),
            execution_time=time.time() - started
        )

    def _summary(self, seen: List[Tuple[Filter, FilterResult]], **extra) -> Dict[str, Any]:
        summary = {
            "filter_chain": self.composition.value,
            "filters_executed": len(seen),
            "total_filters": len(self.filters),
            "individual_results": [
                {"filter": f.name, "passed": r.passed, "reason": r.reason}
                for f, r in seen
            ],
        }
        summary.update(extra)
        return summary

    def validate_config(self) -> List[str]:
        """Problems reported by every filter, prefixed with the filter name."""
        return [
            f"{current.name}: {problem}"
            for current in self.filters
            for problem in current.validate_config()
        ]

    def __len__(self) -> int:
        return len(self.filters)

    def __str__(self) -> str:
        joiner = f" {self.composition.value.upper()} "
        return f"FilterChain({joiner.join(f.name for f in self.filters)})"
