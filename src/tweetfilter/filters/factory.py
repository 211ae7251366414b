"""
Building filters by name.

FILTER_REGISTRY maps each filter type to its class. The factory turns
``{'type': ..., 'config': {...}}`` entries, or the ``filters`` section
of the application configuration, into a FilterChain.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from tweetfilter.core.config.models import FilterConfig
from tweetfilter.filters.author import AuthorFilter
from tweetfilter.filters.base import Filter, FilterChain, FilterComposition
from tweetfilter.filters.keyword import KeywordFilter
from tweetfilter.filters.timespan import TimespanFilter


logger = logging.getLogger(__name__)


class FilterFactory:
    """Creates filters and filter chains from plain configuration data."""

    FILTER_REGISTRY: Dict[str, Type[Filter]] = {
        'author': AuthorFilter,
        'timespan': TimespanFilter,
        'keyword': KeywordFilter,
    }

    @classmethod
    def create_filter(cls, filter_type: str, config: Optional[Dict[str, Any]] = None) -> Filter:
        """
        Instantiate the filter registered as filter_type.

        Raises:
            ValueError: If filter_type is not registered, or the filter
                rejects its configuration
        """
        filter_class = cls.FILTER_REGISTRY.get(filter_type)
        if filter_class is None:
            known = ', '.join(sorted(cls.FILTER_REGISTRY))
            raise ValueError(f"Unknown filter type '{filter_type}'. Available types: {known}")
        return filter_class(config)

    @staticmethod
    def parse_composition(composition: Union[str, FilterComposition]) -> FilterComposition:
        """'and'/'or' in any case to FilterComposition; anything else means AND."""
        if isinstance(composition, FilterComposition):
            return composition
        if str(composition).lower() == FilterComposition.OR.value:
            return FilterComposition.OR
        return FilterComposition.AND

    @classmethod
    def create_filter_chain(
        cls,
        filter_configs: List[Dict[str, Any]],
        composition: Union[str, FilterComposition] = FilterComposition.AND
    ) -> FilterChain:
        """
        Build a chain from ``{'type': ..., 'config': {...}}`` entries.

        Raises:
            ValueError: If an entry has no type or its filter cannot be built;
                the message names the entry's position
        """
        filters = []
        for position, entry in enumerate(filter_configs):
            if 'type' not in entry:
                raise ValueError(f"Filter configuration {position} missing 'type' field")
            try:
                filters.append(cls.create_filter(entry['type'], entry.get('config', {})))
            except ValueError as e:
                raise ValueError(f"Error creating filter {position}: {e}") from e

        chain = FilterChain(filters, cls.parse_composition(composition))
        logger.debug(f"Built {chain}")
        return chain

    @classmethod
    def create_from_config(cls, config: Union[FilterConfig, Mapping[str, Any]]) -> Optional[FilterChain]:
        """
        Build a chain from the ``filters`` configuration section.

        Reads author, start, end, words and composition, as produced by
        ConfigManager. A criterion that is unset or empty adds no filter.

        Args:
            config: FilterConfig, or a mapping with the same keys

        Returns:
            FilterChain, or None when no criterion is set
        """
        if isinstance(config, FilterConfig):
            config = config.to_filter_args()

        entries = []
        if config.get('author'):
            entries.append({'type': 'author', 'config': {'username': config['author']}})

        bounds = {key: config[key] for key in ('start', 'end') if config.get(key) is not None}
        if bounds:
            entries.append({'type': 'timespan', 'config': bounds})

        if config.get('words'):
            entries.append({'type': 'keyword', 'config': {'words': list(config['words'])}})

        if not entries:
            return None
        return cls.create_filter_chain(entries, config.get('composition') or FilterComposition.AND)

    @classmethod
    def get_available_filters(cls) -> Dict[str, Dict[str, Any]]:
        """Name, description and option schema of every registered filter type."""
        available = {}
        for filter_type, filter_class in cls.FILTER_REGISTRY.items():
            unconfigured = filter_class({})
            available[filter_type] = {
                'name': unconfigured.name,
                'description': unconfigured.description,
                'schema': unconfigured.get_config_schema(),
            }
        return available
