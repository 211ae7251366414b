"""
Filter Command

Loads posts from a JSON file and prints those matching the given author,
timespan and word criteria. Criteria can also come from a configuration
file or TWEETFILTER_* environment variables.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.table import Table

from tweetfilter.cli.error_handling import handle_error
from tweetfilter.cli.utils import (
    build_posts_table,
    console,
    load_posts,
    posts_to_json,
    setup_logging,
)
from tweetfilter.core.config import ConfigManager
from tweetfilter.core.config.models import FilterConfig
from tweetfilter.core.exceptions import ConfigurationError, ErrorCode, TweetFilterError
from tweetfilter.filters import FilterFactory, filter_posts

logger = logging.getLogger(__name__)


def _build_chain(filters: FilterConfig):
    """Turn the filters configuration section into a validated chain, or None."""
    try:
        filter_chain = FilterFactory.create_from_config(filters)
    except ValueError as e:
        raise ConfigurationError(str(e), error_code=ErrorCode.CONFIG_INVALID_VALUE, cause=e) from e

    problems = filter_chain.validate_config() if filter_chain else []
    if problems:
        raise ConfigurationError(
            f"Invalid filter options: {'; '.join(problems)}",
            error_code=ErrorCode.CONFIG_INVALID_VALUE
        )
    return filter_chain


def filter_command(
    posts_file: Annotated[Path, typer.Argument(help="JSON file holding a list of posts")],

    # Criteria
    author: Annotated[Optional[str], typer.Option("--author", "-a", help="Keep posts by this author (any case)")] = None,
    start: Annotated[Optional[str], typer.Option("--start", help="Keep posts made on or after this instant")] = None,
    end: Annotated[Optional[str], typer.Option("--end", help="Keep posts made on or before this instant")] = None,
    words: Annotated[Optional[List[str]], typer.Option("--word", "-w", help="Keep posts containing this word (repeatable)")] = None,
    match_any: Annotated[Optional[bool], typer.Option("--any", help="Keep posts matching any criterion instead of all")] = None,

    # Settings
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Configuration file path")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Print matching posts as JSON")] = False,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable verbose output")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug", help="Enable debug logging")] = None,
):
    """
    Filter posts by author, timespan and words.

    [bold cyan]Examples:[/bold cyan]

    • [cyan]tweetfilter filter posts.json --author alyssa[/cyan]
    • [cyan]tweetfilter filter posts.json --start 2016-02-17T10:00Z --end 2016-02-17T11:00Z[/cyan]
    • [cyan]tweetfilter filter posts.json -w talk -w java --json[/cyan]
    """
    try:
        app_config = ConfigManager(config).load_config(cli_args={
            'author': author,
            'start': start,
            'end': end,
            'words': words or [],
            'composition': 'or' if match_any else None,
            'verbose': verbose,
            'debug': debug,
        })
        setup_logging(verbose=app_config.verbose, debug=app_config.debug)

        posts = load_posts(posts_file)

        filter_chain = _build_chain(app_config.filters)
        if filter_chain is None:
            logger.info("No filters configured, passing all posts through")
            matched = list(posts)
        else:
            logger.info(f"Applying {filter_chain}")
            matched = filter_posts(posts, filter_chain)
    except TweetFilterError as e:
        handle_error(e)
        return

    if json_output:
        typer.echo(posts_to_json(matched))
        return

    console.print(build_posts_table(matched, title=f"{len(matched)} of {len(posts)} posts"))


def list_filters_command():
    """List the available filter types."""
    table = Table(title="Available filters")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Options", style="green")
    table.add_column("Description")

    for filter_type, info in FilterFactory.get_available_filters().items():
        options = ", ".join(info['schema'].get('properties', {}).keys())
        table.add_row(filter_type, options, info['description'])

    console.print(table)
