#!/usr/bin/env python3
"""
TweetFilter CLI Main Application

Typer-based command-line interface with rich formatting.
"""

import sys
from typing import Optional

import typer
from rich.console import Console

from tweetfilter.cli import __version__
from tweetfilter.cli.commands.filter import filter_command, list_filters_command

console = Console()

app = typer.Typer(
    name="tweetfilter",
    help="Filter short text posts by author, timespan and words",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command("filter", help="Print posts matching author, timespan and word criteria")(filter_command)
app.command("filters", help="List available filter types")(list_filters_command)


def version_callback(value: bool):
    """Show version information."""
    if value:
        console.print(f"[bold cyan]TweetFilter[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    ),
):
    """
    TweetFilter - query collections of short text posts.

    [bold]Quick Start:[/bold]

    • Posts by a user: [cyan]tweetfilter filter posts.json --author alyssa[/cyan]
    • Posts with words: [cyan]tweetfilter filter posts.json -w talk -w java[/cyan]
    """
    pass


def main():
    """Entry point for the tweetfilter console script."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
