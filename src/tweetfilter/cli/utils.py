"""
CLI Utilities

Shared utilities for CLI commands: logging setup, loading posts from
disk, and rendering results.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from rich.console import Console
from rich.table import Table

from tweetfilter.core.exceptions import ErrorCode, TweetFilterError, ValidationError
from tweetfilter.models import Post

console = Console()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Set up logging configuration for the application."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def load_posts(path: Path) -> List[Post]:
    """
    Load posts from a JSON file.

    The file holds either a list of post objects or an object with a
    "posts" list. Each post object needs id, author, text and timestamp.

    Args:
        path: Path to the JSON file

    Returns:
        Posts in file order

    Raises:
        TweetFilterError: If the file cannot be read or is not valid JSON
        ValidationError: If the JSON does not describe a list of posts
    """
    if not path.is_file():
        raise TweetFilterError(
            f"Posts file not found: {path}",
            error_code=ErrorCode.FS_FILE_NOT_FOUND
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Posts file {path} is not valid JSON: {e}",
            error_code=ErrorCode.VALIDATION_FORMAT_ERROR,
            cause=e
        ) from e
    except OSError as e:
        raise TweetFilterError(
            f"Could not read posts file {path}: {e}",
            error_code=ErrorCode.FS_PERMISSION_DENIED,
            cause=e
        ) from e

    if isinstance(data, dict):
        data = data.get('posts')
    if not isinstance(data, list):
        raise ValidationError(
            f"Posts file {path} must contain a list of posts",
            error_code=ErrorCode.VALIDATION_TYPE_MISMATCH
        )

    posts = [Post.from_raw(item) for item in data]
    logger.info(f"Loaded {len(posts)} posts from {path}")
    return posts


def posts_to_json(posts: Sequence[Post]) -> str:
    """Serialize posts as a JSON array."""
    return json.dumps([post.to_dict() for post in posts], indent=2, ensure_ascii=False)


def build_posts_table(posts: Sequence[Post], title: str = "Posts") -> Table:
    """Build a rich table listing posts."""
    table = Table(title=title, show_lines=False)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Author", style="green", no_wrap=True)
    table.add_column("Timestamp (UTC)", style="magenta", no_wrap=True)
    table.add_column("Text")

    for post in posts:
        table.add_row(
            str(post.id),
            post.author,
            post.timestamp.strftime('%Y-%m-%d %H:%M:%S'),
            post.text
        )
    return table
