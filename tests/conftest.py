"""
Test Configuration and Fixtures

Shared fixtures for the test suite: the reference posts used across
filter tests, a posts file on disk, and an environment isolated from
any user configuration.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List

import pytest

from tweetfilter.models import Post


D1 = datetime(2016, 2, 17, 10, 0, 0, tzinfo=timezone.utc)
D2 = datetime(2016, 2, 17, 11, 0, 0, tzinfo=timezone.utc)
D3 = datetime(2016, 2, 17, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def tweet1() -> Post:
    return Post(1, "alyssa", "is it reasonable to talk about rivest so much?", D1)


@pytest.fixture
def tweet2() -> Post:
    return Post(2, "bbitdiddle", "rivest talk in 30 minutes #hype", D2)


@pytest.fixture
def tweet3() -> Post:
    return Post(3, "ALYSSA", "Java is fun! #programming", D3)


@pytest.fixture
def sample_posts(tweet1, tweet2, tweet3) -> List[Post]:
    """The three reference posts, in timestamp order."""
    return [tweet1, tweet2, tweet3]


@pytest.fixture
def sample_post_data() -> List[dict]:
    """Raw post mappings as they appear in a posts file."""
    return [
        {'id': 1, 'author': 'alyssa', 'text': 'is it reasonable to talk about rivest so much?',
         'timestamp': '2016-02-17T10:00:00Z'},
        {'id': 2, 'author': 'bbitdiddle', 'text': 'rivest talk in 30 minutes #hype',
         'timestamp': '2016-02-17T11:00:00Z'},
        {'id': 3, 'author': 'ALYSSA', 'text': 'Java is fun! #programming',
         'timestamp': '2016-02-17T12:00:00Z'},
    ]


@pytest.fixture
def posts_file(tmp_path, sample_post_data) -> Path:
    """A JSON posts file holding the reference posts."""
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(sample_post_data), encoding='utf-8')
    return path


@pytest.fixture
def isolated_env(tmp_path, monkeypatch) -> Path:
    """Run in an empty directory with no TWEETFILTER_* variables or user config."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    for var in ("AUTHOR", "START", "END", "WORDS", "COMPOSITION", "VERBOSE", "DEBUG"):
        monkeypatch.delenv(f"TWEETFILTER_{var}", raising=False)
    return workdir


@pytest.fixture
def d1() -> datetime:
    return D1


@pytest.fixture
def d2() -> datetime:
    return D2


@pytest.fixture
def d3() -> datetime:
    return D3
