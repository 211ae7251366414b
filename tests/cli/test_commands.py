"""
Tests for CLI Commands

Tests the filter and filters commands through the Typer application.
"""

import json
import pytest
from typer.testing import CliRunner

from tweetfilter import __version__
from tweetfilter.cli.main import app as main_app


def _ids(output: str):
    return [post['id'] for post in json.loads(output)]


@pytest.mark.cli
class TestFilterCommand:
    """Test the filter command functionality."""

    def setup_method(self):
        """Set up test environment for each test."""
        self.runner = CliRunner()

    def test_filter_by_author_table(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '--author', 'alyssa'])

        assert result.exit_code == 0
        assert "2 of 3 posts" in result.stdout
        assert "bbitdiddle" not in result.stdout

    def test_filter_by_author_json(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '-a', 'Alyssa', '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [1, 3]

    def test_filter_by_timespan(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, [
            'filter', str(posts_file),
            '--start', '2016-02-17T10:30:00Z',
            '--end', '2016-02-17T12:00:00Z',
            '--json'
        ])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [2, 3]

    def test_filter_by_words(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '-w', 'TALK', '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [1, 2]

    def test_criteria_combined_with_and(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, [
            'filter', str(posts_file), '--author', 'alyssa', '-w', 'java', '--json'
        ])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [3]

    def test_criteria_combined_with_any(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, [
            'filter', str(posts_file), '--author', 'bbitdiddle', '-w', 'java', '--any', '--json'
        ])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [2, 3]

    def test_no_criteria_passes_everything(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [1, 2, 3]

    def test_json_output_format(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '-w', 'hype', '--json'])

        assert json.loads(result.stdout) == [{
            'id': 2,
            'author': 'bbitdiddle',
            'text': 'rivest talk in 30 minutes #hype',
            'timestamp': '2016-02-17T11:00:00Z',
        }]

    def test_criteria_from_config_file(self, isolated_env, posts_file):
        config_path = isolated_env / "criteria.yaml"
        config_path.write_text("filters:\n  words: [rivest]\n", encoding='utf-8')

        result = self.runner.invoke(main_app, [
            'filter', str(posts_file), '--config', str(config_path), '--json'
        ])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [1, 2]

    def test_criteria_from_environment(self, isolated_env, posts_file, monkeypatch):
        monkeypatch.setenv("TWEETFILTER_AUTHOR", "alyssa")

        result = self.runner.invoke(main_app, ['filter', str(posts_file), '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [1, 3]

    def test_cli_option_overrides_environment(self, isolated_env, posts_file, monkeypatch):
        monkeypatch.setenv("TWEETFILTER_AUTHOR", "alyssa")

        result = self.runner.invoke(main_app, ['filter', str(posts_file), '-a', 'bbitdiddle', '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [2]

    def test_posts_wrapped_in_object(self, isolated_env, tmp_path, sample_post_data):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({'posts': sample_post_data}), encoding='utf-8')

        result = self.runner.invoke(main_app, ['filter', str(path), '-w', 'fun', '--json'])

        assert result.exit_code == 0
        assert _ids(result.stdout) == [3]


@pytest.mark.cli
class TestFilterCommandErrors:
    """Test error reporting from the filter command."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_missing_posts_file(self, isolated_env):
        result = self.runner.invoke(main_app, ['filter', 'does-not-exist.json'])

        assert result.exit_code == 1
        assert "Error 6001" in result.output

    def test_invalid_json(self, isolated_env):
        path = isolated_env / "broken.json"
        path.write_text("[{not json", encoding='utf-8')

        result = self.runner.invoke(main_app, ['filter', str(path)])

        assert result.exit_code == 1
        assert "Error 5005" in result.output

    def test_post_missing_field(self, isolated_env):
        path = isolated_env / "partial.json"
        path.write_text(json.dumps([{'id': 1, 'text': 'no author'}]), encoding='utf-8')

        result = self.runner.invoke(main_app, ['filter', str(path)])

        assert result.exit_code == 1
        assert "Error 5002" in result.output

    def test_reversed_timespan(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, [
            'filter', str(posts_file),
            '--start', '2016-02-17T12:00:00Z',
            '--end', '2016-02-17T10:00:00Z'
        ])

        assert result.exit_code == 1
        assert "Error 3003" in result.output

    def test_unusable_search_word(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '-w', '!!!'])

        assert result.exit_code == 1
        assert "Error 3003" in result.output

    def test_missing_config_file(self, isolated_env, posts_file):
        result = self.runner.invoke(main_app, ['filter', str(posts_file), '--config', 'missing.yaml'])

        assert result.exit_code == 1
        assert "Error 3004" in result.output


@pytest.mark.cli
class TestMainApp:
    """Test top-level application behavior."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(main_app, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help(self):
        result = self.runner.invoke(main_app, ['--help'])

        assert result.exit_code == 0
        assert "filter" in result.stdout

    def test_list_filters(self):
        result = self.runner.invoke(main_app, ['filters'])

        assert result.exit_code == 0
        for filter_type in ("author", "timespan", "keyword"):
            assert filter_type in result.stdout
