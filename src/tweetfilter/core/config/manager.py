"""
Layered configuration loading.

Settings are read from, lowest priority first: model defaults, one
configuration file, ``TWEETFILTER_*`` environment variables and command
line options. The merged result is validated as an AppConfig.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from tweetfilter.core.config.models import AppConfig
from tweetfilter.core.exceptions import ConfigurationError, ErrorCode


logger = logging.getLogger(__name__)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off', ''):
        return False
    raise ValueError(f"not a boolean: {value}")


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


# Environment suffix -> (dotted config path, parser)
ENV_SETTINGS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    'AUTHOR': ('filters.author', str),
    'START': ('filters.start', str),
    'END': ('filters.end', str),
    'WORDS': ('filters.words', _parse_list),
    'COMPOSITION': ('filters.composition', str),
    'VERBOSE': ('verbose', _parse_bool),
    'DEBUG': ('debug', _parse_bool),
}

# Command line option name -> dotted config path
CLI_SETTINGS: Dict[str, str] = {
    'author': 'filters.author',
    'start': 'filters.start',
    'end': 'filters.end',
    'words': 'filters.words',
    'composition': 'filters.composition',
    'verbose': 'verbose',
    'debug': 'debug',
}


def _set_path(data: Dict[str, Any], dotted: str, value: Any) -> None:
    *parents, leaf = dotted.split('.')
    for part in parents:
        data = data.setdefault(part, {})
    data[leaf] = value


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge; values from override win."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """
    Loads AppConfig from a file, the environment and command line options.

    When no file is given, the first existing file among
    ``default_config_paths()`` is used, if any.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> Optional[AppConfig]:
        """Result of the last load_config() call."""
        return self._config

    @staticmethod
    def default_config_paths() -> List[Path]:
        cwd = Path.cwd()
        paths = [
            cwd / "tweetfilter.yaml",
            cwd / "tweetfilter.yml",
            cwd / ".tweetfilter.yaml",
            Path.home() / ".config" / "tweetfilter" / "config.yaml",
        ]
        xdg_home = os.environ.get('XDG_CONFIG_HOME')
        if xdg_home:
            paths.append(Path(xdg_home) / "tweetfilter" / "config.yaml")
        return paths

    def load_config(
        self,
        cli_args: Optional[Dict[str, Any]] = None,
        env_prefix: str = "TWEETFILTER_"
    ) -> AppConfig:
        """
        Merge every source and validate the result.

        Args:
            cli_args: Option values keyed by option name; None and [] mean
                "not given" and leave lower layers untouched
            env_prefix: Prefix of the environment variables to read

        Returns:
            The validated configuration, also kept as ``self.config``

        Raises:
            ConfigurationError: If a source cannot be read or the merged
                values are invalid
        """
        data = self._read_file() or {}
        data = _merge(data, self._read_env(env_prefix))
        data = _merge(data, self._read_cli(cli_args or {}))

        try:
            self._config = AppConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                error_code=ErrorCode.CONFIG_INVALID_VALUE,
                cause=e
            ) from e
        return self._config

    def _find_file(self) -> Optional[Path]:
        if self.config_file is None:
            return next((path for path in self.default_config_paths() if path.is_file()), None)
        if not self.config_file.is_file():
            raise ConfigurationError(
                f"Config file not found: {self.config_file}",
                error_code=ErrorCode.CONFIG_FILE_NOT_FOUND,
                config_key="config_file",
                config_value=str(self.config_file)
            )
        return self.config_file

    def _read_file(self) -> Optional[Dict[str, Any]]:
        path = self._find_file()
        if path is None:
            return None

        logger.debug(f"Loading configuration from {path}")
        try:
            text = path.read_text(encoding='utf-8')
            data = json.loads(text) if path.suffix.lower() == '.json' else yaml.safe_load(text)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {path}: {e}", cause=e) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping at the top level",
                error_code=ErrorCode.CONFIG_INVALID_FORMAT
            )
        return data

    @staticmethod
    def _read_env(prefix: str) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for suffix, (dotted, parse) in ENV_SETTINGS.items():
            name = f"{prefix}{suffix}"
            raw = os.environ.get(name)
            if raw is None:
                continue
            try:
                _set_path(data, dotted, parse(raw))
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {name}: {raw} ({e})",
                    error_code=ErrorCode.CONFIG_INVALID_VALUE,
                    config_key=name,
                    config_value=raw
                ) from e
        return data

    @staticmethod
    def _read_cli(cli_args: Dict[str, Any]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for option, value in cli_args.items():
            if option in CLI_SETTINGS and value is not None and value != []:
                _set_path(data, CLI_SETTINGS[option], value)
        return data
