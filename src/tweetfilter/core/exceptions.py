"""
Error types raised by TweetFilter.

Every error carries a numeric code, a short trace ID for matching CLI
output with log lines, and optional hints the CLI prints under the message.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Numeric error codes, grouped by the thousand."""

    # Configuration (3xxx)
    CONFIG_INVALID_FORMAT = 3001
    CONFIG_INVALID_VALUE = 3003
    CONFIG_FILE_NOT_FOUND = 3004

    # Post data (5xxx)
    VALIDATION_INVALID_INPUT = 5001
    VALIDATION_MISSING_FIELD = 5002
    VALIDATION_TYPE_MISMATCH = 5003
    VALIDATION_FORMAT_ERROR = 5005

    # Input files (6xxx)
    FS_FILE_NOT_FOUND = 6001
    FS_PERMISSION_DENIED = 6002

    UNKNOWN_ERROR = 9000


@dataclass
class ErrorContext:
    """Where an error came from: offending keys and values plus a trace ID."""

    details: Dict[str, Any] = field(default_factory=dict)
    correlation_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])


@dataclass
class RecoverySuggestion:
    """A hint shown to the user below an error."""

    action: str
    description: str
    command: Optional[str] = None


class TweetFilterError(Exception):
    """Base class for errors reported to the user."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[RecoverySuggestion]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.suggestions = list(suggestions or [])


class ConfigurationError(TweetFilterError):
    """Bad configuration file, environment variable or option value."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_INVALID_FORMAT,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, error_code=error_code, **kwargs)
        if config_key:
            self.context.details.update(config_key=config_key, config_value=config_value)

        if error_code == ErrorCode.CONFIG_FILE_NOT_FOUND:
            self.suggestions.append(RecoverySuggestion(
                action="Check configuration path",
                description="Pass an existing YAML or JSON file with --config, or omit it to use defaults."
            ))
        elif error_code == ErrorCode.CONFIG_INVALID_VALUE:
            self.suggestions.append(RecoverySuggestion(
                action="Check configuration values",
                description="Review the configuration file and TWEETFILTER_* environment variables.",
                command="tweetfilter filters"
            ))


class ValidationError(TweetFilterError):
    """Post data that cannot be turned into a Post."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_INVALID_INPUT,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, error_code=error_code, **kwargs)
        if field_name:
            self.context.details.update(field_name=field_name, field_value=field_value)
