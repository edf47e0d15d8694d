"""Configuration models.

This module provides the Pydantic models for git-status-vars settings and the
enums their fields use.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from git_status_vars.utils import parse_duration

DEFAULT_TIMEOUT = "500ms"


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration source names in precedence order.

    Values are ordered from highest precedence (CLI) to lowest (DEFAULT).
    """

    CLI = "cli"
    ENV = "env"
    FILE = "file"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """A configuration source that contributed values.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None = None
    values: dict[str, Any] = field(default_factory=dict)  # pyright: ignore[reportExplicitAny]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT


class Config(BaseModel):
    """git-status-vars settings.

    Attributes:
        prefix: Text written before every output line.
        timeout: Maximum run time as a duration string (``500ms``, ``1.5``,
            ``none``).
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    prefix: str = ""
    timeout: str = DEFAULT_TIMEOUT
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("timeout", mode="before")
    @classmethod
    def _check_timeout(cls, value: object) -> str:
        text = "" if value is None else str(value)
        _ = parse_duration(text)
        return text

    @property
    def timeout_seconds(self) -> float | None:
        """The timeout in seconds, or None when disabled."""
        return parse_duration(self.timeout)
